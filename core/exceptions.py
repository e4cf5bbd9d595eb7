"""
Application exceptions.

Errors carry a message for the log and a list of steps shown to the user
by main_ui when startup fails.
"""

from typing import List, Optional


class ApplicationException(Exception):
    """Base class for errors raised by this application."""

    def __init__(
        self,
        message: str,
        resolution_steps: Optional[List[str]] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message)
        self.message = message
        self.resolution_steps = resolution_steps or []
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def get_user_message(self) -> str:
        """Message plus numbered resolution steps, for a dialog."""
        lines = [self.message]
        if self.resolution_steps:
            lines.append("")
            lines.append("Possible solutions:")
            lines.extend(f"  {i}. {step}" for i, step in enumerate(self.resolution_steps, 1))
        return "\n".join(lines)


class InvalidConfigurationError(ApplicationException):
    """A setting, from YAML, the environment or code, is out of range or unparseable."""

    def __init__(
        self,
        field: str = "",
        value: str = "",
        message: str = "Invalid configuration",
        resolution_steps: Optional[List[str]] = None
    ):
        default_steps = [
            f"Check '{field}' in config/*.yaml" if field else "Check config/*.yaml",
            "Check the N64LOGIN_* environment variables",
        ]
        super().__init__(
            message=message,
            resolution_steps=resolution_steps or default_steps,
            details={"field": field, "value": value}
        )
        self.field = field
        self.value = value
