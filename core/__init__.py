"""
Core Module for N64 Login

Contains core infrastructure components: exceptions, logging, and the
checkerboard tiling used behind every screen.
"""

from .exceptions import (
    ApplicationException,
    InvalidConfigurationError,
)
from .logging_config import setup_logging, get_logger, get_session_id
from .tiling import TilingConfig, FilledRect, render, should_redraw

__all__ = [
    'ApplicationException',
    'InvalidConfigurationError',
    'setup_logging',
    'get_logger',
    'get_session_id',
    'TilingConfig',
    'FilledRect',
    'render',
    'should_redraw',
]
