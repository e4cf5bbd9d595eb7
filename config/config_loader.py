"""
Configuration Loader

Settings come from three layers, later ones winning:
config/default.yaml, config/<N64LOGIN_ENV>.yaml, then N64LOGIN_* variables.
Each variable has its own converter; a value that does not convert is an
InvalidConfigurationError rather than a silent guess.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, NamedTuple, Optional

import yaml

from core.exceptions import InvalidConfigurationError

CONFIG_DIR = Path(__file__).parent


def _to_float(value: str) -> float:
    return float(value)


def _to_level_name(value: str) -> str:
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level {value!r}")
    return name


def _to_text(value: str) -> str:
    if not value.strip():
        raise ValueError("empty value")
    return value.strip()


class EnvOverride(NamedTuple):
    path: str
    convert: Callable[[str], Any]


ENV_OVERRIDES: Dict[str, EnvOverride] = {
    'N64LOGIN_LOG_LEVEL': EnvOverride('logging.level', _to_level_name),
    'N64LOGIN_LOG_PATH': EnvOverride('logging.file.path', _to_text),
    'N64LOGIN_CELL_SIZE': EnvOverride('background.cell_size', _to_float),
    'N64LOGIN_COLOR_A': EnvOverride('background.color_a', _to_text),
    'N64LOGIN_COLOR_B': EnvOverride('background.color_b', _to_text),
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def _merge(base: Dict, override: Dict) -> None:
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """
    Layered application settings, shared as a singleton.

    Usage:
        from config import get_config
        cell_size = get_config().get('background.cell_size')
    """

    _instance: Optional['Config'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self) -> None:
        self._config: Dict[str, Any] = _read_yaml(CONFIG_DIR / 'default.yaml')

        env = os.environ.get('N64LOGIN_ENV', 'development').lower()
        _merge(self._config, _read_yaml(CONFIG_DIR / f'{env}.yaml'))

        for variable, override in ENV_OVERRIDES.items():
            raw = os.environ.get(variable)
            if raw is None:
                continue
            try:
                value = override.convert(raw)
            except ValueError:
                raise InvalidConfigurationError(
                    field=override.path,
                    value=raw,
                    message=f"{variable}={raw!r} is not valid for {override.path}"
                )
            self._set(override.path, value)

    def _set(self, path: str, value: Any) -> None:
        *parents, leaf = path.split('.')
        current = self._config
        for key in parents:
            current = current.setdefault(key, {})
        current[leaf] = value

    def get(self, path: str, default: Any = None) -> Any:
        """
        Look up a dot-separated path such as 'logging.level'.

        Returns `default` when any part of the path is missing.
        """
        current = self._config
        for key in path.split('.'):
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def get_all(self) -> Dict[str, Any]:
        """Get the entire configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Re-read the YAML files and environment."""
        self._load_config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
