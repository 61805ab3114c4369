"""Library settings read from the environment.

``reload_from_env()`` runs once at import; call it again after changing
environment variables (tests do this through ``monkeypatch``).
"""

from dataclasses import dataclass
import logging
import os
from typing import Optional, Union

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class _Settings:
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def _env_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in _LEVELS:
        logging.getLogger(__name__).warning("ignoring %s=%r, using %s", name, raw, default)
        return default
    return level


def reload_from_env() -> None:
    _settings.LOG_LEVEL = _env_level("SHAPESCENE_LOG_LEVEL", "INFO")


def get() -> _Settings:
    return _settings


def log_level(level: Optional[Union[int, str]] = None) -> int:
    """Resolve ``level`` to a logging constant; ``None`` means LOG_LEVEL."""
    if level is None:
        level = _settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    return getattr(logging, name) if name in _LEVELS else logging.INFO


reload_from_env()


__all__ = ["get", "log_level", "reload_from_env"]
