"""
Configuration Exceptions

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ConfigError(Exception):
    """
    Configuration could not be loaded.

    Attributes:
        message: Human-readable error description
        source: Configuration file involved, if any
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.context = context or {}
        if source:
            self.context["source"] = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} (source={self.source})"
        return self.message


class ConfigValidationError(ConfigError):
    """A configuration key is unknown or its value is invalid."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        source: Optional[str] = None
    ) -> None:
        super().__init__(message, source=source, context={"key": key} if key else None)
        self.key = key
