"""
Exception classes for the nano_jason pipelines.
"""
from typing import Any, Dict, Optional


class NanoJasonError(Exception):
    """Base exception for all nano_jason errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class InvalidInputError(NanoJasonError):
    """Raised when the input text is missing, not a string, or blank."""

    def __init__(self, message: str = "Input text must be a non-empty string", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="INVALID_INPUT", details=details)


class UnknownTemplateError(NanoJasonError, KeyError):
    """Raised when a quick template name does not exist for a mode."""

    def __init__(self, mode: str, name: str, available=()):
        super().__init__(
            f"Unknown template '{name}' for mode '{mode}'",
            error_code="UNKNOWN_TEMPLATE",
            details={"mode": mode, "template": name, "available": list(available)}
        )

    def __str__(self):
        return self.message


class ConfigurationError(NanoJasonError):
    """Raised for an unknown mode or an invalid configuration file."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIGURATION_ERROR", details={"config_key": config_key})
