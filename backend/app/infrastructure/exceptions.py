"""
Custom Exceptions for the University Discovery backend

Hierarchical exception classes for proper error handling across layers.
"""

from typing import Optional, Dict, Any


class UniDiscoveryError(Exception):
    """Base exception for all University Discovery errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(UniDiscoveryError):
    """Raised when input validation fails."""
    pass


class InvalidInputError(ValidationError):
    """
    Raised by the prediction core when a required argument is missing.

    Covers a None university/profile passed to a prediction and a
    non-list collection passed to a batch prediction.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details, original_error)


class DatabaseError(UniDiscoveryError):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, details, original_error)


class NotFoundError(DatabaseError):
    """Raised when a requested resource is not found."""
    pass


class ConfigurationError(UniDiscoveryError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
