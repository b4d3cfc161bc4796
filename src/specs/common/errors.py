"""
Common exception classes for the application
"""
from typing import Optional, Dict, Any


class CanvaAutomationError(Exception):
    """Base exception class for Canva automation errors"""
    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code


class ValidationError(CanvaAutomationError):
    """Raised when a request body is missing fields or carries invalid values"""
    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class NotFoundError(CanvaAutomationError):
    """Raised when a requested record is not found"""
    status_code = 404

    def __init__(self, resource_type: str, details: Optional[Dict[str, Any]] = None):
        # Callers get the same message whether the id is unknown or the collection is unreadable
        message = f"{resource_type} not found"
        super().__init__(message, code="RESOURCE_NOT_FOUND", details=details)


class StorageError(CanvaAutomationError):
    """Raised when a collection file cannot be written"""
    status_code = 500

    def __init__(self, message: str, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        super().__init__(message, code="STORAGE_ERROR", details=details)
        self.path = path


class ConfigurationError(CanvaAutomationError):
    """Raised when there's an error in configuration or environment variables"""
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
