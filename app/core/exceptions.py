"""
Domain exceptions raised by the service layer
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application exceptions"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PersistenceError(AppError):
    """The store rejected a write; nothing was changed"""

    def __init__(self, message: str = "Operation failed. Please try again.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConfirmationRequired(AppError):
    """A destructive operation was issued without explicit confirmation"""

    def __init__(self, message: str = "This action cannot be undone and must be confirmed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidStatus(AppError):
    """Target status is not part of the resource's declared enumeration"""


class EntityNotFound(AppError):
    """Requested row does not exist"""


class VerificationUnavailable(AppError):
    """The privileged verification function could not produce an answer"""


class RoleLookupError(AppError):
    """Reading a role assignment from the store failed"""
