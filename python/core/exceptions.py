"""
Custom exception hierarchy for the application.
All exceptions inherit from AppException for unified handling.
"""

from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        status_code: HTTP status code for API responses
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# === Not Found Errors ===

class NotFoundError(AppException):
    """Resource not found."""

    def __init__(self, entity: str, identifier: str = None):
        message = f"{entity} not found"
        if identifier:
            message = f"{entity} '{identifier}' not found"
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404
        )


class GalleryNotFoundError(NotFoundError):
    def __init__(self, gallery_id: str):
        super().__init__("Gallery", gallery_id)


class PhotoNotFoundError(NotFoundError):
    def __init__(self, photo_id: str):
        super().__init__("Photo", photo_id)


# === Validation Errors ===

class ValidationError(AppException):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code=code,
            status_code=422,
            details=details
        )


class InvalidImageError(ValidationError):
    def __init__(self, reason: str = "Invalid or unsupported image"):
        super().__init__(message=reason, field="file")


# === Conflict Errors ===

class ConflictError(AppException):
    """Request conflicts with the current state of a resource."""

    def __init__(self, message: str, code: str = "CONFLICT", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code=code,
            status_code=409,
            details=details
        )


class DuplicateGalleryCodeError(ConflictError):
    def __init__(self, code: str):
        super().__init__(
            message=f"Gallery code '{code}' is already in use",
            code="DUPLICATE_CODE",
            details={"field": "code"}
        )


class DeletionInProgressError(ConflictError):
    def __init__(self, photo_id: str):
        super().__init__(
            message=f"Photo '{photo_id}' is already being deleted",
            code="DELETION_IN_PROGRESS",
            details={"photo_id": photo_id}
        )


class ConfirmationRequiredError(ConflictError):
    """Irreversible operation requested without explicit confirmation."""

    def __init__(self, prompt: str):
        super().__init__(
            message=prompt,
            code="CONFIRMATION_REQUIRED",
            details={"prompt": prompt}
        )


# === Database Errors ===

class DatabaseError(AppException):
    """Database operation failed."""

    def __init__(self, message: str, operation: str = None):
        details = {"operation": operation} if operation else {}
        super().__init__(
            message=f"Database error: {message}",
            code="DATABASE_ERROR",
            status_code=500,
            details=details
        )


# === Storage Errors ===

class StorageError(AppException):
    """Blob storage operation failed."""

    def __init__(self, message: str, key: str = None, code: str = "STORAGE_ERROR", status_code: int = 500):
        details = {"key": key} if key else {}
        super().__init__(
            message=message,
            code=code,
            status_code=status_code,
            details=details
        )


class BlobNotFoundError(StorageError):
    def __init__(self, key: str):
        super().__init__(
            message=f"Object '{key}' not found",
            key=key,
            code="BLOB_NOT_FOUND",
            status_code=404
        )


# === Workflow Errors ===

class PhotoDeletionError(AppException):
    """Canonical photo record could not be deleted."""

    def __init__(self, photo_id: str, reason: str):
        super().__init__(
            message=f"Failed to delete photo '{photo_id}': {reason}",
            code="PHOTO_DELETION_FAILED",
            status_code=500,
            details={"photo_id": photo_id}
        )


# === Authentication Errors ===

class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            code="AUTHENTICATION_ERROR",
            status_code=401
        )


class InvalidGalleryPasswordError(AuthenticationError):
    def __init__(self):
        super().__init__(message="Invalid gallery password")
