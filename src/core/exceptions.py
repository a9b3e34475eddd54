"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_USER = "DUPLICATE_USER"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    PROFILE_READ_FAILED = "PROFILE_READ_FAILED"
    PROFILE_SAVE_FAILED = "PROFILE_SAVE_FAILED"
    PROFILE_DELETE_FAILED = "PROFILE_DELETE_FAILED"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class DuplicateUserError(AppException):
    """A profile with the same email or phone already exists."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_USER,
            message="User already exists",
            status_code=400,
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User does not exist",
            status_code=404,
            details={"profile_id": profile_id},
        )


class ProfileReadError(AppException):
    """The store could not be read."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_READ_FAILED,
            message="Failed to read profile",
            status_code=500,
        )


class ProfileSaveError(AppException):
    """The store rejected a create or update."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_SAVE_FAILED,
            message="Failed to save profile",
            status_code=500,
        )


class ProfileDeleteError(AppException):
    """The store rejected a delete."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_DELETE_FAILED,
            message=f"Failed to delete profile id={profile_id}",
            status_code=500,
        )
