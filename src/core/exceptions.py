"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    CAPTCHA_REQUIRED = "CAPTCHA_REQUIRED"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    MASTER_TOKEN_REQUIRED = "MASTER_TOKEN_REQUIRED"
    CAPTCHA_FAILED = "CAPTCHA_FAILED"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORMAT_VIOLATION = "FORMAT_VIOLATION"

    # Conflict errors (409)
    SCREEN_NAME_TAKEN = "SCREEN_NAME_TAKEN"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CAPTCHA_UNAVAILABLE = "CAPTCHA_UNAVAILABLE"


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


class AuthenticationError(AppException):
    """Authentication failed or a mandatory credential is missing."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class ProfilePermissionError(AuthorizationError):
    """Caller tried to change a profile owned by someone else."""

    def __init__(self) -> None:
        super().__init__("You cannot change another user's profile")


class PrivilegeRequiredError(AppException):
    """A master token is required but a weaker token was supplied."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.MASTER_TOKEN_REQUIRED,
            message="Authenticate with a master token",
            status_code=403,
        )


class CaptchaError(AppException):
    """The CAPTCHA service rejected the supplied response."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.CAPTCHA_FAILED,
            message="CAPTCHA verification failed",
            status_code=403,
        )


class CaptchaTransportError(AppException):
    """The CAPTCHA verification call itself failed."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.CAPTCHA_UNAVAILABLE,
            message="CAPTCHA service error",
            status_code=502,
            details={"reason": reason} if reason else None,
        )


class FormatViolationError(AppException):
    """A field failed its configured format rule."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(
            error_code=ErrorCode.FORMAT_VIOLATION,
            message=message,
            status_code=400,
            details={"field": field},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
            details={"profile_id": profile_id} if profile_id else None,
        )


class TokenNotFoundError(AppException):
    """Token not found."""

    def __init__(self, token_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TOKEN_NOT_FOUND,
            message=f"Token not found: {token_id}",
            status_code=404,
            details={"token_id": token_id},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class ScreenNameTakenError(AppException):
    """Screen name is already used by another record."""

    def __init__(self, sn: str) -> None:
        super().__init__(
            error_code=ErrorCode.SCREEN_NAME_TAKEN,
            message=f"Screen name already taken: {sn}",
            status_code=409,
            details={"sn": sn},
        )
