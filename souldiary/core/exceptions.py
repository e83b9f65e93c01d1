from fastapi import HTTPException, status
from typing import Optional, Dict, Any


class BaseAPIException(HTTPException):
    """Base exception for API errors"""
    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={
                "success": False,
                "message": message,
                "error": {
                    "code": error_code,
                    "message": message,
                    "details": self.details
                }
            },
            headers=headers,
        )

    def __str__(self) -> str:  # Ensure str(e) returns the human message
        return self.message


class AuthenticationError(BaseAPIException):
    """No credential was presented"""
    def __init__(self, message: str = "Authentication required", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTH_001",
            message=message,
            details=details,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(BaseAPIException):
    """A credential was presented but failed validation"""
    def __init__(self, message: str = "Invalid or expired token", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            error_code="AUTH_002",
            message=message,
            details=details
        )


class InvalidCredentialsError(BaseAPIException):
    """Wrong login id or password"""
    def __init__(self, message: str = "Invalid credentials", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTH_004",
            message=message,
            details=details
        )


class ValidationError(BaseAPIException):
    """Validation errors"""
    def __init__(self, message: str = "Validation failed", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="VALIDATION_001",
            message=message,
            details=details
        )


class BusinessLogicError(BaseAPIException):
    """Business logic errors"""
    def __init__(self, error_code: str, message: str, details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            details=details
        )


class NotFoundError(BaseAPIException):
    """Resource not found errors"""
    def __init__(self, message: str = "Resource not found", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="NOT_FOUND_001",
            message=message,
            details=details
        )


class ConflictError(BaseAPIException):
    """Resource conflict errors"""
    def __init__(self, error_code: str = "CONFLICT_001", message: str = "Resource conflict", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            error_code=error_code,
            message=message,
            details=details
        )


class InternalServerError(BaseAPIException):
    """Internal server errors"""
    def __init__(self, message: str = "Internal server error", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="INTERNAL_001",
            message=message,
            details=details
        )


class StoreUnavailableError(BaseAPIException):
    """Database unreachable or connection pool exhausted"""
    def __init__(self, message: str = "Store unavailable, please retry", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="DB_001",
            message=message,
            details={"retryable": True, **(details or {})}
        )


class InsufficientBalanceError(BaseAPIException):
    """Insufficient balance errors"""
    def __init__(self, message: str = "Insufficient balance", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="BALANCE_001",
            message=message,
            details=details
        )


class AlreadyOwnedError(ConflictError):
    """The user already owns the sticker"""
    def __init__(self, message: str = "Sticker already owned", details: Optional[Dict] = None):
        super().__init__(error_code="STICKER_002", message=message, details=details)


class StickerNotOwnedError(BusinessLogicError):
    """A sticker the user does not own was applied to a day"""
    def __init__(self, message: str = "Sticker not owned", details: Optional[Dict] = None):
        super().__init__(error_code="STICKER_003", message=message, details=details)
