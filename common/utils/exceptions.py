"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException so a service can raise a single exception
type and have the application render it as a ``{"message": ...}`` body.

Example:
    from common.utils import NotFoundException

    user = await user_store.find_by_id(user_id)
    if not user:
        raise NotFoundException("User not found", code="USER_NOT_FOUND")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Keeps the human-readable message on the instance so exception handlers
    can render it without unpacking ``detail``.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message (sent to the client)
            code: Machine-readable error code (logged, not sent)
            headers: Optional response headers
        """
        self.message = message
        self.code = code

        detail: Dict[str, Any] = {"message": message}
        if code:
            detail["code"] = code

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )


class ValidationException(APIException):
    """400 Bad Request - Missing or malformed input."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
    ):
        super().__init__(400, message, code)


class ConflictException(APIException):
    """400 Bad Request - Resource already exists (e.g. duplicate email)."""

    def __init__(
        self,
        message: str = "Conflict",
        code: str = "CONFLICT",
    ):
        super().__init__(400, message, code)


class InvalidCredentialsException(APIException):
    """
    400 Bad Request - Login failed.

    The message is deliberately the same whether the email is unknown or the
    password is wrong.
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        code: str = "INVALID_CREDENTIALS",
    ):
        super().__init__(400, message, code)


class UnauthorizedException(APIException):
    """401 Unauthorized - Missing or invalid session token."""

    def __init__(
        self,
        message: str = "Unauthorized",
        code: str = "UNAUTHORIZED",
    ):
        super().__init__(401, message, code)


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        code: str = "NOT_FOUND",
    ):
        super().__init__(404, message, code)


class InternalServerException(APIException):
    """500 Internal Server Error - Store, hashing or upload failure."""

    def __init__(
        self,
        message: str = "Internal Server Error",
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(500, message, code)


# Alias for InternalServerException
ServerException = InternalServerException
