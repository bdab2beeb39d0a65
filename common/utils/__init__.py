"""
Utilities module - Common helpers for API responses, exceptions, and validation.
"""

from common.utils.responses import success_response, message_response
from common.utils.exceptions import (
    APIException,
    ValidationException,
    ConflictException,
    InvalidCredentialsException,
    UnauthorizedException,
    NotFoundException,
    ServerException,
    InternalServerException,
)
from common.utils.password import validate_password

__all__ = [
    "success_response",
    "message_response",
    "APIException",
    "ValidationException",
    "ConflictException",
    "InvalidCredentialsException",
    "UnauthorizedException",
    "NotFoundException",
    "ServerException",
    "InternalServerException",
    "validate_password",
]
