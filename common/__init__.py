"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection with Motor
- auth: bcrypt password hashing and JWT session tokens
- utils: Standard responses, exceptions, password validation
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import AuthProvider, JWTAuth
from common.utils import (
    success_response,
    message_response,
    APIException,
    ValidationException,
    ConflictException,
    InvalidCredentialsException,
    UnauthorizedException,
    NotFoundException,
    InternalServerException,
    validate_password,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "AuthProvider",
    "JWTAuth",
    # Utils
    "success_response",
    "message_response",
    "APIException",
    "ValidationException",
    "ConflictException",
    "InvalidCredentialsException",
    "UnauthorizedException",
    "NotFoundException",
    "InternalServerException",
    "validate_password",
    # Config
    "BaseAppSettings",
]
