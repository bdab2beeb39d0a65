"""
Authentication module - password hashing and signed session tokens.
"""

from common.auth.base import AuthProvider
from common.auth.jwt_auth import JWTAuth

__all__ = ["AuthProvider", "JWTAuth"]
