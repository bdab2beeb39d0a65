"""
Abstract authentication provider interface.

Defines the contract for password hashing and signed-token handling so the
session layer does not depend on a particular hashing or token library.

Example:
    from common.auth import AuthProvider, JWTAuth

    def get_auth_provider(settings) -> AuthProvider:
        return JWTAuth(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    Token methods are async so implementations backed by remote services
    fit the same interface.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """
        Hash a password with a salted one-way hash.

        Args:
            password: Plaintext password

        Returns:
            The encoded hash
        """
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Compare a plaintext password with a stored hash.

        Args:
            password: Plaintext password
            hashed: Stored hash

        Returns:
            True if the password matches
        """
        pass

    @abstractmethod
    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user's ID
            **claims: Additional claims to include in the token

        Returns:
            The authentication token string
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub)

        Raises:
            ValueError: If token is invalid or expired
        """
        pass
