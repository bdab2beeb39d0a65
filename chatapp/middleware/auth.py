"""
Authentication middleware for protected routes.

Resolves the session cookie into the caller's user record and attaches it
to the request.
"""

import logging

from fastapi import Request

from common.auth.base import AuthProvider
from common.utils.exceptions import (
    UnauthorizedException,
    NotFoundException,
    InternalServerException,
)
from chatapp.services.user.user_store import UserStore

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """
    Validates the session cookie and attaches the user to the request.
    """

    def __init__(
        self,
        auth: AuthProvider,
        user_store: UserStore,
        cookie_name: str = "jwt",
    ):
        """
        Initialize AuthMiddleware.

        Args:
            auth: Provider used to verify token signatures
            user_store: For loading the caller
            cookie_name: Name of the session cookie
        """
        self._auth = auth
        self._user_store = user_store
        self._cookie_name = cookie_name

    async def require_auth(self, request: Request) -> dict:
        """
        Validate request is authenticated.

        Args:
            request: HTTP request object

        Returns:
            User document (without password) attached to request.state.user

        Raises:
            UnauthorizedException: No cookie, bad signature or expired token
            NotFoundException: Token is valid but the user no longer exists
            InternalServerException: The user lookup failed
        """
        token = request.cookies.get(self._cookie_name)

        if not token:
            raise UnauthorizedException(
                message="Unauthorized - No Token Provided",
                code="AUTH_REQUIRED"
            )

        try:
            payload = await self._auth.verify_token(token)
        except ValueError as e:
            logger.debug(f"Session token rejected: {e}")
            raise UnauthorizedException(
                message="Unauthorized - Invalid Token",
                code="INVALID_TOKEN"
            )

        try:
            user = await self._user_store.find_by_id(payload["sub"])
        except Exception as e:
            logger.error(f"Failed to load session user: {e}")
            raise InternalServerException()

        if not user:
            raise NotFoundException(
                message="User not found",
                code="USER_NOT_FOUND"
            )

        request.state.user = user
        return user
