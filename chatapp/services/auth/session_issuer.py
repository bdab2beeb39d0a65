"""
Session cookie issuance.

A session is a signed JWT bound to the user id, carried in an HttpOnly
cookie. Nothing is stored server-side: validity is signature plus expiry.
"""

import logging
from datetime import timedelta

from fastapi import Response

from common.auth.base import AuthProvider

logger = logging.getLogger(__name__)


class SessionIssuer:
    """
    Mints and clears the session cookie.
    """

    def __init__(
        self,
        auth: AuthProvider,
        cookie_name: str = "jwt",
        max_age: timedelta = timedelta(days=7),
        secure: bool = True,
    ):
        """
        Initialize SessionIssuer.

        Args:
            auth: Provider used to sign tokens
            cookie_name: Name of the session cookie
            max_age: Cookie lifetime (should match the token lifetime)
            secure: Send the cookie over HTTPS only
        """
        self._auth = auth
        self._cookie_name = cookie_name
        self._max_age = int(max_age.total_seconds())
        self._secure = secure

    async def mint(self, user_id: str, response: Response) -> str:
        """
        Sign a token for the user and attach it to the response.

        Args:
            user_id: The user's id
            response: Outgoing response receiving the cookie

        Returns:
            The signed token
        """
        token = await self._auth.create_token(str(user_id))
        response.set_cookie(
            key=self._cookie_name,
            value=token,
            max_age=self._max_age,
            httponly=True,
            samesite="strict",
            secure=self._secure,
        )
        logger.debug(f"Session cookie issued for user {user_id}")
        return token

    def clear(self, response: Response) -> None:
        """Overwrite the session cookie with an empty, already-expired value."""
        response.set_cookie(
            key=self._cookie_name,
            value="",
            max_age=0,
            httponly=True,
            samesite="strict",
            secure=self._secure,
        )
