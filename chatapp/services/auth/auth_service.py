"""
Authentication and profile operations.

Each operation validates its input, reads or mutates the user store, and
returns the body to send back. Session cookies are written onto the
FastAPI response passed in by the router.
"""

import asyncio
import logging
from typing import List

from fastapi import Response

from common.auth.base import AuthProvider
from common.utils.exceptions import (
    ValidationException,
    ConflictException,
    InvalidCredentialsException,
    NotFoundException,
)
from common.utils.password import validate_password
from chatapp.models.user import new_user_document, public_view, serialize_user
from chatapp.schemas.auth import ProfileUpdate
from chatapp.services.auth.session_issuer import SessionIssuer
from chatapp.services.media.media_uploader import MediaUploader
from chatapp.services.user.user_store import UserStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    """
    Signup, login, logout, profile updates and conversation muting.
    """

    def __init__(
        self,
        user_store: UserStore,
        auth: AuthProvider,
        session_issuer: SessionIssuer,
        media_uploader: MediaUploader,
    ):
        """
        Initialize AuthService.

        Args:
            user_store: User persistence
            auth: Password hashing provider
            session_issuer: Writes the session cookie
            media_uploader: Avatar upload target
        """
        self._user_store = user_store
        self._auth = auth
        self._session_issuer = session_issuer
        self._media_uploader = media_uploader

    async def signup(
        self,
        full_name: str,
        email: str,
        password: str,
        response: Response,
    ) -> dict:
        """
        Create an account and start a session.

        Returns:
            Public view of the new user

        Raises:
            ValidationException: Missing field or short password
            ConflictException: Email already registered
        """
        if not full_name or not full_name.strip() or not email or not email.strip() or not password:
            raise ValidationException(message="All fields are required")

        is_valid, errors = validate_password(password, min_length=MIN_PASSWORD_LENGTH)
        if not is_valid:
            raise ValidationException(message=errors[0], code="WEAK_PASSWORD")

        if await self._user_store.find_by_email(email):
            raise ConflictException(message="Email already exists", code="EMAIL_EXISTS")

        password_hash = await asyncio.to_thread(self._auth.hash_password, password)
        user = await self._user_store.create(
            new_user_document(full_name.strip(), email, password_hash)
        )

        await self._session_issuer.mint(str(user["_id"]), response)

        logger.info(f"User signed up: {user['_id']}")
        return public_view(user)

    async def login(self, email: str, password: str, response: Response) -> dict:
        """
        Verify credentials and start a session.

        Returns:
            Public view of the user

        Raises:
            InvalidCredentialsException: Unknown email or wrong password
        """
        user = await self._user_store.find_by_email(email) if email else None
        if not user:
            logger.warning("Login failed: unknown email")
            raise InvalidCredentialsException()

        if not password or not await asyncio.to_thread(
            self._auth.verify_password, password, user.get("password", "")
        ):
            logger.warning(f"Login failed: wrong password for user {user['_id']}")
            raise InvalidCredentialsException()

        await self._session_issuer.mint(str(user["_id"]), response)

        logger.info(f"User logged in: {user['_id']}")
        return public_view(user)

    def logout(self, response: Response) -> None:
        """End the session by clearing the cookie."""
        self._session_issuer.clear(response)

    async def update_profile(self, caller_id: str, update: ProfileUpdate) -> dict:
        """
        Apply a partial profile update.

        Args:
            caller_id: Authenticated user's id
            update: Fields to change; None means "not provided"

        Returns:
            The updated user record without the password hash

        Raises:
            ValidationException: Nothing to update
            NotFoundException: The caller no longer exists
            ServerException: Avatar upload failed
        """
        fields = {}

        if update.profilePic:
            fields["profilePic"] = await self._media_uploader.upload(update.profilePic)

        if isinstance(update.about, str):
            fields["about"] = update.about

        if isinstance(update.fullName, str) and update.fullName.strip():
            fields["fullName"] = update.fullName.strip()

        if not fields:
            raise ValidationException(message="No profile fields to update")

        user = await self._user_store.update_by_id(caller_id, fields)
        if user is None:
            raise NotFoundException(message="User not found", code="USER_NOT_FOUND")

        logger.info(f"Profile updated for user {caller_id}: {sorted(fields)}")
        return serialize_user(user)

    def check_auth(self, caller: dict) -> dict:
        """Echo the user resolved by the auth middleware."""
        return serialize_user(caller)

    async def mute_conversation(self, caller_id: str, conversation_user_id: str) -> List[str]:
        """
        Add a conversation to the caller's muted set (idempotent).

        Returns:
            The resulting muted conversation ids
        """
        if not conversation_user_id:
            raise ValidationException(message="conversationUserId is required")

        muted = await self._user_store.add_muted_conversation(caller_id, conversation_user_id)
        if muted is None:
            raise NotFoundException(message="User not found", code="USER_NOT_FOUND")
        return muted

    async def unmute_conversation(self, caller_id: str, conversation_user_id: str) -> List[str]:
        """
        Remove a conversation from the caller's muted set (idempotent).

        Returns:
            The resulting muted conversation ids
        """
        if not conversation_user_id:
            raise ValidationException(message="conversationUserId is required")

        muted = await self._user_store.remove_muted_conversation(caller_id, conversation_user_id)
        if muted is None:
            raise NotFoundException(message="User not found", code="USER_NOT_FOUND")
        return muted
