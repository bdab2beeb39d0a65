"""Shared test fixtures for the chat API tests."""

import copy
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from common.auth import JWTAuth
from common.utils.exceptions import ConflictException
from chatapp.middleware.auth import AuthMiddleware
from chatapp.models.user import normalize_email
from chatapp.services.auth.auth_service import AuthService
from chatapp.services.auth.session_issuer import SessionIssuer

TEST_SECRET = "test-secret"
AVATAR_URL = "https://res.cloudinary.com/demo/image/upload/v1/avatar.png"


class InMemoryUserStore:
    """
    Dict-backed stand-in for UserStore with the same method contract.
    """

    def __init__(self):
        self.users = {}

    def _get(self, user_id):
        try:
            return self.users.get(ObjectId(user_id))
        except (InvalidId, TypeError):
            return None

    @staticmethod
    def _without_password(user):
        return {k: copy.deepcopy(v) for k, v in user.items() if k != "password"}

    async def ensure_indexes(self):
        return None

    async def find_by_email(self, email):
        email = normalize_email(email)
        for user in self.users.values():
            if user["email"] == email:
                return copy.deepcopy(user)
        return None

    async def find_by_id(self, user_id):
        user = self._get(user_id)
        return self._without_password(user) if user else None

    async def create(self, user_doc):
        if await self.find_by_email(user_doc["email"]):
            raise ConflictException(message="Email already exists", code="EMAIL_EXISTS")
        user_doc["_id"] = ObjectId()
        self.users[user_doc["_id"]] = copy.deepcopy(user_doc)
        return user_doc

    async def update_by_id(self, user_id, fields):
        user = self._get(user_id)
        if user is None:
            return None
        user.update(fields)
        user["updatedAt"] = datetime.now(timezone.utc)
        return self._without_password(user)

    async def add_muted_conversation(self, user_id, conversation_user_id):
        user = self._get(user_id)
        if user is None:
            return None
        if str(conversation_user_id) not in [str(c) for c in user["mutedConversations"]]:
            user["mutedConversations"].append(str(conversation_user_id))
        return [str(c) for c in user["mutedConversations"]]

    async def remove_muted_conversation(self, user_id, conversation_user_id):
        user = self._get(user_id)
        if user is None:
            return None
        user["mutedConversations"] = [
            c for c in user["mutedConversations"] if str(c) != str(conversation_user_id)
        ]
        return [str(c) for c in user["mutedConversations"]]


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # find_one_and_update stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def jwt_auth():
    # Minimum bcrypt cost keeps the suite fast
    return JWTAuth(secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def user_store():
    return InMemoryUserStore()


@pytest.fixture
def session_issuer(jwt_auth):
    return SessionIssuer(auth=jwt_auth, cookie_name="jwt", secure=False)


@pytest.fixture
def avatar_url():
    return AVATAR_URL


@pytest.fixture
def media_uploader():
    uploader = MagicMock()
    uploader.upload = AsyncMock(return_value=AVATAR_URL)
    return uploader


@pytest.fixture
def auth_service(user_store, jwt_auth, session_issuer, media_uploader):
    return AuthService(
        user_store=user_store,
        auth=jwt_auth,
        session_issuer=session_issuer,
        media_uploader=media_uploader,
    )


@pytest.fixture
def auth_middleware(jwt_auth, user_store):
    return AuthMiddleware(auth=jwt_auth, user_store=user_store, cookie_name="jwt")
