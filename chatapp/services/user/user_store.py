"""
User persistence over a raw Motor collection.

Lookups return None when nothing matches; driver errors propagate.
Mute/unmute are single atomic updates so concurrent requests for the same
user cannot drop each other's changes.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from common.utils.exceptions import ConflictException
from chatapp.models.user import USERS_COLLECTION, WITHOUT_PASSWORD, normalize_email

logger = logging.getLogger(__name__)


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


def _id_forms(value: str) -> list:
    """String id plus its ObjectId form, when it parses as one."""
    oid = _object_id(value)
    return [value, oid] if oid is not None else [value]


def _muted_list(user: Optional[dict]) -> Optional[List[str]]:
    if user is None:
        return None
    return [str(c) for c in user.get("mutedConversations", [])]


class UserStore:
    """
    Reads and writes user documents.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserStore.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._users_collection = db[USERS_COLLECTION]

    async def ensure_indexes(self) -> None:
        """Create the unique email index. Safe to call on every startup."""
        await self._users_collection.create_index("email", unique=True)
        logger.info("User indexes ensured")

    async def find_by_email(self, email: str) -> Optional[dict]:
        """
        Load user by email, including the password hash.

        Args:
            email: Email address (any case)

        Returns:
            User document or None if not found
        """
        return await self._users_collection.find_one({"email": normalize_email(email)})

    async def find_by_id(self, user_id: str) -> Optional[dict]:
        """
        Load user by id, without the password hash.

        Args:
            user_id: ObjectId as string

        Returns:
            User document or None if not found or the id is malformed
        """
        oid = _object_id(user_id)
        if oid is None:
            return None
        return await self._users_collection.find_one({"_id": oid}, WITHOUT_PASSWORD)

    async def create(self, user_doc: dict) -> dict:
        """
        Insert a new user document.

        Args:
            user_doc: Document built by ``new_user_document``

        Returns:
            The document with its assigned ``_id``

        Raises:
            ConflictException: The email is already taken
        """
        try:
            result = await self._users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.info("Signup rejected by unique email index")
            raise ConflictException(
                message="Email already exists",
                code="EMAIL_EXISTS"
            )

        user_doc["_id"] = result.inserted_id
        logger.debug(f"User document created: {result.inserted_id}")
        return user_doc

    async def update_by_id(self, user_id: str, fields: dict) -> Optional[dict]:
        """
        Set fields on a user and return the updated document.

        Args:
            user_id: ObjectId as string
            fields: Field values to ``$set``

        Returns:
            Updated document without the password hash, or None if missing
        """
        oid = _object_id(user_id)
        if oid is None:
            return None

        update = dict(fields)
        update["updatedAt"] = datetime.now(timezone.utc)

        logger.debug(f"Updating user {user_id}: {sorted(fields)}")
        return await self._users_collection.find_one_and_update(
            {"_id": oid},
            {"$set": update},
            projection=WITHOUT_PASSWORD,
            return_document=ReturnDocument.AFTER,
        )

    async def add_muted_conversation(
        self,
        user_id: str,
        conversation_user_id: str
    ) -> Optional[List[str]]:
        """
        Add a conversation to the user's muted set.

        Entries stored as ObjectId count as the same conversation, so the
        push only applies when no form of the id is present yet.

        Returns:
            The resulting muted list, or None if the user is missing
        """
        oid = _object_id(user_id)
        if oid is None:
            return None

        conversation_user_id = str(conversation_user_id)
        user = await self._users_collection.find_one_and_update(
            {
                "_id": oid,
                "mutedConversations": {"$nin": _id_forms(conversation_user_id)},
            },
            {
                "$push": {"mutedConversations": conversation_user_id},
                "$set": {"updatedAt": datetime.now(timezone.utc)},
            },
            projection={"mutedConversations": 1},
            return_document=ReturnDocument.AFTER,
        )
        if user is None:
            # Already muted, or no such user
            user = await self._users_collection.find_one(
                {"_id": oid}, {"mutedConversations": 1}
            )
        return _muted_list(user)

    async def remove_muted_conversation(
        self,
        user_id: str,
        conversation_user_id: str
    ) -> Optional[List[str]]:
        """
        Remove every occurrence of a conversation from the muted set.

        Returns:
            The resulting muted list, or None if the user is missing
        """
        oid = _object_id(user_id)
        if oid is None:
            return None

        user = await self._users_collection.find_one_and_update(
            {"_id": oid},
            {
                "$pull": {
                    "mutedConversations": {"$in": _id_forms(str(conversation_user_id))}
                },
                "$set": {"updatedAt": datetime.now(timezone.utc)},
            },
            projection={"mutedConversations": 1},
            return_document=ReturnDocument.AFTER,
        )
        return _muted_list(user)
