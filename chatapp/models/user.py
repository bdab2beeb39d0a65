"""
User document helpers.

Users are stored as plain documents in the ``users`` collection:

    {
        "_id": ObjectId,
        "email": str,                  # unique, lower-cased
        "fullName": str,
        "password": str,               # bcrypt hash
        "profilePic": str,
        "about": str,
        "mutedConversations": [str],   # treated as a set
        "createdAt": datetime,
        "updatedAt": datetime,
    }

The password hash never leaves this layer: every view built here drops it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

USERS_COLLECTION = "users"

# Fields never sent to a client
PRIVATE_FIELDS = ("password",)

# Projection that keeps the password hash out of query results
WITHOUT_PASSWORD = {"password": 0}


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively."""
    return email.strip().lower()


def new_user_document(
    full_name: str,
    email: str,
    password_hash: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the document inserted on signup."""
    now = now or datetime.now(timezone.utc)
    return {
        "fullName": full_name,
        "email": normalize_email(email),
        "password": password_hash,
        "profilePic": "",
        "about": "",
        "mutedConversations": [],
        "createdAt": now,
        "updatedAt": now,
    }


def serialize_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """
    Full client view of a stored user.

    Every stored field except the password hash, with ``_id`` as a string.
    """
    data = {k: v for k, v in user.items() if k not in PRIVATE_FIELDS}
    if "_id" in data:
        data["_id"] = str(data["_id"])
    if "mutedConversations" in data:
        data["mutedConversations"] = [str(c) for c in data["mutedConversations"]]
    return data


def public_view(user: Dict[str, Any]) -> Dict[str, Any]:
    """Subset returned by signup and login."""
    return {
        "_id": str(user["_id"]),
        "fullName": user.get("fullName"),
        "email": user.get("email"),
        "profilePic": user.get("profilePic", ""),
    }
