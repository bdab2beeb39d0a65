"""
Document models and client-facing views.
"""

from chatapp.models.user import (
    USERS_COLLECTION,
    WITHOUT_PASSWORD,
    normalize_email,
    new_user_document,
    serialize_user,
    public_view,
)

__all__ = [
    "USERS_COLLECTION",
    "WITHOUT_PASSWORD",
    "normalize_email",
    "new_user_document",
    "serialize_user",
    "public_view",
]
