"""
Pydantic models for auth and profile request bodies.

Fields are optional at the schema level: presence and emptiness checks are
done by AuthService so clients get its error messages rather than a
generic validation failure.
"""

from typing import Optional
from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Request body for account creation."""
    fullName: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request body for login."""
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    None means "not provided"; an empty ``about`` is a valid replacement.
    """
    profilePic: Optional[str] = Field(
        None, description="Image data (data URI, URL or base64) to upload as avatar"
    )
    about: Optional[str] = None
    fullName: Optional[str] = None


class MuteConversationRequest(BaseModel):
    """Request body for mute/unmute."""
    conversationUserId: Optional[str] = Field(
        None, description="User id identifying the conversation"
    )
