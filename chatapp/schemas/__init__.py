"""
Request schemas.
"""

from chatapp.schemas.auth import (
    SignupRequest,
    LoginRequest,
    ProfileUpdate,
    MuteConversationRequest,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "ProfileUpdate",
    "MuteConversationRequest",
]
