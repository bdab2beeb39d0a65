"""
FastAPI router for auth and profile endpoints.

Signup, login, logout, profile update, session check and conversation
muting. Every route turns unexpected failures into a 500 with a generic
message and logs the cause.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from chatapp.dependencies import get_auth_service, require_auth
from chatapp.schemas.auth import (
    SignupRequest,
    LoginRequest,
    ProfileUpdate,
    MuteConversationRequest,
)
from chatapp.services.auth.auth_service import AuthService
from common.utils import (
    APIException,
    InternalServerException,
    message_response,
    success_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUser = Annotated[dict, Depends(require_auth)]


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    response: Response,
    auth_service: AuthServiceDep,
):
    """
    Create an account.

    Sets the session cookie and returns the public user view.
    """
    try:
        return await auth_service.signup(
            full_name=body.fullName,
            email=body.email,
            password=body.password,
            response=response,
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error in signup: {e}")
        raise InternalServerException()


@router.post("/login")
async def login(
    body: LoginRequest,
    response: Response,
    auth_service: AuthServiceDep,
):
    """
    Log in with email and password.
    """
    try:
        return await auth_service.login(
            email=body.email,
            password=body.password,
            response=response,
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error in login: {e}")
        raise InternalServerException()


@router.post("/logout")
async def logout(
    response: Response,
    auth_service: AuthServiceDep,
):
    """
    Log out by clearing the session cookie.
    """
    try:
        auth_service.logout(response)
    except Exception as e:
        logger.error(f"Error in logout: {e}")
        raise InternalServerException()
    return message_response("Logged out successfully")


@router.put("/update-profile")
async def update_profile(
    body: ProfileUpdate,
    user: CurrentUser,
    auth_service: AuthServiceDep,
):
    """
    Update avatar, about text and/or display name.

    Only provided fields are changed.
    """
    try:
        return await auth_service.update_profile(str(user["_id"]), body)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error in update profile: {e}")
        raise InternalServerException()


@router.get("/check")
async def check_auth(
    user: CurrentUser,
    auth_service: AuthServiceDep,
):
    """
    Return the authenticated user.
    """
    try:
        return auth_service.check_auth(user)
    except Exception as e:
        logger.error(f"Error in check auth: {e}")
        raise InternalServerException()


@router.post("/mute-conversation")
async def mute_conversation(
    body: MuteConversationRequest,
    user: CurrentUser,
    auth_service: AuthServiceDep,
):
    """
    Mute notifications for a conversation.
    """
    try:
        muted = await auth_service.mute_conversation(
            str(user["_id"]), body.conversationUserId
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error in mute conversation: {e}")
        raise InternalServerException()
    return success_response(mutedConversations=muted)


@router.post("/unmute-conversation")
async def unmute_conversation(
    body: MuteConversationRequest,
    user: CurrentUser,
    auth_service: AuthServiceDep,
):
    """
    Unmute a conversation.
    """
    try:
        muted = await auth_service.unmute_conversation(
            str(user["_id"]), body.conversationUserId
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error in unmute conversation: {e}")
        raise InternalServerException()
    return success_response(mutedConversations=muted)
