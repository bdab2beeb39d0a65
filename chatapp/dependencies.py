"""
FastAPI dependencies for the chat app.

Services are built once at startup by ``init_all_services`` and handed to
routes through the getters below, so tests can swap them with
``app.dependency_overrides``.
"""

from datetime import timedelta
from typing import Annotated, Optional

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import JWTAuth
from chatapp.config import Settings
from chatapp.middleware.auth import AuthMiddleware
from chatapp.services.auth.auth_service import AuthService
from chatapp.services.auth.session_issuer import SessionIssuer
from chatapp.services.media.media_uploader import MediaUploader
from chatapp.services.user.user_store import UserStore


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_user_store: Optional[UserStore] = None
_auth_service: Optional[AuthService] = None
_auth_middleware: Optional[AuthMiddleware] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_all_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database connection
        settings: Application settings (must include JWT_SECRET)
    """
    global _user_store, _auth_service, _auth_middleware

    auth = JWTAuth(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_days=settings.JWT_EXPIRE_DAYS,
        bcrypt_rounds=settings.BCRYPT_ROUNDS,
    )

    _user_store = UserStore(db=db)

    session_issuer = SessionIssuer(
        auth=auth,
        cookie_name=settings.SESSION_COOKIE_NAME,
        max_age=timedelta(days=settings.JWT_EXPIRE_DAYS),
        secure=settings.session_cookie_secure(),
    )

    media_uploader = MediaUploader(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        folder=settings.CLOUDINARY_FOLDER,
    )

    _auth_service = AuthService(
        user_store=_user_store,
        auth=auth,
        session_issuer=session_issuer,
        media_uploader=media_uploader,
    )

    _auth_middleware = AuthMiddleware(
        auth=auth,
        user_store=_user_store,
        cookie_name=settings.SESSION_COOKIE_NAME,
    )


# ─────────────────────────────────────────────────────────────────
# Getters
# ─────────────────────────────────────────────────────────────────

def get_user_store() -> UserStore:
    """Get user store instance."""
    if _user_store is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _user_store


def get_auth_service() -> AuthService:
    """Get auth service instance."""
    if _auth_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _auth_service


def get_auth_middleware() -> AuthMiddleware:
    """Get auth middleware instance."""
    if _auth_middleware is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _auth_middleware


async def require_auth(
    request: Request,
    auth_middleware: Annotated[AuthMiddleware, Depends(get_auth_middleware)]
) -> dict:
    """
    Dependency that requires a valid session cookie.

    Usage:
        @router.get("/protected")
        async def protected_route(user: Annotated[dict, Depends(require_auth)]):
            return {"user_id": str(user["_id"])}
    """
    return await auth_middleware.require_auth(request)
