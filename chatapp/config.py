"""
Chat app settings.

Extends the base settings with session cookie and media store configuration.
"""

from typing import Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Chat app specific settings."""

    # ==========================================================================
    # Session Cookie
    # ==========================================================================
    SESSION_COOKIE_NAME: str = "jwt"

    # ==========================================================================
    # Cloudinary (avatar uploads)
    # ==========================================================================
    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[str] = None
    CLOUDINARY_API_SECRET: Optional[str] = None
    CLOUDINARY_FOLDER: Optional[str] = None

    def session_cookie_secure(self) -> bool:
        """Session cookies are Secure everywhere except local development."""
        return not self.is_development()


# Global settings instance
settings = Settings()
