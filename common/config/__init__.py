"""Environment-driven settings shared by every app package."""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
