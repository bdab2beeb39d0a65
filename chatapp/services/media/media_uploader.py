"""
Avatar upload to Cloudinary.

Returns the canonical ``secure_url`` of the uploaded asset.
"""

import asyncio
import logging
from typing import Optional, Dict, Any

import cloudinary.uploader

from common.utils.exceptions import ServerException

logger = logging.getLogger(__name__)


class MediaUploader:
    """
    Uploads raw image data (data URI, remote URL or file path) to Cloudinary.
    """

    def __init__(
        self,
        cloud_name: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        folder: Optional[str] = None,
    ):
        """
        Initialize MediaUploader.

        Credentials are passed with every upload call, so several uploaders
        with different accounts can coexist in one process.

        Args:
            cloud_name: Cloudinary cloud name
            api_key: Cloudinary API key
            api_secret: Cloudinary API secret
            folder: Optional folder for uploaded assets
        """
        self._options: Dict[str, Any] = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
            "resource_type": "image",
        }
        if folder:
            self._options["folder"] = folder

    @property
    def is_configured(self) -> bool:
        return all(
            self._options.get(key) for key in ("cloud_name", "api_key", "api_secret")
        )

    async def upload(self, image_data: str) -> str:
        """
        Upload an image.

        Args:
            image_data: Data URI, URL or path accepted by Cloudinary

        Returns:
            The secure URL of the stored image

        Raises:
            ServerException: Not configured, or the upload failed
        """
        if not self.is_configured:
            logger.error("Cloudinary credentials are not configured")
            raise ServerException(
                message="Image upload is not configured",
                code="UPLOAD_NOT_CONFIGURED"
            )

        try:
            # The SDK is blocking
            result = await asyncio.to_thread(
                cloudinary.uploader.upload, image_data, **self._options
            )
        except Exception as e:
            logger.error(f"Cloudinary upload failed: {e}")
            raise ServerException(
                message="Image upload failed",
                code="UPLOAD_FAILED"
            )

        secure_url = result.get("secure_url")
        if not secure_url:
            logger.error(f"Cloudinary response missing secure_url: {result}")
            raise ServerException(
                message="Image upload failed",
                code="UPLOAD_FAILED"
            )

        logger.info(f"Uploaded image {result.get('public_id')}")
        return secure_url
