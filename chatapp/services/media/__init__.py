"""Media services."""

from chatapp.services.media.media_uploader import MediaUploader

__all__ = ["MediaUploader"]
