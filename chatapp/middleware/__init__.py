"""Request middleware."""

from chatapp.middleware.auth import AuthMiddleware

__all__ = ["AuthMiddleware"]
