"""User services."""

from chatapp.services.user.user_store import UserStore

__all__ = ["UserStore"]
