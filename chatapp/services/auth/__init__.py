"""Auth services."""

from chatapp.services.auth.session_issuer import SessionIssuer
from chatapp.services.auth.auth_service import AuthService

__all__ = [
    "SessionIssuer",
    "AuthService",
]
