"""
Standard API response helpers.

Error bodies carry only a human-readable message; success bodies that are
not a plain resource carry a ``success`` flag next to their fields.

Example:
    from common.utils import success_response, message_response

    return success_response(mutedConversations=["abc"])
    return message_response("Logged out successfully")
"""

from typing import Any, Dict


def message_response(message: str) -> Dict[str, Any]:
    """
    Create a message-only response body.

    Used for both errors and acknowledgements that have no payload.

    Args:
        message: Human-readable message

    Returns:
        Dictionary with a single ``message`` key
    """
    return {"message": message}


def success_response(**fields: Any) -> Dict[str, Any]:
    """
    Create a success response with top-level fields.

    Args:
        **fields: Payload fields placed next to ``success``

    Returns:
        Dictionary with success=True and the given fields
    """
    response: Dict[str, Any] = {"success": True}
    response.update(fields)
    return response
