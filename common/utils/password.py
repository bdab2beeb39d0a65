"""
Password policy validation.

Configurable password validation; the defaults match the chat app's signup
rule (at least 6 characters, no character-class requirements).

Example:
    from common.utils import validate_password

    is_valid, errors = validate_password("secret")
    if not is_valid:
        print("Password errors:", errors)

    # Stricter policy
    is_valid, errors = validate_password(
        "MyP@ss123",
        min_length=10,
        require_digit=True,
    )
"""

import re
from typing import List, Tuple


def validate_password(
    password: str,
    min_length: int = 6,
    require_uppercase: bool = False,
    require_lowercase: bool = False,
    require_digit: bool = False,
) -> Tuple[bool, List[str]]:
    """
    Validate password against a policy.

    Args:
        password: The password to validate
        min_length: Minimum password length
        require_uppercase: Require at least one uppercase letter
        require_lowercase: Require at least one lowercase letter
        require_digit: Require at least one digit

    Returns:
        Tuple of (is_valid: bool, errors: List[str])

    Examples:
        >>> validate_password("abc")
        (False, ['Password must be at least 6 characters'])

        >>> validate_password("secret1")
        (True, [])
    """
    errors: List[str] = []

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters")

    if require_uppercase and not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")

    if require_lowercase and not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")

    if require_digit and not re.search(r"\d", password):
        errors.append("Password must contain at least one digit")

    return len(errors) == 0, errors
