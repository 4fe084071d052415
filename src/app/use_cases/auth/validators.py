"""
Credential normalization and validation rules.
"""

import re
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

MIN_PASSWORD_LENGTH = 8
# bcrypt only accepts up to 72 bytes of input
MAX_PASSWORD_BYTES = 72

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")


def normalize_email(email: Optional[str]) -> str:
    """Trim and lower-case an email; None becomes an empty string"""
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def password_violations(password: str) -> List[str]:
    """Return every password policy rule the password breaks"""
    violations = []
    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        violations.append(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    if not _UPPERCASE.search(password):
        violations.append("Password must contain an uppercase letter")
    if not _LOWERCASE.search(password):
        violations.append("Password must contain a lowercase letter")
    if not _DIGIT.search(password):
        violations.append("Password must contain a number")
    return violations


def registration_violations(email: str, password: Optional[str]) -> List[str]:
    """
    Validate a registration attempt.

    Args:
        email: Already normalized email
        password: Plaintext password as submitted

    Returns:
        List of human readable violations, empty when the input is valid
    """
    violations = []
    if not email:
        violations.append("Email is required")
    elif not is_valid_email(email):
        violations.append("Invalid email format")

    if not password:
        violations.append("Password is required")
    else:
        violations.extend(password_violations(password))
    return violations
