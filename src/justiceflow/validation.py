"""Input validation run before any store mutation.

Every check raises ``ValidationFailed`` with a message fit to show the user;
services turn that into an ``invalid`` outcome.
"""

import re
from datetime import date
from typing import Iterable, Optional

from .config import settings
from .utils.errors import ValidationFailed

PHONE_PATTERN = re.compile(r"^\d{10}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NIC_LENGTH = 12
PASSWORD_SYMBOLS = "!@#$%^&*"


def require(**fields) -> None:
    """Reject blank required fields, naming the first one missing."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationFailed(f"{name.replace('_', ' ').capitalize()} is required.")


def validate_phone(contact: str) -> None:
    if not PHONE_PATTERN.match(contact or ""):
        raise ValidationFailed("Invalid phone number format. Please enter 10 digits.")


def validate_nic(nic: str) -> None:
    if len(nic or "") != NIC_LENGTH:
        raise ValidationFailed(f"NIC must be exactly {NIC_LENGTH} characters.")


def validate_iso_date(value: str, field: str = "date", allow_future: bool = True) -> None:
    """Require ``YYYY-MM-DD``; range filters compare these as strings."""
    if not ISO_DATE_PATTERN.match(value or ""):
        raise ValidationFailed(f"{field.capitalize()} must be in YYYY-MM-DD format.")
    try:
        parsed = date.fromisoformat(value)
    except ValueError as e:
        raise ValidationFailed(f"{field.capitalize()} is not a valid calendar date.") from e
    if not allow_future and parsed > date.today():
        raise ValidationFailed(f"{field.capitalize()} cannot be in the future.")


def validate_password(password: str, min_length: Optional[int] = None) -> None:
    """Length, upper case, lower case, digit and one of ``!@#$%^&*``."""
    min_length = min_length or settings.PASSWORD_MIN_LENGTH
    password = password or ""
    if (
        len(password) < min_length
        or not any(c.islower() for c in password)
        or not any(c.isupper() for c in password)
        or not any(c.isdigit() for c in password)
        or not any(c in PASSWORD_SYMBOLS for c in password)
    ):
        raise ValidationFailed(
            f"New password is too weak. It must have {min_length}+ characters, "
            f"an uppercase letter, a lowercase letter, a number and a special "
            f"character ({PASSWORD_SYMBOLS})."
        )


def validate_choice(value: str, allowed: Iterable[str], field: str) -> None:
    allowed = list(allowed)
    if value not in allowed:
        raise ValidationFailed(f"{field.capitalize()} must be one of: {', '.join(allowed)}.")


__all__ = [
    "PHONE_PATTERN",
    "NIC_LENGTH",
    "PASSWORD_SYMBOLS",
    "require",
    "validate_phone",
    "validate_nic",
    "validate_iso_date",
    "validate_password",
    "validate_choice",
]
