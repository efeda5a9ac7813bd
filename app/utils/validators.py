"""
Custom validators for the application
"""
import re
from typing import Optional

from app.core.exceptions import ValidationError
from app.models.category import Category


def validate_username(username: str) -> bool:
    """
    Validate username format
    - 3-50 characters
    - Only alphanumeric, underscore, dash
    """
    if not username or len(username) < 3 or len(username) > 50:
        return False
    pattern = r'^[a-zA-Z0-9_-]+$'
    return bool(re.match(pattern, username))


def validate_handle(handle: str) -> bool:
    """Validate a normalized channel handle: 1-30 lowercase letters or digits"""
    return bool(handle) and bool(re.match(r'^[a-z0-9]{1,30}$', handle))


def parse_category(value: str):
    """
    Resolve a category filter value.

    Returns None when no filtering should happen ("All" or empty) and raises
    ValidationError for names outside the category list.
    """
    if not value or value == "All":
        return None
    try:
        return Category(value)
    except ValueError:
        raise ValidationError(f"Unknown category: {value}")


# Largest value a signed 64-bit primary key can hold
MAX_RECORD_ID = 2 ** 63 - 1


def is_record_id(value: int) -> bool:
    """Whether ``value`` can be a stored primary key."""
    return 0 < value <= MAX_RECORD_ID


def parse_record_id(value: str) -> Optional[int]:
    """
    Read a stored record id from its string form.

    Only the canonical spelling counts ("7", not "07" or "+7"), so a string
    that parses maps back to exactly one string.
    """
    if not value or not value.isdecimal():
        return None
    record_id = int(value)
    if str(record_id) != value or not is_record_id(record_id):
        return None
    return record_id
