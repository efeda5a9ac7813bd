"""
Text helpers for handles, tags and search patterns
"""
import re
from typing import List, Optional, Union

HANDLE_MAX_LENGTH = 30


def derive_handle(value: str) -> str:
    """Lowercase, drop everything but a-z0-9, cut to 30 characters."""
    return re.sub(r'[^a-z0-9]', '', (value or "").lower())[:HANDLE_MAX_LENGTH]


def split_tags(tags: Optional[Union[str, List[str]]]) -> List[str]:
    """Turn "a, b ,c" (or a list) into a trimmed list, skipping empty entries."""
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(',')
    return [tag.strip() for tag in tags if tag and tag.strip()]


def contains_pattern(term: str) -> str:
    """Build a LIKE pattern matching ``term`` anywhere; use with escape="\\"."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
