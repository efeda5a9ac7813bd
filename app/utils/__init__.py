"""
Utility functions for the application
"""
from .validators import (
    validate_username,
    validate_handle,
    parse_category,
    is_record_id,
    parse_record_id
)
from .text import (
    derive_handle,
    split_tags,
    contains_pattern
)
from .pagination import (
    paginate,
    list_payload
)

__all__ = [
    # Validators
    "validate_username",
    "validate_handle",
    "parse_category",
    "is_record_id",
    "parse_record_id",
    # Text
    "derive_handle",
    "split_tags",
    "contains_pattern",
    # Pagination
    "paginate",
    "list_payload",
]
