"""
Request field validation helpers.
"""

import re
from typing import Any, Iterable, Mapping, Optional

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def validate_required_fields(record: Mapping[str, Any], required_fields: Iterable[str]) -> Optional[str]:
    """
    Check that every required field is present and not empty.

    Args:
        record: Decoded request body
        required_fields: Field names, checked in order

    Returns:
        None when all fields are present, otherwise a message naming the
        first missing field
    """
    for field in required_fields:
        value = record.get(field)
        if value is None or value == '':
            return f'Missing required field: {field}'
    return None


def is_valid_email(value: Any) -> bool:
    """Return True if ``value`` has the local@domain.tld shape."""
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None
