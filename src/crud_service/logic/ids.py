"""
Identifier generation.

Identifiers are random version-4 UUIDs (122 random bits), so the chance of a
collision among n identifiers is roughly n**2 / 2**123.
"""

from typing import Optional
from uuid import uuid4


def generate_id(prefix: Optional[str] = None) -> str:
    """
    Generate an opaque unique identifier.

    Args:
        prefix: Optional prefix, joined to the random part with an underscore

    Returns:
        Identifier such as ``user_3f2c9a1e0b7d4c6e8a5f1b2d3c4e5f60``
    """
    identifier = uuid4().hex
    return f'{prefix}_{identifier}' if prefix else identifier
