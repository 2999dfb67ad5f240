#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import re

from .exceptions import ValidationException

_POSITIVE_INT = re.compile(r"[0-9]+")


def parse_id(value: str, name: str = "id") -> int:
    """
    Parse a path parameter as a positive integer id.

    Args:
        value: Raw path segment.
        name: Parameter name used in the error message.

    Returns:
        The id as an int.

    Raises:
        ValidationException: If value is not a positive integer.
    """
    if not _POSITIVE_INT.fullmatch(value or "") or int(value) <= 0:
        raise ValidationException(f"Invalid {name}: {value!r}. Must be a positive integer.")
    return int(value)


def utf8_size(text: str) -> int:
    """Size of text in bytes when encoded as UTF-8."""
    return len(text.encode("utf-8"))
