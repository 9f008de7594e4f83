"""
Input validation utilities for pwgen.
"""

import re
from typing import FrozenSet, Optional

# Characters that may appear in a --remove-chars value: printable ASCII.
REMOVE_CHARS_PATTERN = re.compile(r"^[\x20-\x7e]*$")


def validate_remove_chars(value: str) -> bool:
    """
    Validate a --remove-chars argument.

    Args:
        value: The raw argument value

    Returns:
        True if value is valid, False otherwise
    """
    if not isinstance(value, str):
        return False

    return bool(REMOVE_CHARS_PATTERN.match(value))


def parse_remove_chars(value: Optional[str]) -> FrozenSet[str]:
    """
    Turn a --remove-chars argument into the set of excluded characters.

    Args:
        value: The raw argument value, or None when the option was not given

    Returns:
        Frozen set of single characters

    Raises:
        ValueError: If value contains characters outside printable ASCII
    """
    if value is None:
        return frozenset()

    if not validate_remove_chars(value):
        raise ValueError(get_validation_error_message(value))

    return frozenset(value)


def get_validation_error_message(value: str) -> str:
    """
    Get a descriptive error message for an invalid --remove-chars value.

    Args:
        value: The invalid value

    Returns:
        Error message describing why the value is invalid
    """
    if not isinstance(value, str):
        return "Characters to remove must be a string"

    invalid_chars = {c for c in value if not REMOVE_CHARS_PATTERN.match(c)}

    if invalid_chars:
        shown = ", ".join(repr(c) for c in sorted(invalid_chars))
        return f"Characters to remove must be printable ASCII, got: {shown}"

    return "Characters to remove are invalid"
