"""
Character tables and alphabet construction.
"""

import string
from typing import Iterable

from ..config import PasswordConfig

# Character sets
LOWERCASE = string.ascii_lowercase.encode("ascii")
UPPERCASE = string.ascii_uppercase.encode("ascii")
DIGITS = string.digits.encode("ascii")
SYMBOLS = string.punctuation.encode("ascii")

VOWELS = b"aeiouyAEIOUY"
VOWELS_LOWER = b"aeiouy"
CONSONANTS = bytes(c for c in LOWERCASE + UPPERCASE if c not in VOWELS)
CONSONANTS_LOWER = bytes(c for c in LOWERCASE if c not in VOWELS)

# Characters easily confused with one another when printed
AMBIGUOUS = b"B8G6I1l0OQDS5Z2"


def filter_alphabet(alphabet: bytes, excluded: Iterable[str] = (),
                    exclude_ambiguous: bool = False) -> bytes:
    """
    Drop user-excluded and, optionally, ambiguous characters from an alphabet.

    Args:
        alphabet: Candidate characters
        excluded: Characters the user asked to remove
        exclude_ambiguous: Also remove characters in AMBIGUOUS

    Returns:
        The remaining characters, in their original order
    """
    removed = set(excluded)
    return bytes(
        c for c in alphabet
        if chr(c) not in removed and not (exclude_ambiguous and c in AMBIGUOUS)
    )


def build_charset(config: PasswordConfig) -> bytes:
    """
    Build the alphabet used for uniform generation.

    Lowercase letters are always included; capitals, digits and symbols
    follow the configured class policies. The result may be empty when the
    exclusions remove every candidate.
    """
    charset = bytearray(LOWERCASE)

    if config.require_upper:
        charset += UPPERCASE

    if config.require_digit:
        charset += DIGITS

    if config.symbols:
        charset += SYMBOLS

    if config.exclude_ambiguous:
        charset = bytearray(c for c in charset if c not in AMBIGUOUS)

    if config.exclude_vowels:
        charset = bytearray(c for c in charset if c not in VOWELS)

    if config.excluded_chars:
        charset = bytearray(c for c in charset if not config.is_excluded(c))

    return bytes(charset)


def fallback_password(length: int, config: PasswordConfig) -> str:
    """
    Degenerate password used when no alphabet survives the exclusions.

    Repeats the first lowercase letter the configuration still allows, or
    "a" when every lowercase letter is excluded.
    """
    candidates = filter_alphabet(LOWERCASE, config.excluded_chars,
                                 config.exclude_ambiguous)
    if config.exclude_vowels:
        candidates = bytes(c for c in candidates if c not in VOWELS)

    char = chr(candidates[0]) if candidates else "a"
    return char * length


def describe_charset(config: PasswordConfig) -> str:
    """
    Get human-readable description of the character classes in use.

    Returns:
        Description of enabled character types
    """
    parts = ["lowercase"]

    if config.require_upper:
        parts.append("uppercase")
    if config.require_digit:
        parts.append("digits")
    if config.symbols:
        parts.append("symbols")

    info = ", ".join(parts)

    if config.exclude_ambiguous:
        info += " (excluding ambiguous chars)"
    if config.exclude_vowels:
        info += " (excluding vowels)"
    if config.excluded_chars:
        info += f" (removing {''.join(sorted(config.excluded_chars))!r})"

    return info
