"""
Generation settings for pwgen.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from .exceptions import InvalidArgumentError

DEFAULT_LENGTH = 8
DEFAULT_COUNT = 160


def _normalize_excluded(chars: Iterable) -> FrozenSet[str]:
    """
    Turn excluded characters into a set of single ASCII characters.

    Accepts a string, bytes, or any iterable of one-character strings and
    byte values.
    """
    normalized = set()
    for item in chars:
        if isinstance(item, int) and not isinstance(item, bool) and 0 <= item < 128:
            normalized.add(chr(item))
        elif isinstance(item, str) and len(item) == 1 and item.isascii():
            normalized.add(item)
        else:
            raise InvalidArgumentError(
                f"Excluded characters must be single ASCII characters, got {item!r}"
            )
    return frozenset(normalized)


class ClassPolicy(Enum):
    """Whether a character class must, must not, or may appear."""

    REQUIRED = "required"
    FORBIDDEN = "forbidden"
    DEFAULT = "default"

    @classmethod
    def resolve(cls, require: bool, forbid: bool) -> "ClassPolicy":
        """
        Map a require/forbid flag pair to a policy.

        Forbid wins when both flags are set.
        """
        if forbid:
            return cls.FORBIDDEN
        if require:
            return cls.REQUIRED
        return cls.DEFAULT

    @property
    def is_forbidden(self) -> bool:
        return self is ClassPolicy.FORBIDDEN

    @property
    def is_required(self) -> bool:
        # pwgen turns capitals and numerals on unless told otherwise.
        return self is not ClassPolicy.FORBIDDEN


class GenerationMode(Enum):
    """Password generation algorithm."""

    PATTERN = "pattern"
    UNIFORM = "uniform"


@dataclass(frozen=True)
class PasswordConfig:
    """Immutable settings for one generation run."""

    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_COUNT
    uppercase: ClassPolicy = ClassPolicy.DEFAULT
    digits: ClassPolicy = ClassPolicy.DEFAULT
    symbols: bool = False
    exclude_ambiguous: bool = False
    exclude_vowels: bool = False
    excluded_chars: FrozenSet[str] = field(default_factory=frozenset)
    mode: GenerationMode = GenerationMode.PATTERN

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or self.length < 1:
            raise InvalidArgumentError(
                f"Password length must be a positive integer, got {self.length!r}"
            )
        if not isinstance(self.count, int) or self.count < 0:
            raise InvalidArgumentError(
                f"Password count must be a non-negative integer, got {self.count!r}"
            )
        object.__setattr__(self, "excluded_chars",
                           _normalize_excluded(self.excluded_chars))

    @classmethod
    def from_options(cls,
                     length: int = DEFAULT_LENGTH,
                     count: int = DEFAULT_COUNT,
                     capitalize: bool = False,
                     no_capitalize: bool = False,
                     numerals: bool = False,
                     no_numerals: bool = False,
                     symbols: bool = False,
                     remove_chars: Optional[Iterable[str]] = None,
                     secure: bool = False,
                     ambiguous: bool = False,
                     no_vowels: bool = False) -> "PasswordConfig":
        """
        Build a configuration from pwgen-style command-line flags.

        Args:
            length: Password length
            count: Number of passwords to generate
            capitalize: Require at least one capital letter
            no_capitalize: Forbid capital letters (overrides capitalize)
            numerals: Require at least one digit
            no_numerals: Forbid digits (overrides numerals)
            symbols: Require at least one symbol
            remove_chars: Characters that must never be generated
            secure: Use uniform random generation instead of the pattern
            ambiguous: Exclude visually ambiguous characters
            no_vowels: Exclude vowels

        Returns:
            PasswordConfig instance
        """
        return cls(
            length=length,
            count=count,
            uppercase=ClassPolicy.resolve(capitalize, no_capitalize),
            digits=ClassPolicy.resolve(numerals, no_numerals),
            symbols=symbols,
            exclude_ambiguous=ambiguous,
            exclude_vowels=no_vowels,
            excluded_chars=frozenset(remove_chars or ()),
            mode=GenerationMode.UNIFORM if secure else GenerationMode.PATTERN,
        )

    @property
    def require_upper(self) -> bool:
        return self.uppercase.is_required

    @property
    def forbid_upper(self) -> bool:
        return self.uppercase.is_forbidden

    @property
    def require_digit(self) -> bool:
        return self.digits.is_required

    @property
    def forbid_digit(self) -> bool:
        return self.digits.is_forbidden

    @property
    def require_symbol(self) -> bool:
        return self.symbols

    def is_excluded(self, char: int) -> bool:
        """Check whether a byte is in the user exclusion list."""
        return chr(char) in self.excluded_chars
