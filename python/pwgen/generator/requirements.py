"""
Post-generation enforcement of required character classes.
"""

import logging
from typing import List, Tuple

from ..config import PasswordConfig
from ..entropy import EntropySource
from ..utils.charsets import DIGITS, SYMBOLS, UPPERCASE, filter_alphabet

logger = logging.getLogger(__name__)


class RequirementEnforcer:
    """
    Make sure required character classes appear in a password.

    Checks run in a fixed order: uppercase, digit, symbol. A missing class
    is injected by overwriting one randomly chosen position with a random
    member of the class, so a later injection may replace an earlier one.
    When exclusions leave a class empty the requirement is skipped.
    """

    def __init__(self, entropy: EntropySource):
        self.entropy = entropy

    def enforce(self, password: bytearray, config: PasswordConfig) -> bytearray:
        """
        Inject missing required classes into password in place.

        Args:
            password: Generated password bytes
            config: Generation settings

        Returns:
            The same bytearray, possibly modified
        """
        if not password:
            return password

        for name, active, members, exclude_ambiguous in self._checks(config):
            if not active:
                continue
            if any(c in members for c in password):
                continue

            candidates = filter_alphabet(members, config.excluded_chars,
                                         exclude_ambiguous)
            if not candidates:
                logger.debug(f"Every {name} character is excluded, requirement skipped")
                continue

            char = candidates[self.entropy.read_byte() % len(candidates)]
            pos = self.entropy.read_byte() % len(password)
            password[pos] = char

        return password

    @staticmethod
    def _checks(config: PasswordConfig) -> List[Tuple[str, bool, bytes, bool]]:
        # Symbols are never filtered for ambiguity.
        return [
            ("uppercase", config.require_upper, UPPERCASE, config.exclude_ambiguous),
            ("digit", config.require_digit, DIGITS, config.exclude_ambiguous),
            ("symbol", config.require_symbol, SYMBOLS, False),
        ]
