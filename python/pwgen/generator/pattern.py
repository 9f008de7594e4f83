"""
Pronounceable password generation.

Even positions are consonants and odd positions vowels, which gives
passwords such as "bopimeku" that are easy to read aloud.
"""

import logging

from ..config import PasswordConfig
from ..entropy import EntropySource
from ..utils.charsets import (
    AMBIGUOUS,
    CONSONANTS,
    CONSONANTS_LOWER,
    VOWELS,
    VOWELS_LOWER,
    build_charset,
    fallback_password,
)
from .uniform import UniformGenerator

logger = logging.getLogger(__name__)


class PatternGenerator:
    """Generate consonant/vowel alternating passwords."""

    # Draws per position before the last candidate is accepted regardless
    MAX_ATTEMPTS = 100

    def __init__(self, entropy: EntropySource):
        self.entropy = entropy

    def generate(self, length: int, config: PasswordConfig) -> bytearray:
        """
        Generate a pronounceable password.

        Candidates in the exclusion list, or ambiguous ones when those are
        excluded, are redrawn up to MAX_ATTEMPTS times per position. With
        vowels excluded no pattern is possible, so the password is sampled
        uniformly from the class-filtered alphabet instead.

        Args:
            length: Number of characters
            config: Generation settings

        Returns:
            The password bytes
        """
        if config.exclude_vowels:
            return self._generate_without_vowels(length, config)

        if config.forbid_upper:
            consonants, vowels = CONSONANTS_LOWER, VOWELS_LOWER
        else:
            consonants, vowels = CONSONANTS, VOWELS

        password = bytearray()
        for i in range(length):
            char_set = consonants if i % 2 == 0 else vowels
            password.append(self._draw(char_set, config))

        return password

    def _draw(self, char_set: bytes, config: PasswordConfig) -> int:
        candidate = 0
        for _ in range(self.MAX_ATTEMPTS):
            candidate = char_set[self.entropy.read_byte() % len(char_set)]

            if config.is_excluded(candidate):
                continue
            if config.exclude_ambiguous and candidate in AMBIGUOUS:
                continue

            return candidate

        logger.debug(
            f"No acceptable character after {self.MAX_ATTEMPTS} draws, "
            f"keeping {chr(candidate)!r}"
        )
        return candidate

    def _generate_without_vowels(self, length: int, config: PasswordConfig) -> bytearray:
        alphabet = build_charset(config)
        if not alphabet:
            logger.warning("No characters left after exclusions, using fallback password")
            return bytearray(fallback_password(length, config), "ascii")

        return UniformGenerator(self.entropy).generate(length, alphabet)
