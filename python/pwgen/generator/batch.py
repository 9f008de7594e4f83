"""
Batch password generation: mode selection and requirement enforcement.
"""

import logging
from typing import Iterator

from ..config import GenerationMode, PasswordConfig
from ..entropy import EntropySource
from ..utils.charsets import build_charset, fallback_password
from .pattern import PatternGenerator
from .requirements import RequirementEnforcer
from .uniform import UniformGenerator

logger = logging.getLogger(__name__)


def generate_password(config: PasswordConfig, entropy: EntropySource) -> str:
    """
    Generate one password.

    Args:
        config: Generation settings
        entropy: Random byte source

    Returns:
        Generated password string

    Raises:
        EntropyUnavailableError: If the entropy source fails
    """
    if config.mode is GenerationMode.UNIFORM:
        alphabet = build_charset(config)
        if not alphabet:
            logger.warning("No characters left after exclusions, using fallback password")
            password = bytearray(fallback_password(config.length, config), "ascii")
        else:
            password = UniformGenerator(entropy).generate(config.length, alphabet)
    else:
        password = PatternGenerator(entropy).generate(config.length, config)

    RequirementEnforcer(entropy).enforce(password, config)

    return password.decode("ascii")


def generate_passwords(config: PasswordConfig, entropy: EntropySource) -> Iterator[str]:
    """
    Lazily generate config.count independent passwords.

    Passwords share nothing but the position in the entropy stream. An
    entropy failure propagates out of the iterator and ends the batch.
    """
    logger.debug(
        f"Generating {config.count} {config.mode.value} password(s) "
        f"of length {config.length}"
    )

    for _ in range(config.count):
        yield generate_password(config, entropy)
