"""
pwgen - pronounceable and secure password generator.
"""

from .config import ClassPolicy, GenerationMode, PasswordConfig
from .entropy import (
    BufferEntropySource,
    EntropySource,
    FileEntropySource,
    SystemEntropySource,
    open_entropy_source,
)
from .exceptions import EntropyUnavailableError, InvalidArgumentError, PwgenException
from .generator import generate_password, generate_passwords

__version__ = "0.1.0"

__all__ = [
    'BufferEntropySource',
    'ClassPolicy',
    'EntropySource',
    'EntropyUnavailableError',
    'FileEntropySource',
    'GenerationMode',
    'InvalidArgumentError',
    'PasswordConfig',
    'PwgenException',
    'SystemEntropySource',
    'generate_password',
    'generate_passwords',
    'open_entropy_source',
]
