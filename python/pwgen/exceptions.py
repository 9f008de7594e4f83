"""
Custom exceptions for pwgen.
"""


class PwgenException(Exception):
    """Base exception for pwgen."""

    pass


class EntropyUnavailableError(PwgenException):
    """Random bytes could not be read from the entropy source."""

    pass


class InvalidArgumentError(PwgenException):
    """A command-line value or configuration field is invalid."""

    pass
