"""
Random byte sources.

Every sampling step in pwgen consumes bytes from a single sequential
EntropySource. The default reads from the operating system; a file source
can replay a captured byte stream to reproduce a run exactly.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .exceptions import EntropyUnavailableError

logger = logging.getLogger(__name__)


class EntropySource(ABC):
    """Supplier of uniformly distributed random bytes."""

    @abstractmethod
    def read_exact(self, n: int) -> bytes:
        """
        Read exactly n random bytes.

        Raises:
            EntropyUnavailableError: If n bytes cannot be supplied
        """

    def read_byte(self) -> int:
        """Read a single random byte as an integer in 0..255."""
        return self.read_exact(1)[0]

    def close(self) -> None:
        """Release any underlying resources."""

    def __enter__(self) -> "EntropySource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class SystemEntropySource(EntropySource):
    """Entropy from the operating system CSPRNG."""

    def read_exact(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except OSError as e:
            raise EntropyUnavailableError(f"Cannot read random bytes: {e}") from e


class FileEntropySource(EntropySource):
    """Sequential entropy from a file or character device."""

    def __init__(self, path: Union[str, Path] = "/dev/urandom"):
        """
        Open an entropy file.

        Args:
            path: Device such as /dev/urandom, or a replay file
        """
        self.path = str(path)
        self._file: Optional[BinaryIO] = None

        try:
            self._file = open(self.path, "rb")
        except OSError as e:
            raise EntropyUnavailableError(f"Cannot open {self.path}: {e}") from e

        logger.debug(f"Reading entropy from {self.path}")

    def read_exact(self, n: int) -> bytes:
        if self._file is None:
            raise EntropyUnavailableError(f"Entropy source {self.path} is closed")

        chunks = []
        remaining = n

        try:
            while remaining > 0:
                chunk = self._file.read(remaining)
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
        except OSError as e:
            raise EntropyUnavailableError(f"Cannot read from {self.path}: {e}") from e

        if remaining:
            raise EntropyUnavailableError(
                f"Entropy source {self.path} exhausted: wanted {n} bytes, got {n - remaining}"
            )

        return b"".join(chunks)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class BufferEntropySource(EntropySource):
    """In-memory replay of a fixed byte string."""

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position

    def read_exact(self, n: int) -> bytes:
        if n > self.remaining:
            raise EntropyUnavailableError(
                f"Entropy buffer exhausted: wanted {n} bytes, {self.remaining} left"
            )

        chunk = self.data[self.position:self.position + n]
        self.position += n
        return chunk


def open_entropy_source(path: Optional[Union[str, Path]] = None) -> EntropySource:
    """
    Get the entropy source for a run.

    Args:
        path: File to read from; the OS generator is used when omitted

    Returns:
        EntropySource instance
    """
    if path is None:
        return SystemEntropySource()

    return FileEntropySource(path)
