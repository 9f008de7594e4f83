"""
Unit tests for random byte sources.
"""

import os
from unittest.mock import patch

import pytest

from pwgen.entropy import (
    BufferEntropySource,
    FileEntropySource,
    SystemEntropySource,
    open_entropy_source,
)
from pwgen.exceptions import EntropyUnavailableError


class TestBufferEntropySource:
    """Test in-memory replay."""

    def test_sequential_reads(self):
        """Test that requests are served in order."""
        source = BufferEntropySource(b"\x01\x02\x03\x04")

        assert source.read_exact(2) == b"\x01\x02"
        assert source.read_byte() == 3
        assert source.remaining == 1

    def test_exhausted(self):
        """Test that over-reading fails without consuming."""
        source = BufferEntropySource(b"\x01")

        with pytest.raises(EntropyUnavailableError):
            source.read_exact(2)
        assert source.read_byte() == 1


class TestSystemEntropySource:
    """Test the OS generator."""

    def test_read_exact(self):
        """Test that the requested number of bytes is returned."""
        assert len(SystemEntropySource().read_exact(32)) == 32

    @patch("pwgen.entropy.os.urandom", side_effect=OSError("no entropy"))
    def test_os_error(self, mock_urandom):
        """Test that OS failures become EntropyUnavailableError."""
        with pytest.raises(EntropyUnavailableError, match="no entropy"):
            SystemEntropySource().read_byte()


class TestFileEntropySource:
    """Test file and device entropy."""

    @pytest.fixture
    def replay_file(self, tmp_path):
        """Create a small replay file."""
        path = tmp_path / "entropy.bin"
        path.write_bytes(bytes(range(10)))
        return path

    def test_replay(self, replay_file):
        """Test reading a replay file in order."""
        with FileEntropySource(replay_file) as source:
            assert source.read_exact(4) == b"\x00\x01\x02\x03"
            assert source.read_byte() == 4

    def test_short_read(self, replay_file):
        """Test that reading past the end fails."""
        with FileEntropySource(replay_file) as source:
            source.read_exact(8)
            with pytest.raises(EntropyUnavailableError, match="exhausted"):
                source.read_exact(3)

    def test_missing_file(self, tmp_path):
        """Test that an unreadable path fails on open."""
        with pytest.raises(EntropyUnavailableError, match="Cannot open"):
            FileEntropySource(tmp_path / "missing.bin")

    def test_closed(self, replay_file):
        """Test reading after close."""
        source = FileEntropySource(replay_file)
        source.close()

        with pytest.raises(EntropyUnavailableError, match="closed"):
            source.read_byte()

    @pytest.mark.skipif(not os.path.exists("/dev/urandom"), reason="no /dev/urandom")
    def test_urandom_device(self):
        """Test the default device path."""
        with FileEntropySource() as source:
            assert len(source.read_exact(16)) == 16


class TestOpenEntropySource:
    """Test the source factory."""

    def test_default_is_system(self):
        """Test that no path selects the OS generator."""
        assert isinstance(open_entropy_source(), SystemEntropySource)

    def test_path_selects_file(self, tmp_path):
        """Test that a path selects a file source."""
        path = tmp_path / "entropy.bin"
        path.write_bytes(b"\xff")

        with open_entropy_source(path) as source:
            assert isinstance(source, FileEntropySource)
            assert source.read_byte() == 255
