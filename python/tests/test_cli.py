"""
Tests for the command-line interface and output layout.
"""

import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pwgen.__main__ import cli
from pwgen.output import COLUMNS, format_passwords


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def replay_file(tmp_path):
    """Create a replay file with plenty of random bytes."""
    path = tmp_path / "replay.bin"
    path.write_bytes(os.urandom(8192))
    return str(path)


class TestOutputLayout:
    """Test one-per-line and column output."""

    def test_few_passwords_one_per_line(self):
        """Test that up to COLUMNS passwords are never put in columns."""
        passwords = [f"pw{i}" for i in range(COLUMNS)]
        assert format_passwords(passwords, columns=True) == passwords

    def test_columns_disabled(self):
        """Test plain output for larger batches."""
        passwords = [f"pw{i}" for i in range(12)]
        assert format_passwords(passwords, columns=False) == passwords

    def test_column_major_layout(self):
        """Test 12 passwords in 3 rows filled column by column."""
        passwords = [f"pw{i}" for i in range(12)]

        assert format_passwords(passwords) == [
            "pw0 pw3 pw6 pw9 ",
            "pw1 pw4 pw7 pw10",
            "pw2 pw5 pw8 pw11",
        ]

    def test_short_last_row(self):
        """Test a batch that does not fill the last row."""
        passwords = ["a", "bb", "c", "dddd", "e", "f", "g"]

        assert format_passwords(passwords) == [
            "a  c    e g",
            "bb dddd f",
        ]

    def test_full_grid(self):
        """Test that no row exceeds COLUMNS entries."""
        passwords = [f"{i:02d}" for i in range(30)]
        lines = format_passwords(passwords)

        assert len(lines) == 6
        assert all(len(line.split()) == COLUMNS for line in lines)


class TestCli:
    """Test the pwgen command."""

    def test_defaults(self, runner):
        """Test 160 passwords of length 8 in columns."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 32
        assert all(len(line.split()) == COLUMNS for line in lines)
        assert all(len(pw) == 8 for line in lines for pw in line.split())

    def test_positional_arguments(self, runner):
        """Test length and count."""
        result = runner.invoke(cli, ["-1", "12", "3"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert all(len(line) == 12 for line in lines)

    def test_columns(self, runner):
        """Test 12 passwords laid out in 3 rows."""
        result = runner.invoke(cli, ["-C", "8", "12"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert [len(line.split()) for line in lines] == [4, 4, 4]

    @pytest.mark.parametrize("flags, expected_lines", [
        (["-1", "-C"], 3),
        (["-C", "-1"], 12),
    ])
    def test_last_layout_flag_wins(self, runner, flags, expected_lines):
        """Test that the later of -C and -1 decides the layout."""
        result = runner.invoke(cli, [*flags, "8", "12"])

        assert result.exit_code == 0
        assert len(result.output.splitlines()) == expected_lines

    def test_help(self, runner):
        """Test that help prints usage and generates nothing."""
        for flag in ["-h", "--help"]:
            result = runner.invoke(cli, [flag])

            assert result.exit_code == 0
            assert "Usage:" in result.output
            assert "--remove-chars" in result.output

    def test_secure_no_capitalize_no_numerals(self, runner):
        """Test combined short flags."""
        result = runner.invoke(cli, ["-sA0", "-1", "20", "10"])

        assert result.exit_code == 0
        for line in result.output.splitlines():
            assert len(line) == 20
            assert line.isalpha() and line.islower()

    def test_remove_chars_forms(self, runner):
        """Test inline, equals and separate remove-chars values."""
        vowels = set("aeiouAEIOU")
        forms = [
            ["-raeiouAEIOU"],
            ["--remove-chars=aeiouAEIOU"],
            ["-r", "aeiouAEIOU"],
            ["--remove-chars", "aeiouAEIOU"],
        ]
        for form in forms:
            result = runner.invoke(cli, ["-s", "-1", *form, "30", "10"])

            assert result.exit_code == 0, form
            for line in result.output.splitlines():
                assert not set(line) & vowels

    def test_ambiguous(self, runner):
        """Test ambiguous character exclusion end to end."""
        result = runner.invoke(cli, ["-B", "-1", "16", "20"])

        assert result.exit_code == 0
        for line in result.output.splitlines():
            assert not set(line) & set("B8G6I1l0OQDS5Z2")

    def test_symbols(self, runner):
        """Test that every password contains a symbol."""
        result = runner.invoke(cli, ["-y", "-1", "10", "20"])

        assert result.exit_code == 0
        for line in result.output.splitlines():
            assert any(not c.isalnum() for c in line)

    def test_zero_count(self, runner):
        """Test that a zero count prints nothing."""
        result = runner.invoke(cli, ["8", "0"])

        assert result.exit_code == 0
        assert result.output == ""

    @pytest.mark.parametrize("args", [
        ["-x"],
        ["--bogus"],
        ["-r"],
        ["8", "3", "2"],
        ["eight"],
        ["8", "many"],
        ["0"],
        ["--remove-chars=café"],
    ])
    def test_argument_errors(self, runner, args):
        """Test that bad arguments exit with status 1."""
        result = runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_replay_is_reproducible(self, runner, replay_file):
        """Test that the same entropy file gives the same passwords."""
        args = ["--random-file", replay_file, "-y", "10", "20"]
        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)

        assert first.exit_code == 0
        assert first.output == second.output

    def test_entropy_exhausted(self, runner, tmp_path):
        """Test that a short entropy file aborts without partial output."""
        path = tmp_path / "short.bin"
        path.write_bytes(bytes(20))

        result = runner.invoke(cli, ["--random-file", str(path), "-1", "8", "5"])

        assert result.exit_code == 1
        assert result.output.startswith("Error:")
        assert len(result.output.splitlines()) == 1

    def test_entropy_file_missing(self, runner, tmp_path):
        """Test that an unreadable entropy file is reported."""
        result = runner.invoke(cli, ["--random-file", str(tmp_path / "nope"), "8", "1"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    @patch("pwgen.__main__.pyperclip.copy")
    def test_copy(self, mock_copy, runner):
        """Test copying the first password to the clipboard."""
        result = runner.invoke(cli, ["--copy", "-1", "10", "2"])

        assert result.exit_code == 0
        first = result.output.splitlines()[0]
        mock_copy.assert_called_once_with(first)
