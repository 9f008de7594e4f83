"""
CLI interface for pwgen.
"""

import logging
import sys
from typing import FrozenSet, List, Optional

import click
import pyperclip

from .config import DEFAULT_COUNT, DEFAULT_LENGTH, PasswordConfig
from .entropy import open_entropy_source
from .exceptions import PwgenException
from .generator import generate_passwords
from .output import print_passwords
from .utils.charsets import describe_charset
from .utils.validation import parse_remove_chars

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class PwgenCommand(click.Command):
    """Command that reports every argument error with exit status 1."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _remove_chars_callback(ctx: click.Context, param: click.Parameter,
                           value: Optional[str]) -> FrozenSet[str]:
    try:
        return parse_remove_chars(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.command(
    name="pwgen",
    cls=PwgenCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("pw_length", required=False, default=DEFAULT_LENGTH,
                type=click.IntRange(min=1))
@click.argument("num_pw", required=False, default=DEFAULT_COUNT,
                type=click.IntRange(min=0))
@click.option("-c", "--capitalize", is_flag=True,
              help="Include at least one capital letter in the password")
@click.option("-A", "--no-capitalize", is_flag=True,
              help="Don't include capital letters in the password")
@click.option("-n", "--numerals", is_flag=True,
              help="Include at least one number in the password")
@click.option("-0", "--no-numerals", is_flag=True,
              help="Don't include numbers in the password")
@click.option("-y", "--symbols", is_flag=True,
              help="Include at least one special symbol in the password")
@click.option("-r", "--remove-chars", metavar="CHARS", callback=_remove_chars_callback,
              help="Remove characters from the set of characters to generate passwords")
@click.option("-s", "--secure", is_flag=True,
              help="Generate completely random passwords")
@click.option("-B", "--ambiguous", is_flag=True,
              help="Don't include ambiguous characters in the password")
@click.option("-v", "--no-vowels", is_flag=True,
              help="Do not use any vowels so as to avoid accidental nasty words")
@click.option("-C/-1", "columns", default=True,
              help="Print the generated passwords in columns (-C, default) "
                   "or one per line (-1)")
@click.option("--random-file", type=click.Path(dir_okay=False), default=None,
              help="Read random bytes from this file instead of the OS generator")
@click.option("--copy", is_flag=True,
              help="Copy the first generated password to the clipboard")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True,
              help="Diagnostic logging level (written to stderr)")
def cli(pw_length: int, num_pw: int, capitalize: bool, no_capitalize: bool,
        numerals: bool, no_numerals: bool, symbols: bool,
        remove_chars: FrozenSet[str], secure: bool, ambiguous: bool,
        no_vowels: bool, columns: bool,
        random_file: Optional[str], copy: bool,
        log_level: str) -> None:
    """Generate pronounceable or completely random passwords."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = PasswordConfig.from_options(
        length=pw_length,
        count=num_pw,
        capitalize=capitalize,
        no_capitalize=no_capitalize,
        numerals=numerals,
        no_numerals=no_numerals,
        symbols=symbols,
        remove_chars=remove_chars,
        secure=secure,
        ambiguous=ambiguous,
        no_vowels=no_vowels,
    )
    logger.info(f"Generating passwords using: {describe_charset(config)}")

    # Nothing is printed unless the whole batch succeeds
    try:
        with open_entropy_source(random_file) as entropy:
            passwords = list(generate_passwords(config, entropy))
    except PwgenException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    print_passwords(passwords, columns=columns)

    if copy and passwords:
        try:
            pyperclip.copy(passwords[0])
        except pyperclip.PyperclipException as e:
            click.echo(f"Could not copy to clipboard: {e}", err=True)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
