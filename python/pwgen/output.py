"""
Printing generated passwords, one per line or in columns.
"""

from typing import List, Sequence

import click

COLUMNS = 5


def format_passwords(passwords: Sequence[str], columns: bool = True) -> List[str]:
    """
    Lay out passwords as lines of text.

    With columns enabled and more than COLUMNS passwords, the passwords are
    arranged in a COLUMNS-wide grid filled column by column, each entry
    left-justified to the widest entry of its column.

    Args:
        passwords: Passwords in generation order
        columns: Whether to use the column layout

    Returns:
        Output lines without trailing newlines
    """
    if not columns or len(passwords) <= COLUMNS:
        return list(passwords)

    rows = (len(passwords) + COLUMNS - 1) // COLUMNS
    grid: List[List[str]] = [[] for _ in range(rows)]

    for i, password in enumerate(passwords):
        grid[i % rows].append(password)

    widths = [0] * COLUMNS
    for row in grid:
        for col, item in enumerate(row):
            widths[col] = max(widths[col], len(item))

    return [
        " ".join(item.ljust(widths[col]) for col, item in enumerate(row))
        for row in grid
    ]


def print_passwords(passwords: Sequence[str], columns: bool = True) -> None:
    """Write passwords to standard output."""
    for line in format_passwords(passwords, columns):
        click.echo(line)
