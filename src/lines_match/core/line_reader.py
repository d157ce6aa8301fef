"""Reading line sequences from files and standard input."""

from pathlib import Path

import click

STDIN = "-"


def read_lines(source: Path | str | None, encoding: str = "utf-8") -> list[str]:
    """Read a text source into a list of lines without line terminators.

    Args:
        source: File path, or None / "-" for standard input
        encoding: Text encoding of the file

    Returns:
        List of lines

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    name = STDIN if source is None else str(source)
    if name != STDIN and not Path(name).exists():
        raise FileNotFoundError(f"File not found: {name}")

    with click.open_file(name, "r", encoding=encoding) as f:
        return f.read().splitlines()
