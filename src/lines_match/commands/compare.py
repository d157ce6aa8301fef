"""Compare actual output against an expected line template."""

from pathlib import Path

import click
from rich.console import Console

from lines_match.analysis.result_presenter import display_result
from lines_match.core.config import load_config
from lines_match.core.line_reader import read_lines
from lines_match.error.cmd import handle_command_errors
from lines_match.matching import LineMatcher

console = Console()


@click.command()
@click.argument(
    "expected_file",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
)
@click.argument(
    "actual_file",
    required=False,
    default="-",
    type=click.Path(path_type=Path, allow_dash=True, file_okay=True, dir_okay=False),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on the first expected line that neither matches nor fast-forwards",
)
@click.option(
    "--strip-trailing-whitespace",
    is_flag=True,
    help="Right-strip actual lines before matching",
)
@click.option("--show-lines", is_flag=True, help="Print both line sequences on failure")
@click.option("--encoding", type=str, default=None, help="Input encoding (default: from config)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
@click.pass_context
@handle_command_errors
def compare(
    ctx: click.Context,
    expected_file: Path,
    actual_file: Path,
    strict: bool,
    strip_trailing_whitespace: bool,
    show_lines: bool,
    encoding: str | None,
    config_path: Path | None,
) -> None:
    """Compare actual output against an expected line template.

    EXPECTED_FILE: Template with literal lines, patterns and >>N>> / >>>> directives

    ACTUAL_FILE: Output to check (default: standard input)

    Exits with status 1 if the output does not match.
    """
    config = load_config(config_path)
    encoding = encoding or config.matching.encoding

    expected = read_lines(expected_file, encoding)
    actual = read_lines(actual_file, encoding)

    matcher = LineMatcher(
        strict=strict or config.matching.strict,
        strip_trailing_whitespace=(
            strip_trailing_whitespace or config.matching.strip_trailing_whitespace
        ),
    )
    result = matcher.match(expected, actual)

    if show_lines or config.output.show_lines:
        display_result(result, console, expected, actual)
    else:
        display_result(result, console)

    if not result.matched:
        ctx.exit(1)
