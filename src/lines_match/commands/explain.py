"""Explain how the lines of a template are matched."""

from pathlib import Path

import click
from rich.console import Console

from lines_match.analysis import TemplateLineKind, describe_template
from lines_match.analysis.result_presenter import display_template
from lines_match.core.config import load_config
from lines_match.core.line_reader import read_lines
from lines_match.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument(
    "expected_file",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
)
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
def explain(
    ctx: click.Context, expected_file: Path, encoding: str | None, config_path: Path | None
) -> None:
    """Show how each line of a template is matched.

    EXPECTED_FILE: Template file

    Exits with status 1 if the template contains invalid directives.
    """
    config = load_config(config_path)
    encoding = encoding or config.matching.encoding

    template = describe_template(read_lines(expected_file, encoding))
    display_template(template, console)

    if any(line.kind is TemplateLineKind.INVALID_DIRECTIVE for line in template):
        ctx.exit(1)
