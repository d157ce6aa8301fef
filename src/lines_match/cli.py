"""CLI entry point for lines-match tool."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from lines_match import __version__
from lines_match.commands import batch, compare, explain
from lines_match.core.config import load_config
from lines_match.error.cmd import handle_command_errors

console = Console()


def configure_logging(verbose: bool) -> None:
    """Send DEBUG records of the lines_match package to a Rich handler."""
    if not verbose:
        return

    package_logger = logging.getLogger("lines_match")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.version_option(version=__version__, prog_name="lines-match")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
@handle_command_errors
def main(ctx, verbose):
    """Line Template Matching Tool.

    Checks multi-line output against templates made of literal lines,
    regular expressions and fast-forward directives.
    """
    ctx.ensure_object(dict)

    config = load_config()
    configure_logging(verbose or config.output.verbose)


# Register commands
main.add_command(compare.compare)
main.add_command(explain.explain)
main.add_command(batch.batch)


if __name__ == "__main__":
    main()
