"""Batch comparison command."""

from pathlib import Path

import click
from rich.console import Console

from lines_match.analysis.result_presenter import display_batch_summary
from lines_match.core.batch import run_batch
from lines_match.core.config import load_config
from lines_match.error.cmd import handle_command_errors
from lines_match.matching import LineMatcher

console = Console()


@click.command()
@click.argument(
    "manifest",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Output file for per-pair results (CSV format)",
)
@click.option("--strict", is_flag=True, help="Use strict matching for every pair")
@click.option("--no-progress", is_flag=True, help="Hide the progress bar")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
@click.pass_context
@handle_command_errors
def batch(
    ctx: click.Context,
    manifest: Path,
    output: Path | None,
    strict: bool,
    no_progress: bool,
    config_path: Path | None,
) -> None:
    """Compare every template/output pair listed in a CSV manifest.

    MANIFEST: CSV file with 'expected' and 'actual' columns holding file paths
    relative to the manifest

    Exits with status 1 if any pair does not match.
    """
    config = load_config(config_path)
    matcher = LineMatcher(
        strict=strict or config.matching.strict,
        strip_trailing_whitespace=config.matching.strip_trailing_whitespace,
    )

    console.print(f"[bold blue]Comparing pairs from:[/bold blue] {manifest}")
    results = run_batch(
        manifest, matcher, encoding=config.matching.encoding, progress=not no_progress
    )
    display_batch_summary(results, console)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(output, index=False)
        console.print(f"[green]✓ Saved:[/green] {output}", highlight=False)

    if not results["matched"].all():
        ctx.exit(1)
