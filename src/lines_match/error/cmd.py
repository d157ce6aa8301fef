import functools
import logging
from typing import Callable

import click
from pydantic import ValidationError
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)


def handle_command_errors(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort()
        except UnicodeDecodeError as e:
            console.print(f"[red]Error:[/red] cannot decode input: {e}", highlight=False)
            raise click.Abort()
        except (ValueError, ValidationError) as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort()
        except Exception as e:
            logger.debug("Unexpected error", exc_info=True)
            console.print(f"[red]Unexpected error:[/red] {e}", highlight=False)
            raise click.Abort()

    return wrapper
