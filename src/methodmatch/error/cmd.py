"""Error handling shared by CLI commands."""

import functools
from typing import Callable

import click
from rich.console import Console

console = Console()


def handle_command_errors(func: Callable) -> Callable:
    """Report expected failures as one error line and abort the command.

    Missing files, invalid input and contract violations (FileNotFoundError,
    ValueError, TypeError) are printed through the rich console and turned
    into ``click.Abort``. Anything else propagates unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (FileNotFoundError, ValueError, TypeError) as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort()

    return wrapper
