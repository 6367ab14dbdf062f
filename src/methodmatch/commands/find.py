"""Find command for searching a candidate module for a reference method."""

from itertools import islice
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from methodmatch.analysis.method_finder import find_similar
from methodmatch.core.config import load_config
from methodmatch.core.model import find_method
from methodmatch.core.model_loader import load_module
from methodmatch.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.option(
    "--reference",
    "-r",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    required=True,
    help="JSON dump of the reference module",
)
@click.option(
    "--method",
    "-m",
    required=True,
    help="Full name of the reference method (Type::Method)",
)
@click.option(
    "--candidate",
    "-c",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    required=True,
    help="JSON dump of the module to search",
)
@click.option(
    "--mode",
    type=click.Choice(["exact", "fuzzy"]),
    default=None,
    help="Matching mode (default: from config, otherwise exact)",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Minimum coverage for fuzzy matches (default: from config)",
)
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(1),
    default=None,
    help="Stop after this many matches",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="Path to a JSON configuration file",
)
@handle_command_errors
def find(
    reference: str,
    method: str,
    candidate: str,
    mode: str | None,
    threshold: float | None,
    limit: int | None,
    config_path: str | None,
) -> None:
    """Find methods of a candidate module matching a reference method.

    Searches every type of the candidate module, nested types included.
    """
    config = load_config(Path(config_path) if config_path else None)
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    overrides = {"mode": mode, "threshold": threshold}
    matcher = config.matcher.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    match_mode = matcher.to_mode()

    reference_method = find_method(load_module(Path(reference)), method)
    candidate_module = load_module(Path(candidate))

    matches = list(islice(find_similar(candidate_module, reference_method, match_mode), limit))

    if not matches:
        console.print(f"[yellow]No match found for[/yellow] {reference_method.full_name}")
        return

    table = Table(title=f"Matches for {reference_method.full_name}")
    table.add_column("Type", style="cyan")
    table.add_column("Method", style="green")
    table.add_column("Instructions", justify="right")
    for match in matches:
        table.add_row(match.owner, match.name, str(len(match.body)))

    console.print(table)
    console.print(f"[green]Found {len(matches)} match(es)[/green]")
