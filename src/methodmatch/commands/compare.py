"""Compare command for checking a single pair of methods."""

from pathlib import Path

import click
from rich.console import Console

from methodmatch.analysis.exact_matcher import compare_exact
from methodmatch.analysis.fuzzy_aligner import align, compare_fuzzy
from methodmatch.analysis.matching_constants import MatchingDefaults
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
    help="JSON dump of the candidate module",
)
@click.option(
    "--target",
    "-t",
    required=True,
    help="Full name of the candidate method (Type::Method)",
)
@click.option("--fuzzy", is_flag=True, help="Use fuzzy block alignment instead of exact comparison")
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=MatchingDefaults.FUZZY_THRESHOLD,
    help=f"Minimum coverage for fuzzy matches (0.0-1.0, default: {MatchingDefaults.FUZZY_THRESHOLD})",
)
@handle_command_errors
def compare(
    reference: str,
    method: str,
    candidate: str,
    target: str,
    fuzzy: bool,
    threshold: float,
) -> None:
    """Compare a reference method with one candidate method."""
    reference_method = find_method(load_module(Path(reference)), method)
    candidate_method = find_method(load_module(Path(candidate)), target)

    if not fuzzy:
        matched = compare_exact(reference_method, candidate_method)
        _print_verdict(matched, reference_method.full_name, candidate_method.full_name)
        return

    matched = compare_fuzzy(reference_method, candidate_method, threshold)
    coverage = 0.0
    if candidate_method.has_body:
        coverage = align(reference_method.body, candidate_method.body).coverage

    console.print(f"Coverage: [bold]{coverage:.3f}[/bold] (threshold: {threshold})")
    _print_verdict(matched, reference_method.full_name, candidate_method.full_name)


def _print_verdict(matched: bool, reference_name: str, candidate_name: str) -> None:
    if matched:
        console.print(f"[green]Match:[/green] {reference_name} -> {candidate_name}")
    else:
        console.print(f"[yellow]No match:[/yellow] {reference_name} -> {candidate_name}")
