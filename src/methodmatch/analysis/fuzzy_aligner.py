"""Fuzzy block alignment of method bodies.

Fallback when exact comparison fails. Handles candidates that:
1. Contain the reference instructions with some missing or modified ones
2. Repeat blocks taken from the reference
3. Contain reference blocks in shuffled order

Approach:
1. Index candidate opcodes (opcode -> positions)
2. For every unmatched reference position, extend runs from each candidate
   position with the same opcode and keep all runs of maximal length
3. Credit those runs when they exceed a fixed fraction of the reference length
4. Coverage = credited reference positions / reference length

The comparison is asymmetric: the commit threshold and the coverage
denominator both come from the reference body.
"""

from collections.abc import Hashable, Sequence
import logging

from methodmatch.analysis.match_types import Alignment, RunRange, validate_threshold
from methodmatch.analysis.matching_constants import AlignmentThresholds
from methodmatch.analysis.opcode_index import OpcodeIndex
from methodmatch.core.model import Method, MethodBody

logger = logging.getLogger(__name__)


def check_reference(reference: MethodBody | None) -> MethodBody:
    """Ensure a fuzzy reference body can produce a coverage ratio.

    Raises:
        ValueError: If the reference has no body or an empty body.
    """
    if reference is None:
        raise ValueError("Fuzzy matching requires a reference method with a body")
    if len(reference) == 0:
        raise ValueError("Fuzzy matching requires a non-empty reference body")
    return reference


def _run_length(
    reference: Sequence[Hashable],
    candidate: Sequence[Hashable],
    ref_pos: int,
    cand_pos: int,
) -> tuple[int, bool]:
    """Count agreeing opcodes walking forward from both positions.

    Returns:
        Tuple of (run length, whether the walk stopped on a mismatch rather
        than at the end of either sequence).
    """
    run = 0
    while ref_pos + run < len(reference) and cand_pos + run < len(candidate):
        if reference[ref_pos + run] != candidate[cand_pos + run]:
            return run, True
        run += 1
    return run, False


def _run_range(anchor: int, start: int, run: int, mismatch: bool) -> RunRange:
    # A walk stopped by a mismatch also covers the mismatching pair
    end = run + 2 if mismatch else run + 1
    return RunRange(anchor, anchor + end, start, start + end)


def _best_runs(
    reference: Sequence[Hashable],
    candidate: Sequence[Hashable],
    anchor: int,
    positions: list[int],
) -> tuple[int, list[RunRange]]:
    """Find the longest runs following ``anchor`` over all candidate anchors.

    Ties are all kept; a strictly longer run replaces the collected ranges.

    Returns:
        Tuple of (longest run length, ranges achieving it).
    """
    best_run = 0
    best_ranges: list[RunRange] = []

    for start in positions:
        run, mismatch = _run_length(reference, candidate, anchor + 1, start + 1)
        if run > best_run:
            best_run = run
            best_ranges = [_run_range(anchor, start, run, mismatch)]
        elif run == best_run and run != 0:
            best_ranges.append(_run_range(anchor, start, run, mismatch))

    return best_run, best_ranges


def _commit(alignment: Alignment, run_range: RunRange) -> None:
    for position in range(run_range.reference_start, run_range.reference_end):
        alignment.reference_matched[position] = True
    for position in range(run_range.candidate_start, run_range.candidate_end):
        alignment.candidate_matched[position] = True
    alignment.runs.append(run_range)


def align(reference: MethodBody | None, candidate: MethodBody) -> Alignment:
    """Align a candidate body against a reference body.

    Args:
        reference: Reference body (must exist and be non-empty).
        candidate: Candidate body.

    Returns:
        Alignment holding both coverage arrays and the committed runs.

    Raises:
        ValueError: If the reference body is missing or empty.
    """
    reference = check_reference(reference)
    ref_ops = reference.opcodes()
    cand_ops = candidate.opcodes()

    index = OpcodeIndex(cand_ops)
    commit_threshold = len(ref_ops) * AlignmentThresholds.COMMIT_RATIO
    alignment = Alignment(
        reference_matched=[False] * len(ref_ops),
        candidate_matched=[False] * len(cand_ops),
        commit_threshold=commit_threshold,
    )

    for anchor, opcode in enumerate(ref_ops):
        if alignment.reference_matched[anchor] or opcode not in index:
            continue

        best_run, ranges = _best_runs(ref_ops, cand_ops, anchor, index.lookup(opcode))
        if best_run > commit_threshold:
            for run_range in ranges:
                _commit(alignment, run_range)

    logger.debug(
        f"Aligned {len(ref_ops)} reference / {len(cand_ops)} candidate instructions: "
        f"coverage={alignment.coverage:.3f}, commit_threshold={commit_threshold:.2f}, "
        f"runs={len(alignment.runs)}"
    )
    return alignment


def fuzzy_match(
    reference: MethodBody | None,
    candidate: MethodBody | None,
    threshold: float,
) -> bool:
    """Decide whether a candidate body fuzzily matches a reference body.

    Args:
        reference: Reference body (must exist and be non-empty).
        candidate: Candidate body, None if the candidate has no body.
        threshold: Coverage (0.0-1.0) that must be strictly exceeded.

    Returns:
        True if the reference coverage is greater than ``threshold``.

    Raises:
        ValueError: If the threshold is out of range or the reference body
            is missing or empty.
    """
    validate_threshold(threshold)
    check_reference(reference)
    if candidate is None:
        return False

    return align(reference, candidate).coverage > threshold


def compare_fuzzy(reference: Method, candidate: Method, threshold: float) -> bool:
    """Fuzzy comparison of two methods. Not symmetric in its arguments."""
    return fuzzy_match(reference.body, candidate.body, threshold)
