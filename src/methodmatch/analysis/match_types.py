"""Data types for method matching.

This module defines the core data structures used in method matching:
- ExactMode / FuzzyMode: How candidate methods are compared
- RunRange: A committed run of opcode-equal instructions
- Alignment: Result of a fuzzy alignment with coverage ratios
"""

from dataclasses import dataclass, field


def validate_threshold(threshold: float) -> float:
    """Check that a match threshold lies in [0, 1].

    Raises:
        ValueError: If the threshold is out of range.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
    return threshold


@dataclass(frozen=True)
class ExactMode:
    """Match methods whose opcode sequences are identical."""


@dataclass(frozen=True)
class FuzzyMode:
    """Match methods whose fuzzy coverage exceeds ``threshold``.

    Attributes:
        threshold: Minimum coverage (0.0-1.0), compared with strict inequality.
    """

    threshold: float

    def __post_init__(self) -> None:
        validate_threshold(self.threshold)


MatchMode = ExactMode | FuzzyMode

EXACT = ExactMode()


@dataclass(frozen=True)
class RunRange:
    """Half-open ranges of an aligned run on both sides.

    The range starts at the anchor instruction and includes every following
    instruction whose opcode agreed. When the walk stopped on a mismatch,
    the mismatching instruction on each side is included as well.

    Attributes:
        reference_start: First reference position (the anchor).
        reference_end: One past the last reference position.
        candidate_start: First candidate position.
        candidate_end: One past the last candidate position.
    """

    reference_start: int
    reference_end: int
    candidate_start: int
    candidate_end: int

    @property
    def span(self) -> int:
        """Number of positions covered on each side, anchor included."""
        return self.reference_end - self.reference_start


@dataclass
class Alignment:
    """Result of aligning a reference body against a candidate body.

    Attributes:
        reference_matched: Per reference position, whether a committed run covers it.
        candidate_matched: Per candidate position, whether a committed run covers it.
        commit_threshold: Run length a best run had to exceed to be credited.
        runs: Every committed run, in the order it was credited.
    """

    reference_matched: list[bool]
    candidate_matched: list[bool]
    commit_threshold: float
    runs: list[RunRange] = field(default_factory=list)

    @property
    def coverage(self) -> float:
        """Fraction of reference positions credited as matched."""
        return sum(self.reference_matched) / len(self.reference_matched)

    @property
    def candidate_coverage(self) -> float:
        """Fraction of candidate positions credited as matched."""
        if not self.candidate_matched:
            return 0.0
        return sum(self.candidate_matched) / len(self.candidate_matched)
