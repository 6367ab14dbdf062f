"""Constants for method matching configuration.

This module defines default values and thresholds used by the exact and
fuzzy matchers. The commit ratio and the match threshold are distinct
values: the first decides which aligned runs count at all, the second
decides whether the resulting coverage is high enough.
"""


class AlignmentThresholds:
    """Internal thresholds of the fuzzy aligner."""

    # Fraction of the reference length a run must exceed to be credited (15%)
    COMMIT_RATIO = 0.15


class MatchingDefaults:
    """Default values for matching parameters."""

    # Default minimum coverage (0.0-1.0) for fuzzy matching
    FUZZY_THRESHOLD = 0.7

    # Default matching mode used by configuration and CLI
    MODE = "exact"
