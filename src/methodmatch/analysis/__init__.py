"""Analysis modules for method identity recovery.

This package provides the matching engine:
- Exact opcode-sequence comparison
- Fuzzy block alignment with a coverage ratio
- Lazy search over types and modules
"""

from methodmatch.analysis.exact_matcher import compare_exact, matches_exactly
from methodmatch.analysis.fuzzy_aligner import align, compare_fuzzy, fuzzy_match
from methodmatch.analysis.match_types import (
    EXACT,
    Alignment,
    ExactMode,
    FuzzyMode,
    MatchMode,
    RunRange,
)
from methodmatch.analysis.method_finder import find_in_module, find_in_type, find_similar
from methodmatch.analysis.opcode_index import OpcodeIndex

__all__ = [
    "EXACT",
    "Alignment",
    "ExactMode",
    "FuzzyMode",
    "MatchMode",
    "OpcodeIndex",
    "RunRange",
    "align",
    "compare_exact",
    "compare_fuzzy",
    "find_in_module",
    "find_in_type",
    "find_similar",
    "fuzzy_match",
    "matches_exactly",
]
