"""
fuzzmatch: fuzzy-finder style scoring for autocomplete and incremental filtering.

Main Functions:
    fuzzy_match(text, pattern, case_sensitive=False, normalize=True)
        -> MatchResult(start, end, score, positions)
    fuzzy_match_score(text, pattern, case_sensitive=False, normalize=True) -> int

Example Usage:
    from fuzzmatch import fuzzy_match

    start, end, score, positions = fuzzy_match("foo_bar_baz", "fbb")
    # positions == [0, 4, 8]

Callers rank candidates themselves: score each one and sort by descending score.
"""

# src/fuzzmatch/__init__.py
from .engine import Matcher, fuzzy_match, fuzzy_match_score  # re-export
from .errors import FuzzMatchError, InvalidInputError, InvalidTextError
from .models import CharClass, MatchResult, NormalizedInput
from .normalize import normalize_and_map

__version__ = "1.0.0"
__all__ = [
    "fuzzy_match",
    "fuzzy_match_score",
    "Matcher",
    "MatchResult",
    "NormalizedInput",
    "CharClass",
    "normalize_and_map",
    "FuzzMatchError",
    "InvalidInputError",
    "InvalidTextError",
]
