# src/fuzzmatch/engine.py
from __future__ import annotations

import logging

from . import config as CFG
from .backtrace import backtrace
from .charclass import compute_bonus
from .errors import InvalidInputError, InvalidTextError
from .matrix import best_score_only, build_matrix, scan_window
from .models import MatchResult, NormalizedInput
from .normalize import normalize_and_map

log = logging.getLogger(__name__)


def _validate(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidTextError(f"{name} is not valid text: {exc.reason} at index {exc.start}") from exc
    return value


def _prepare(text: str, pattern: str, case_sensitive: bool, normalize: bool):
    """
    Shared front half of both entry points.
    Returns (normalized text, normalized pattern, (first, last)) where the
    window is None when the pattern cannot match at all.
    """
    _validate("text", text)
    _validate("pattern", pattern)
    t = normalize_and_map(text, case_sensitive=case_sensitive, normalize=normalize)
    p = normalize_and_map(pattern, case_sensitive=case_sensitive, normalize=normalize).chars
    if not p or len(p) > len(t):
        return t, p, None
    window = scan_window(t.chars, p)
    if window is None:
        log.debug("no match: %r is not a subsequence of %r", p, t.chars)
    return t, p, window


def fuzzy_match(
    text: str,
    pattern: str,
    case_sensitive: bool = CFG.CASE_SENSITIVE,
    normalize: bool = CFG.NORMALIZE,
) -> MatchResult:
    """
    Score `pattern` against `text` and recover the matched positions.

    Returns MatchResult(start, end, score, positions) with positions indexing
    the original `text`. An empty pattern matches at 0 with score 0; a
    pattern that is not a subsequence yields MatchResult.no_match().
    """
    t, p, window = _prepare(text, pattern, case_sensitive, normalize)
    if not p:
        return MatchResult.empty()
    if window is None:
        return MatchResult.no_match()

    first, last = window
    mat = build_matrix(t.chars, p, compute_bonus(t.chars), first, last)
    return backtrace(mat, t)


def fuzzy_match_score(
    text: str,
    pattern: str,
    case_sensitive: bool = CFG.CASE_SENSITIVE,
    normalize: bool = CFG.NORMALIZE,
) -> int:
    """Score only; same value as fuzzy_match(...).score without the backtrace table."""
    t, p, window = _prepare(text, pattern, case_sensitive, normalize)
    if not p:
        return 0
    if window is None:
        return CFG.NO_MATCH_SCORE

    first, last = window
    return max(best_score_only(t.chars, p, compute_bonus(t.chars), first, last), 0)


class Matcher:
    """
    Holds the two matching flags so callers (CLI / Flask) configure them once.
    Stateless otherwise: every call is independent.
    """

    def __init__(self, *, case_sensitive: bool = CFG.CASE_SENSITIVE, normalize: bool = CFG.NORMALIZE) -> None:
        self.case_sensitive = case_sensitive
        self.normalize = normalize

    def match(self, text: str, pattern: str) -> MatchResult:
        return fuzzy_match(text, pattern, self.case_sensitive, self.normalize)

    def score(self, text: str, pattern: str) -> int:
        return fuzzy_match_score(text, pattern, self.case_sensitive, self.normalize)

    def normalize_text(self, text: str) -> NormalizedInput:
        return normalize_and_map(text, case_sensitive=self.case_sensitive, normalize=self.normalize)

    def __repr__(self) -> str:
        return f"Matcher(case_sensitive={self.case_sensitive}, normalize={self.normalize})"
