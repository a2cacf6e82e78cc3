# src/frontend/ranking.py
"""
Ranking on top of the matching engine.

The engine scores one (text, pattern) pair at a time; ordering a list of
candidates is the caller's job and lives here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from fuzzmatch import Matcher
from fuzzmatch.config import TOP_K

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RankedCandidate:
    """
    One ranked row.

    Attributes
    ----------
    text : str
        The candidate exactly as given.
    score : int
        fuzzy_match() score.
    start, end : int
        Match span in `text` (end exclusive).
    positions : List[int]
        Matched indices in `text`, for highlighting.
    index : int
        Position of the candidate in the input list.
    """
    text: str
    score: int
    start: int
    end: int
    positions: List[int] = field(default_factory=list)
    index: int = 0

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "score": self.score,
            "start": self.start,
            "end": self.end,
            "positions": list(self.positions),
            "index": self.index,
        }


def rank(
    pattern: str,
    candidates: Iterable[str],
    *,
    top_k: Optional[int] = TOP_K,
    matcher: Optional[Matcher] = None,
) -> List[RankedCandidate]:
    """
    Score every candidate and return the best `top_k` (all when None).
    Order: score desc, then shorter candidate, then input order.
    An empty pattern ranks nothing; a negative top_k is a ValueError.
    """
    if top_k is not None and top_k < 0:
        raise ValueError(f"top_k must be >= 0, got {top_k}")
    if not pattern:
        return []
    matcher = matcher or Matcher()

    rows: List[RankedCandidate] = []
    total = 0
    for idx, text in enumerate(candidates):
        total += 1
        res = matcher.match(text, pattern)
        if not res.matched:
            continue
        rows.append(RankedCandidate(text, res.score, res.start, res.end, res.positions, idx))

    rows.sort(key=lambda r: (-r.score, len(r.text), r.index))
    log.info("Ranked %r: %d/%d candidates matched", pattern, len(rows), total)
    return rows if top_k is None else rows[:top_k]
