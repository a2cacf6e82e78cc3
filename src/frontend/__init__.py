"""Public API for ranking a loaded candidate list."""
from __future__ import annotations
import logging
from typing import List, Optional

from fuzzmatch import Matcher
from fuzzmatch.config import TOP_K
from .loader import load_candidates, load_lines
from .ranking import RankedCandidate, rank

log = logging.getLogger(__name__)

_candidates: List[str] | None = None
_matcher: Matcher = Matcher()


def initialize(paths: list[str],
               case_sensitive: bool = False,
               normalize: bool = True,
               verbose: bool = False) -> int:
    """Load candidates from files/folders and set the matching flags. Returns the count."""
    global _candidates, _matcher
    if verbose:
        logging.basicConfig(level=logging.INFO)
    _candidates = load_candidates(paths)
    _matcher = Matcher(case_sensitive=case_sensitive, normalize=normalize)
    log.info("Ready: %d candidates, %r", len(_candidates), _matcher)
    return len(_candidates)


def complete(query: str, top_k: Optional[int] = TOP_K) -> List[RankedCandidate]:
    """Return the top-K ranked candidates for `query`."""
    if _candidates is None:
        raise RuntimeError("Candidates not loaded. Call initialize(...) first.")
    return rank(query, _candidates, top_k=top_k, matcher=_matcher)


__all__ = [
    "initialize",
    "complete",
    "rank",
    "RankedCandidate",
    "load_candidates",
    "load_lines",
]
