from __future__ import annotations
from typing import List, Tuple

from .models import NEG_INF, MatchResult, NormalizedInput, ScoreMatrix


def best_end(mat: ScoreMatrix) -> Tuple[int, int]:
    """
    Column and score of the best cell in the last row.
    Ties go to the smallest column (earliest-ending match).
    """
    i = mat.rows - 1
    best_k, best = -1, NEG_INF
    for k in range(1, mat.width + 1):
        s = mat.score(i, k)
        if s > best:
            best_k, best = k, s
    return best_k, best


def backtrace(mat: ScoreMatrix, text: NormalizedInput) -> MatchResult:
    """
    Walk back from the best terminal cell to row 0.
    Match cells emit their ORIGINAL text index and step diagonally,
    gap cells step left.
    """
    k, score = best_end(mat)
    positions: List[int] = []
    i = mat.rows - 1
    while i > 0:
        if mat.is_match(i, k):
            positions.append(text.original_index(mat.lo + k - 1))
            i -= 1
        k -= 1
    positions.reverse()
    return MatchResult(
        start=positions[0],
        end=positions[-1] + 1,
        score=max(score, 0),
        positions=positions,
    )
