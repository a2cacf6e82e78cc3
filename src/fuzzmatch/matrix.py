# src/fuzzmatch/matrix.py
"""
Dynamic-programming score matrix.

Cell (i, j) holds the best score of aligning pattern[:i] inside text[:j],
where text[j-1] is either matched to pattern[i-1] or skipped (gap):

    match(i, j) = best(i-1, j-1) + SCORE_MATCH
                  + bonus[j-1] * (BONUS_FIRST_CHAR_MULTIPLIER if i == 1 else 1)
                  + BONUS_CONSECUTIVE * run(i-1, j-1)
    gap(i, j)   = best(i, j-1) + (SCORE_GAP_START if (i, j-1) is a match
                                  else SCORE_GAP_EXTENSION)
    best(i, j)  = max(match, gap)      # a tie keeps the match

best(0, j) = 0 and best(i, 0) = -inf for i > 0. Only the column window
[first[0], last[-1]] found by scan_window() is materialized, and row i only
tries the match branch between first[i-1] and last[i-1].
"""
from __future__ import annotations

import logging
from array import array
from typing import List, Optional, Tuple

from .config import (
    BONUS_CONSECUTIVE,
    BONUS_FIRST_CHAR_MULTIPLIER,
    SCORE_GAP_EXTENSION,
    SCORE_GAP_START,
    SCORE_MATCH,
)
from .models import NEG_INF, ScoreMatrix

log = logging.getLogger(__name__)


def scan_window(text: str, pattern: str) -> Optional[Tuple[List[int], List[int]]]:
    """
    Subsequence pre-check plus per-character bounds.

    Returns (first, last) where first[i] is the earliest and last[i] the
    latest text index pattern[i] can occupy in any alignment, or None when
    pattern is not a subsequence of text.
    """
    first: List[int] = []
    j = 0
    for pc in pattern:
        j = text.find(pc, j)
        if j == -1:
            return None
        first.append(j)
        j += 1

    # the forward scan succeeded, so every rfind below succeeds too
    last = [0] * len(pattern)
    j = len(text)
    for i in range(len(pattern) - 1, -1, -1):
        j = text.rfind(pattern[i], 0, j)
        last[i] = j
    return first, last


def _fill_row(
    i: int,
    pc: str,
    text: str,
    bonus: List[int],
    lo: int,
    width: int,
    band: Tuple[int, int],
    prev_scores: array,
    prev_runs: array,
    prev_off: int,
    cur_scores: array,
    cur_runs: array,
    cur_off: int,
) -> None:
    """Evaluate row i (pattern char `pc`) from row i-1."""
    band_lo, band_hi = band
    mult = BONUS_FIRST_CHAR_MULTIPLIER if i == 1 else 1

    # nothing fits before the earliest position of pc
    k0 = band_lo - lo + 1
    cur_scores[cur_off + k0 - 1] = NEG_INF
    cur_runs[cur_off + k0 - 1] = 0

    for k in range(k0, width + 1):
        j = lo + k - 1
        c = cur_off + k

        left = cur_scores[c - 1]
        if left == NEG_INF:
            gap = NEG_INF
        elif cur_runs[c - 1] > 0:
            gap = left + SCORE_GAP_START
        else:
            gap = left + SCORE_GAP_EXTENSION

        if j <= band_hi and text[j] == pc:
            diag = prev_scores[prev_off + k - 1]
            if diag != NEG_INF:
                run = prev_runs[prev_off + k - 1]
                score = diag + SCORE_MATCH + bonus[j] * mult + BONUS_CONSECUTIVE * run
                if score >= gap:
                    cur_scores[c] = score
                    cur_runs[c] = run + 1
                    continue

        cur_scores[c] = gap
        cur_runs[c] = 0


def build_matrix(
    text: str,
    pattern: str,
    bonus: List[int],
    first: List[int],
    last: List[int],
) -> ScoreMatrix:
    """Build the full (len(pattern) + 1) x window table used for backtracing."""
    lo, hi = first[0], last[-1]
    width = hi - lo + 1
    mat = ScoreMatrix(len(pattern) + 1, lo, width)
    log.debug("score matrix: rows=%d window=[%d, %d]", mat.rows, lo, hi)

    for k in range(width + 1):
        mat.scores[k] = 0

    for i in range(1, mat.rows):
        _fill_row(
            i, pattern[i - 1], text, bonus, lo, width, (first[i - 1], last[i - 1]),
            mat.scores, mat.runs, mat.offset(i - 1),
            mat.scores, mat.runs, mat.offset(i),
        )
    return mat


def best_score_only(
    text: str,
    pattern: str,
    bonus: List[int],
    first: List[int],
    last: List[int],
) -> int:
    """
    Same recurrence as build_matrix() keeping only two rolling rows.
    Returns the best raw score in the last row.
    """
    lo, hi = first[0], last[-1]
    width = hi - lo + 1
    size = width + 1

    prev_scores = array("q", [0]) * size
    prev_runs = array("q", [0]) * size
    cur_scores = array("q", [NEG_INF]) * size
    cur_runs = array("q", [0]) * size

    for i in range(1, len(pattern) + 1):
        _fill_row(
            i, pattern[i - 1], text, bonus, lo, width, (first[i - 1], last[i - 1]),
            prev_scores, prev_runs, 0,
            cur_scores, cur_runs, 0,
        )
        prev_scores, cur_scores = cur_scores, prev_scores
        prev_runs, cur_runs = cur_runs, prev_runs

    # after the final swap the last row lives in prev_*; cells left of
    # its band still hold values from older rows
    k0 = first[-1] - lo + 1
    return max(prev_scores[k0:])
