# src/fuzzmatch/models.py
"""
Data models for the matching engine.

Everything here is call-scoped: a NormalizedInput, a ScoreMatrix and the
resulting MatchResult are created by one match call and never shared.

- CharClass: coarse character class driving boundary / camel-case bonuses.
- NormalizedInput: normalized text plus its map back to original indices.
- ScoreMatrix: flat score/run arena for the dynamic-programming table.
- MatchResult: the object returned by fuzzy_match().
"""
from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

from .config import NO_MATCH_INDEX, NO_MATCH_SCORE

# Stand-in for -infinity; never reached by any real alignment score.
NEG_INF: int = -(1 << 60)


class CharClass(Enum):
    NON_WORD = 0
    LOWER = 1
    UPPER = 2
    LETTER = 3
    NUMBER = 4

    @property
    def is_word(self) -> bool:
        return self is not CharClass.NON_WORD


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """
    Attributes
    ----------
    chars : str
        The normalized sequence the engine matches against.
    index_map : Tuple[int, ...]
        index_map[k] is the index in the ORIGINAL string of chars[k].
        Strictly increasing; same length as chars.
    """
    chars: str
    index_map: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.chars)

    def original_index(self, k: int) -> int:
        return self.index_map[k]


class ScoreMatrix:
    """
    Arena-style table of (score, run) cells.

    Rows are pattern characters consumed (0..m). Columns cover only the
    narrowed window: column k stands for `lo + k` text characters consumed,
    so column 0 is the boundary before the window and column `width` ends it.
    A cell is a direct match exactly when its run length is > 0.
    """

    __slots__ = ("rows", "lo", "width", "stride", "scores", "runs")

    def __init__(self, rows: int, lo: int, width: int) -> None:
        self.rows = rows
        self.lo = lo
        self.width = width
        self.stride = width + 1
        size = rows * self.stride
        self.scores = array("q", [NEG_INF]) * size
        self.runs = array("q", [0]) * size

    def offset(self, i: int) -> int:
        return i * self.stride

    def score(self, i: int, k: int) -> int:
        return self.scores[i * self.stride + k]

    def run(self, i: int, k: int) -> int:
        return self.runs[i * self.stride + k]

    def is_match(self, i: int, k: int) -> bool:
        return self.runs[i * self.stride + k] > 0


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    Result of fuzzy_match().

    Unpacks as the tuple ``(start, end, score, positions)``. `positions` are
    indices into the original text; `end` is exclusive. A failed match uses
    -1 for start, end and score with no positions.
    """
    start: int
    end: int
    score: int
    positions: List[int] = field(default_factory=list)

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(NO_MATCH_INDEX, NO_MATCH_INDEX, NO_MATCH_SCORE, [])

    @classmethod
    def empty(cls) -> "MatchResult":
        return cls(0, 0, 0, [])

    @property
    def matched(self) -> bool:
        return self.start != NO_MATCH_INDEX

    def __iter__(self) -> Iterator:
        return iter((self.start, self.end, self.score, self.positions))

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "score": self.score,
            "positions": list(self.positions),
        }
