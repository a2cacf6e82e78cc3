import pytest

from fuzzmatch import config as CFG
from fuzzmatch.charclass import bonus_for, char_class, compute_bonus
from fuzzmatch.models import CharClass


def test_scoring_contract_values():
    # pinned: these constants define every observable score
    assert CFG.SCORE_MATCH == 16
    assert CFG.SCORE_GAP_START == -3
    assert CFG.SCORE_GAP_EXTENSION == -1
    assert CFG.BONUS_BOUNDARY == 8
    assert CFG.BONUS_CAMEL_CASE == 7
    assert CFG.BONUS_BOUNDARY_ALT == 6
    assert CFG.BONUS_NON_WORD == 1
    assert CFG.BONUS_FIRST_CHAR_MULTIPLIER == 2
    assert CFG.BONUS_CONSECUTIVE == 4
    assert CFG.NO_MATCH_SCORE == -1


@pytest.mark.parametrize("ch,expected", [
    ("a", CharClass.LOWER),
    ("Z", CharClass.UPPER),
    ("7", CharClass.NUMBER),
    ("é", CharClass.LOWER),
    ("Ω", CharClass.UPPER),
    ("中", CharClass.LETTER),
    ("٣", CharClass.NUMBER),
    (" ", CharClass.NON_WORD),
    ("_", CharClass.NON_WORD),
    ("-", CharClass.NON_WORD),
    ("\u0301", CharClass.NON_WORD),
])
def test_char_class(ch, expected):
    assert char_class(ch) is expected


def test_bonus_rules():
    W, L, U, N, O = (CharClass.NON_WORD, CharClass.LOWER, CharClass.UPPER,
                     CharClass.NUMBER, CharClass.LETTER)
    assert bonus_for(W, L) == 8
    assert bonus_for(W, U) == 8
    assert bonus_for(W, N) == 8
    assert bonus_for(W, O) == 8
    assert bonus_for(L, U) == 7
    assert bonus_for(L, N) == 6
    assert bonus_for(U, N) == 6
    assert bonus_for(N, N) == 0
    assert bonus_for(W, W) == 1
    assert bonus_for(L, L) == 0
    assert bonus_for(U, L) == 0
    assert bonus_for(L, W) == 0


def test_compute_bonus_is_aligned_with_text():
    text = "fooBar_x2 -y"
    bonus = compute_bonus(text)
    assert len(bonus) == len(text)
    assert bonus == [8, 0, 0, 7, 0, 0, 0, 8, 6, 0, 1, 8]


def test_first_position_is_a_boundary():
    assert compute_bonus("a")[0] == 8
    assert compute_bonus("-")[0] == 1
    assert compute_bonus("") == []
