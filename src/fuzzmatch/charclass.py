from __future__ import annotations
import unicodedata
from typing import List

from .config import BONUS_BOUNDARY, BONUS_BOUNDARY_ALT, BONUS_CAMEL_CASE, BONUS_NON_WORD
from .models import CharClass


def char_class(ch: str) -> CharClass:
    """Classify one character by its Unicode general category."""
    if ch.isascii():
        if "a" <= ch <= "z":
            return CharClass.LOWER
        if "A" <= ch <= "Z":
            return CharClass.UPPER
        if "0" <= ch <= "9":
            return CharClass.NUMBER
        return CharClass.NON_WORD

    cat = unicodedata.category(ch)
    if cat == "Ll":
        return CharClass.LOWER
    if cat == "Lu":
        return CharClass.UPPER
    if cat[0] == "L":
        return CharClass.LETTER
    if cat[0] == "N":
        return CharClass.NUMBER
    return CharClass.NON_WORD


def bonus_for(prev: CharClass, cur: CharClass) -> int:
    """Context bonus for a char of class `cur` following a char of class `prev`."""
    if prev is CharClass.NON_WORD:
        return BONUS_BOUNDARY if cur.is_word else BONUS_NON_WORD
    if prev is CharClass.LOWER and cur is CharClass.UPPER:
        return BONUS_CAMEL_CASE
    if cur is CharClass.NUMBER and prev is not CharClass.NUMBER:
        return BONUS_BOUNDARY_ALT
    return 0


def compute_bonus(chars: str) -> List[int]:
    """
    Bonus table aligned 1:1 with `chars`. The position before the first
    char counts as NON_WORD, so index 0 is always judged as a boundary.
    """
    bonus: List[int] = []
    prev = CharClass.NON_WORD
    for ch in chars:
        cur = char_class(ch)
        bonus.append(bonus_for(prev, cur))
        prev = cur
    return bonus
