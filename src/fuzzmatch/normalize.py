from __future__ import annotations
import unicodedata
from typing import List

from .models import NormalizedInput


def _is_invisible(ch: str) -> bool:
    """Combining marks and format characters (ZWJ, soft hyphen, ...)."""
    if unicodedata.combining(ch):
        return True
    return unicodedata.category(ch) in ("Mn", "Me", "Cf")


def normalize_char(ch: str, *, case_sensitive: bool, normalize: bool) -> str:
    """
    Normalize ONE character to at most one character.
    Returns "" when nothing matchable is left (the char gets elided).
    """
    s = ch if case_sensitive else ch.casefold()
    if normalize:
        s = "".join(c for c in unicodedata.normalize("NFD", s) if not _is_invisible(c))
        if len(s) > 1:
            # decomposed letters that are not marks (Hangul jamo) recompose
            s = unicodedata.normalize("NFC", s)
    # casefold() may still expand ("ß" -> "ss"): keep the first codepoint only
    return s[:1]


def normalize_and_map(text: str, *, case_sensitive: bool = False, normalize: bool = True) -> NormalizedInput:
    """
    Normalize text for matching and return a NormalizedInput:
      - chars: the normalized sequence (casefolded unless case_sensitive,
        diacritics stripped when normalize)
      - index_map: normalized index -> original index (in the ORIGINAL string)
    Rules:
      * every original char yields zero or one normalized char, so the map
        is strictly increasing and match positions stay valid
      * chars that normalize to nothing (standalone combining marks, format
        chars) are dropped from both the sequence and the map
    """
    if case_sensitive and not normalize:
        return NormalizedInput(text, tuple(range(len(text))))

    out_chars: list[str] = []
    mapping: List[int] = []

    for orig_i, ch in enumerate(text):
        if ch.isascii():
            # fast path: ASCII has nothing to decompose
            out_chars.append(ch if case_sensitive else ch.casefold())
            mapping.append(orig_i)
            continue
        n = normalize_char(ch, case_sensitive=case_sensitive, normalize=normalize)
        if not n:
            continue
        out_chars.append(n)
        mapping.append(orig_i)

    return NormalizedInput("".join(out_chars), tuple(mapping))


def normalize_only(text: str, *, case_sensitive: bool = False, normalize: bool = True) -> str:
    """Convenience: normalize and return only the normalized string."""
    return normalize_and_map(text, case_sensitive=case_sensitive, normalize=normalize).chars
