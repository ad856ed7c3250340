"""Shared helpers for word normalization."""

from __future__ import annotations

import re
from typing import Iterable, List

WORD_RE = re.compile(r"^[A-Z]+$")


def normalize_word(text: str) -> str:
    """Return ``text`` upper-cased, or ``""`` when it is not purely alphabetic.

    Tokens containing digits, punctuation, spaces or non-ASCII letters are
    rejected rather than stripped.
    """

    if not text:
        return ""
    candidate = text.strip().upper()
    if not WORD_RE.match(candidate):
        return ""
    return candidate


def filter_words(words: Iterable[str], min_length: int, max_length: int) -> List[str]:
    """Normalize ``words`` and keep unique entries within the length range, in order."""

    kept: List[str] = []
    seen = set()
    for raw in words:
        word = normalize_word(raw)
        if not word or word in seen:
            continue
        if not min_length <= len(word) <= max_length:
            continue
        seen.add(word)
        kept.append(word)
    return kept


__all__ = ["normalize_word", "filter_words", "WORD_RE"]
