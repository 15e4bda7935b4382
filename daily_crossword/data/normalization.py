"""Word normalization shared by placement, clue lookup and word sources."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..core.constants import MIN_WORD_LENGTH

NON_LETTER_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with every non A-Z character removed."""

    if not text:
        return ""
    return NON_LETTER_RE.sub("", text.upper())


def prepare_candidates(words: Iterable[str], grid_size: int) -> List[str]:
    """Normalize, drop words that cannot fit, longest first.

    The sort is stable so equal-length words keep their input order.
    """

    cleaned = (clean_word(word) for word in words)
    valid = [word for word in cleaned if MIN_WORD_LENGTH <= len(word) <= grid_size]
    return sorted(valid, key=len, reverse=True)


__all__ = ["clean_word", "prepare_candidates"]
