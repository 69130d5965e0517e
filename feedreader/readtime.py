"""Reading time estimation."""

from __future__ import annotations

import math

WORDS_PER_MINUTE = 200


def estimate_read_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Return whole minutes needed to read ``text``, never less than one."""

    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    words = len(text.split()) if text else 0
    return max(1, math.ceil(words / words_per_minute))


__all__ = ["WORDS_PER_MINUTE", "estimate_read_time"]
