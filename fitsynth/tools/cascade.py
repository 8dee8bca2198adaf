# fitsynth/tools/cascade.py
"""
FitSynth — Fallback Cascade Helpers
===================================
Small shared pieces used by every extractor:
  - try_in_order: walk an ordered list of matchers, first non-empty wins
  - as_text: coerce arbitrary input into a string (None -> "")
  - is_excluded_name: the non-exercise stoplist check
"""

import logging
import math
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def try_in_order(
    matchers: Sequence[Callable[[T], Optional[R]]],
    value: T,
    label: str = "cascade",
) -> Optional[R]:
    """
    Return the first truthy result produced by `matchers` on `value`.

    Each matcher is a pure function returning either a result or something
    falsy (None, empty list) to let the next rung have a go.

    Args:
        matchers: Ordered matcher functions, highest priority first.
        value: The input handed to every matcher.
        label: Name used in debug logs.

    Returns:
        The first non-empty result, or None when every rung came up empty.
    """
    for rung, matcher in enumerate(matchers):
        result = matcher(value)
        if result:
            if rung:
                name = getattr(matcher, "__name__", repr(matcher))
                logger.debug("%s: rung %d (%s) matched", label, rung, name)
            return result
    return None


def as_text(value: Any) -> str:
    """Treat None and non-string input as text; None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def dedupe_by(items: Iterable[T], key: Callable[[T], Any]) -> List[T]:
    """Keep the first occurrence of every key, preserving order."""
    seen = set()
    unique = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        unique.append(item)
    return unique


def round_half_up(value: float, default: int = 0) -> int:
    """Round halves upward (2.5 -> 3), unlike Python's banker's rounding.

    inf and nan have no integer value and give `default` instead.
    """
    if not math.isfinite(value):
        return default
    return int(math.floor(value + 0.5))


# A whole number of at most six digits, never the tail of a longer run.
BOUNDED_INT = r"(?<!\d)(\d{1,6})(?!\d)"

# Minute or hour unit after a duration number; "1h30" still reads as hours
DURATION_UNIT = r"(minutes?|mins?|heures?|h)(?![a-zà-ÿ])"


# Words that show up in regex over-matches but never name an exercise
EXCLUDED_EXERCISE_KEYWORDS = (
    "séries", "répétitions", "sets", "reps", "repos", "rest",
    "min", "minutes", "secondes", "sec",
)


def is_excluded_name(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in EXCLUDED_EXERCISE_KEYWORDS)


__all__ = [
    "try_in_order",
    "as_text",
    "dedupe_by",
    "is_excluded_name",
    "round_half_up",
    "BOUNDED_INT",
    "DURATION_UNIT",
    "EXCLUDED_EXERCISE_KEYWORDS",
]
