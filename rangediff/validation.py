"""Independent checks over raw interval text and parsed intervals.

Each predicate is total and vacuously true for empty input. They are kept
separate so that a caller can report every failing check at once.
"""

import math
import re
from collections.abc import Iterable

from rangediff.interval import Interval, Number

_TOKEN = re.compile(r"^\d+-\d+$", re.ASCII)


def _is_nan(value: Number) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_integer(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def has_valid_format(text: str | None) -> bool:
    """True if every comma-separated token is ``<digits>-<digits>``.

    Tokens are trimmed before matching; whitespace around the hyphen is
    rejected. ``None`` and ``""`` pass.
    """
    if not text:
        return True
    return all(_TOKEN.match(token.strip()) for token in text.split(","))


def are_valid_numbers(intervals: Iterable[Interval]) -> bool:
    return all(
        not _is_nan(interval.start) and not _is_nan(interval.end)
        for interval in intervals
    )


def is_start_less_than_or_equal_to_end(intervals: Iterable[Interval]) -> bool:
    return all(interval.start <= interval.end for interval in intervals)


def are_integers(intervals: Iterable[Interval]) -> bool:
    """True if both bounds of every interval have no fractional part."""
    return all(
        _is_integer(interval.start) and _is_integer(interval.end)
        for interval in intervals
    )
