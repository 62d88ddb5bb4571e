import logging
from collections.abc import Iterable
from dataclasses import replace
from functools import reduce

from rangediff.interval import Interval

LOG = logging.getLogger(__name__)


def overlaps(first: Interval, second: Interval) -> bool:
    """True if the two closed intervals share at least one integer."""
    return not (second.end < first.start or second.start > first.end)


def subtract(include: Interval, exclude: Interval) -> list[Interval]:
    """Remove ``exclude`` from ``include``, leaving zero, one or two pieces.

    Algorithm: A disjoint exclude leaves the include untouched. Otherwise the
    part left of the exclude and the part right of it survive, each only if
    it is non-empty. An exclude covering the whole include leaves nothing.
    """
    if not overlaps(include, exclude):
        return [include]

    pieces: list[Interval] = []
    if exclude.start > include.start:
        pieces.append(Interval(start=include.start, end=exclude.start - 1))
    if exclude.end < include.end:
        pieces.append(Interval(start=exclude.end + 1, end=include.end))
    return pieces


def _carve(include: Interval, excludes: Iterable[Interval]) -> list[Interval]:
    def reducer(remaining: list[Interval], exclude: Interval) -> list[Interval]:
        return [piece for kept in remaining for piece in subtract(kept, exclude)]

    return reduce(reducer, excludes, [include])


def merge(intervals: Iterable[Interval]) -> list[Interval]:
    """Coalesce overlapping and adjacent intervals into a sorted cover.

    The result is sorted by start and consecutive entries are separated by
    at least one uncovered integer.
    """
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if not ordered:
        return []

    merged = [ordered[0]]
    for current in ordered[1:]:
        last = merged[-1]
        if last.end < current.start - 1:
            merged.append(current)
        else:
            merged[-1] = replace(last, end=max(last.end, current.end))
    return merged


def process_intervals(
    includes: Iterable[Interval], excludes: Iterable[Interval]
) -> list[Interval]:
    """Return the integers covered by ``includes`` and by no ``excludes``.

    Each include is carved by every exclude in turn, independently of the
    other includes. The surviving pieces are then merged.

    Example:
        >>> process_intervals(
        ...     [Interval(start=10, end=100)], [Interval(start=20, end=30)]
        ... )
        [Interval(start=10, end=19), Interval(start=31, end=100)]
    """
    excludes = list(excludes)
    survivors = [
        piece for include in includes for piece in _carve(include, excludes)
    ]
    result = merge(survivors)
    LOG.debug(
        "%d pieces survived %d excludes, merged into %d intervals",
        len(survivors),
        len(excludes),
        len(result),
    )
    return result


def format_intervals(intervals: Iterable[Interval]) -> str:
    """Render intervals as ``"a-b, c-d"``."""
    return ", ".join(str(interval) for interval in intervals)
