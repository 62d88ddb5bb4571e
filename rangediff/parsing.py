"""Lenient reader for comma-separated ``start-end`` interval lists.

Parsing never fails. Tokens that do not hold numbers produce intervals with
NaN bounds, and reversed tokens produce reversed intervals; both are left for
the predicates in ``rangediff.validation`` to report.
"""

import logging
import math
import re

from rangediff.interval import Interval, Number

LOG = logging.getLogger(__name__)

# plain decimal or exponent notation, ASCII digits only
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _to_number(piece: str | None) -> Number:
    if piece is None:
        return math.nan
    text = piece.strip()
    # blank pieces count as zero, so "-5-10" reads as 0-5
    if not text:
        return 0
    if not _NUMBER.fullmatch(text):
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    value = float(text)
    return int(value) if value.is_integer() else value


def parse_interval(token: str) -> Interval:
    pieces = token.split("-")
    start = _to_number(pieces[0])
    end = _to_number(pieces[1] if len(pieces) > 1 else None)
    return Interval(start=start, end=end)


def parse_intervals(text: str | None) -> list[Interval]:
    """Split ``text`` on commas and read each token as an interval.

    ``None`` and blank text yield an empty list. Source order is kept.
    """
    if not text or not text.strip():
        return []
    intervals = [parse_interval(token) for token in text.split(",")]
    LOG.debug("parsed %d intervals from %r", len(intervals), text)
    return intervals
