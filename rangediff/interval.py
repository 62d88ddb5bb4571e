import re
from dataclasses import dataclass

Number = int | float

_TOKEN = re.compile(r"^(\d+)-(\d+)$", re.ASCII)


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Closed range of integers ``[start, end]``.

    Bounds are stored verbatim. Out-of-order, fractional or NaN bounds are
    allowed here and reported by the predicates in ``rangediff.validation``.

    Fields are keyword-only: ``Interval(start=10, end=20)``.
    """

    start: Number
    end: Number

    @classmethod
    def of(cls, token: str) -> "Interval":
        """Build an interval from a single ``start-end`` token.

        Raises:
            ValueError: If the token is not two non-negative integers joined
                by a hyphen
        """
        match = _TOKEN.match(token.strip())
        if match is None:
            raise ValueError(
                f"Interval token must look like 'start-end', got {token!r}.\n"
                f"Hint: use non-negative integers, e.g. Interval.of('10-20')\n"
                f"      to read a comma-separated list use parse_intervals()"
            )
        return cls(start=int(match.group(1)), end=int(match.group(2)))

    @property
    def length(self) -> Number:
        """Number of integers covered."""
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
