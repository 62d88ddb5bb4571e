"""Tests for the Interval value type."""

import pytest

from rangediff import Interval


def test_str_renders_start_dash_end() -> None:
    """The canonical text form is start-end."""
    assert str(Interval(start=10, end=100)) == "10-100"


def test_construction_does_not_validate() -> None:
    """Reversed and fractional bounds are stored as given."""
    reversed_ivl = Interval(start=20, end=10)
    assert (reversed_ivl.start, reversed_ivl.end) == (20, 10)

    fractional = Interval(start=1.5, end=2)
    assert str(fractional) == "1.5-2"


def test_intervals_compare_by_value() -> None:
    """Intervals with equal bounds are equal."""
    assert Interval(start=1, end=5) == Interval(start=1, end=5)
    assert Interval(start=1, end=5) != Interval(start=1, end=6)


def test_interval_is_frozen() -> None:
    """Bounds cannot be reassigned."""
    ivl = Interval(start=1, end=5)
    with pytest.raises(AttributeError):
        ivl.end = 10  # type: ignore[misc]


def test_positional_construction_is_rejected() -> None:
    """Bounds must be passed by keyword."""
    with pytest.raises(TypeError):
        Interval(10, 20)  # type: ignore[misc]


def test_length_counts_covered_integers() -> None:
    """Length counts both endpoints."""
    assert Interval(start=10, end=19).length == 10
    assert Interval(start=7, end=7).length == 1


def test_of_reads_single_token() -> None:
    """A trimmed start-end token builds an interval."""
    assert Interval.of(" 10-20 ") == Interval(start=10, end=20)


@pytest.mark.parametrize("token", ["10", "-5-10", "a-b", "10 - 20", "1-2-3", ""])
def test_of_rejects_malformed_token(token: str) -> None:
    """Anything but two non-negative integers joined by a hyphen is refused."""
    with pytest.raises(ValueError, match="start-end"):
        Interval.of(token)
