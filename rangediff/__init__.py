from .core import format_intervals, merge, overlaps, process_intervals, subtract
from .form import FieldResult, Submission, check_field, submit
from .interval import Interval
from .parsing import parse_intervals
from .validation import (
    are_integers,
    are_valid_numbers,
    has_valid_format,
    is_start_less_than_or_equal_to_end,
)

__all__ = [
    "Interval",
    "parse_intervals",
    "has_valid_format",
    "are_valid_numbers",
    "is_start_less_than_or_equal_to_end",
    "are_integers",
    "overlaps",
    "subtract",
    "merge",
    "process_intervals",
    "format_intervals",
    "FieldResult",
    "Submission",
    "check_field",
    "submit",
]
