"""Field-level validation for include/exclude text, as an input form uses it.

A format failure is fatal for its field. Otherwise the numeric checks run
independently and every failing one adds its own message.
"""

from dataclasses import dataclass, field

from rangediff.core import format_intervals, process_intervals
from rangediff.interval import Interval
from rangediff.parsing import parse_intervals
from rangediff.validation import (
    are_integers,
    are_valid_numbers,
    has_valid_format,
    is_start_less_than_or_equal_to_end,
)

FORMAT_MESSAGE = (
    "Intervals must be in the format XX-YY, separated by commas. "
    "Negative numbers are not allowed."
)
NUMBERS_MESSAGE = "All intervals must be valid numbers separated by commas"
ORDER_MESSAGE = "Start of the interval must be equal to or less than the end"
INTEGERS_MESSAGE = "All interval values must be integers"
REQUIRED_MESSAGE = "Includes must have at least one interval."

_CHECKS = (
    (are_valid_numbers, NUMBERS_MESSAGE),
    (is_start_less_than_or_equal_to_end, ORDER_MESSAGE),
    (are_integers, INTEGERS_MESSAGE),
)


@dataclass(frozen=True)
class FieldResult:
    intervals: list[Interval] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Submission:
    result: list[Interval] | None
    errors: dict[str, list[str]]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def formatted(self) -> str:
        return format_intervals(self.result or [])


def check_field(text: str | None, required: bool = False) -> FieldResult:
    if text and not has_valid_format(text):
        return FieldResult(errors=[FORMAT_MESSAGE])

    intervals = parse_intervals(text)
    errors = [message for check, message in _CHECKS if not check(intervals)]
    if required and not intervals:
        errors.append(REQUIRED_MESSAGE)
    return FieldResult(intervals=intervals, errors=errors)


def submit(includes_text: str | None, excludes_text: str | None) -> Submission:
    """Validate both fields and, if they pass, compute the difference.

    Includes are required; excludes may be empty. Processing is skipped when
    either field has errors.
    """
    fields = {
        "includes": check_field(includes_text, required=True),
        "excludes": check_field(excludes_text),
    }
    errors = {name: res.errors for name, res in fields.items() if res.errors}
    if errors:
        return Submission(result=None, errors=errors)

    result = process_intervals(
        fields["includes"].intervals, fields["excludes"].intervals
    )
    return Submission(result=result, errors={})
