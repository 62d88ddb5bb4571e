import argparse
import logging
import sys

from rangediff.form import submit
from rangediff.log import LEVEL_ENV, LEVELS, default_level, init_logging

LOG = logging.getLogger(__name__)


def _arguments() -> argparse.ArgumentParser:
    program = argparse.ArgumentParser(
        prog="rangediff",
        description="Subtract excluded integer intervals from included ones",
    )

    program.add_argument(
        "-i", "--include",
        metavar="TEXT",
        help='intervals to include, e.g. "1-100, 20-200"'
    )

    program.add_argument(
        "-e", "--exclude",
        metavar="TEXT",
        help='intervals to exclude, e.g. "5-50, 60-120"'
    )

    program.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVELS,
        default=default_level(),
        help=f"logging verbosity (default from ${LEVEL_ENV}, else WARNING)"
    )

    return program


def main(argv: list[str] | None = None) -> int:
    args = _arguments().parse_args(argv)
    init_logging(args.log_level)

    submission = submit(args.include, args.exclude)
    if not submission.ok:
        for name, messages in submission.errors.items():
            for message in messages:
                print(f"{name}: {message}", file=sys.stderr)
        LOG.info("rejected input with %d invalid fields", len(submission.errors))
        return 2

    print(submission.formatted)
    return 0
