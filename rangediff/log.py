import logging
import os
import sys

LEVEL_ENV = "RANGEDIFF_LOG_LEVEL"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_level() -> str:
    level = os.environ.get(LEVEL_ENV, "WARNING").upper()
    return level if level in LEVELS else "WARNING"


def init_logging(level: str | None = None) -> None:
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=level or default_level(), handlers=[h], force=True)
