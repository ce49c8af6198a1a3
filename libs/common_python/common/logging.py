"""Shared logging utilities.

Services call `configure_logging` once from their entrypoint so every process
emits the same line format to stderr. Modules then use plain
`logging.getLogger(__name__)`.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger to write `LOG_FORMAT` lines to stderr.

    Safe to call repeatedly: `force=True` replaces any handlers installed by
    an earlier call.

    Args:
        level: Log level name (case-insensitive) or number.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
