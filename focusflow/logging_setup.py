"""Logging configuration for the command-line front end.

Library code only creates module loggers; handlers are installed here,
once, by the CLI callback.
"""

import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Send focusflow logs to stderr at the given level.

    Replaces any handlers installed by an earlier call so repeated CLI
    invocations in one process (tests) do not duplicate output.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger("focusflow")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
