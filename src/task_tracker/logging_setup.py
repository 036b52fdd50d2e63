from __future__ import annotations

import logging
import sys


class _ThirdPartyFilter(logging.Filter):
    """Keep task_tracker logs; let other libraries through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("task_tracker"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.INFO) -> None:
    """Install the task_tracker stderr handler on the root logger.

    Safe to call repeatedly (create_app does it); a previous call's handler
    is replaced, handlers installed by anything else are left alone.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Replace only our own handler; host or pytest handlers stay.
    for h in list(root.handlers):
        if getattr(h, "_task_tracker", False):
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(_ThirdPartyFilter())
    handler._task_tracker = True
    root.addHandler(handler)

    logging.captureWarnings(True)
