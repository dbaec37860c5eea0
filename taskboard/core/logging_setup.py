"""Logging configuration for the ASGI entry point."""
from __future__ import annotations

import logging
import sys
from pathlib import Path


class _QuietThirdPartyFilter(logging.Filter):
    """Keep taskboard logs, only let other libraries through at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskboard"):
            return True
        # uvicorn access/error lines are useful during development.
        if record.name.startswith("uvicorn"):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = "INFO", *, log_file: str | Path | None = None) -> None:
    """
    Configure the root logger with a console handler and an optional file handler.

    Call this ONCE, before the app starts serving.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_QuietThirdPartyFilter())
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
