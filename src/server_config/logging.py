from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class LogFileSettings(BaseModel):
    """Where `--log-file` output goes. The file rolls over at midnight."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    keep_days: int = 7


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Loader fallthrough warnings are visible by default; INFO adds the load summary.
    level: str = "WARNING"
    file: Optional[LogFileSettings] = None


def init_logging(settings: LoggingSettings) -> None:
    """Configure the root logger with a stderr handler and an optional daily-rotated file."""
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {settings.level}")

    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    handlers.append(console)

    if settings.file is not None:
        path = Path(settings.file.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path,
            when="midnight",
            backupCount=settings.file.keep_days,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
