import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def resolve_level(name: Optional[str], default: int) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging:

    - DEBUG/INFO go to stdout
    - WARNING/ERROR/CRITICAL go to stderr

    The validator prints its JSON report on stdout, so the default level keeps
    stdout free of log records unless the caller asks for them.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
