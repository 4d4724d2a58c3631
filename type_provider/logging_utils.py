import logging
import sys
from typing import Optional, Union

from .errors import ConfigurationError


def parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"unknown log level {level!r}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO, formatter: Optional[logging.Formatter] = None) -> None:
    """Send records below WARNING to stdout and the rest to stderr."""
    formatter = formatter or logging.Formatter("%(asctime)s %(name)s - %(levelname)s - %(message)s")
    out = logging.StreamHandler(stream=sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    err = logging.StreamHandler(stream=sys.stderr)
    err.setLevel(logging.WARNING)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(parse_level(level))
    for handler in (out, err):
        handler.setFormatter(formatter)
        root.addHandler(handler)
