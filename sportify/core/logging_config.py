import logging
import sys
from typing import Optional, Union

from sportify.config import LOG_LEVEL

# Third-party loggers that are only noise at INFO
_QUIET_LOGGERS = ("urllib3", "requests")


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Turn a level name ("debug", "INFO") or number into a logging level.

    None falls back to the LOG_LEVEL setting; an unknown name falls back to
    INFO.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[Union[int, str]] = None) -> int:
    """
    Configure logging for the backend and return the level applied.

    - The "sportify" logger gets the requested level (LOG_LEVEL by default)
    - Logs go to stdout, one line per record: time, level, logger, message
    - The stdout handler is installed once; when uvicorn (or a test runner)
      already set up handlers, they are reused
    - HTTP client libraries never log below WARNING
    """
    resolved = resolve_level(level)
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
        root.setLevel(resolved)

    logging.getLogger("sportify").setLevel(resolved)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    return resolved
