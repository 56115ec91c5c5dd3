"""Environment-driven settings and logging setup."""
import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "TABULA_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by TABULA_LOG_LEVEL, or *default* if unset/unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(silent: bool = False) -> None:
    """Send diagnostics to stderr; ``silent`` suppresses them entirely."""
    logging.basicConfig(level=resolve_log_level(), format=LOG_FORMAT)
    logging.disable(logging.CRITICAL if silent else logging.NOTSET)
