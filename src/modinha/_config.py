import logging
import os
from dotenv import load_dotenv

load_dotenv()


def _log_level(name: str) -> int:
    """Numeric level for *name*; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


config = {
    "random-bytes": int(os.getenv("MODINHA_RANDOM_BYTES", "10")),
    "log-level": _log_level(os.getenv("MODINHA_LOG_LEVEL", "WARNING")),
}
