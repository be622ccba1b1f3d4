"""
Default value generators for schema fields.

Reference them as a field's ``default``. ``uuid`` and ``timestamp`` are
generators themselves, ``random`` builds one:

    >>> from modinha import defaults
    >>> schema = {
    ...     "_id":     {"default": defaults.uuid},
    ...     "secret":  {"default": defaults.random(16)},
    ...     "created": {"default": defaults.timestamp},
    ... }
    >>> len(schema["secret"]["default"]())
    32
"""
from __future__ import annotations

import secrets
import time
import uuid as _uuid
from typing import Callable

from modinha._config import config

__all__ = ["uuid", "random", "timestamp"]


def uuid() -> str:
    """A fresh version 4 UUID in its canonical string form."""
    return str(_uuid.uuid4())


def random(length: int | None = None) -> Callable[[], str]:
    """
    Factory ⇒ generator of ``length`` random bytes rendered as hex.

    ``length`` falls back to the configured ``random-bytes`` (10 bytes,
    20 hex characters).
    """
    n = config["random-bytes"] if length is None else length

    def _random() -> str:
        return secrets.token_hex(n)

    return _random


def timestamp() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
