"""Runtime configuration for the tree hash toolkit."""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_ALGORITHM = "sha256"
DEFAULT_LOG_LEVEL = "WARNING"
# encoding name that forces raw-byte lines, even over TREEHASH_ENCODING
RAW_ENCODING = "raw"


def default_algorithm() -> str:
    return os.getenv("TREEHASH_ALGORITHM") or DEFAULT_ALGORITHM


def default_encoding() -> Optional[str]:
    """Text encoding for line decoding; None hashes raw line bytes."""
    encoding = os.getenv("TREEHASH_ENCODING")
    if not encoding or encoding.lower() == RAW_ENCODING:
        return None
    return encoding


def resolve_encoding(encoding: Optional[str]) -> Optional[str]:
    """Map an explicit encoding choice to what the leaf hasher expects.

    None defers to the environment default, ``"raw"`` means raw bytes.
    """
    if encoding is None:
        return default_encoding()
    if encoding.lower() == RAW_ENCODING:
        return None
    return encoding


def default_max_workers() -> Optional[int]:
    raw = os.getenv("TREEHASH_MAX_WORKERS")
    if not raw:
        return None
    try:
        workers = int(raw)
    except ValueError as exc:
        raise ValueError(f"TREEHASH_MAX_WORKERS must be an integer, got {raw!r}") from exc
    if workers < 1:
        raise ValueError(f"TREEHASH_MAX_WORKERS must be >= 1, got {workers}")
    return workers


def default_log_level() -> str:
    return (os.getenv("TREEHASH_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_LOG_LEVEL",
    "RAW_ENCODING",
    "default_algorithm",
    "default_encoding",
    "default_log_level",
    "default_max_workers",
    "resolve_encoding",
]
