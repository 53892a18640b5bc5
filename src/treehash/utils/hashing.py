"""Hash-function adapter used by the leaf hasher and the tree reducer.

The rest of the package only sees a ``HashFunction``: a callable taking the
bytes to hash and returning the digest. Each call starts from a fresh hash
state, so there is never carry-over between leaves or between pairs.
"""

from __future__ import annotations

import hashlib
from typing import Callable

from ..config import DEFAULT_ALGORITHM
from ..errors import HashAlgorithmUnavailable

HashFunction = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    """Return the raw 32-byte SHA-256 digest of `data`."""
    return hashlib.sha256(data).digest()


def get_hash_function(algorithm: str = DEFAULT_ALGORITHM) -> HashFunction:
    """Resolve `algorithm` (any hashlib name) into a HashFunction."""
    name = algorithm.lower().replace("-", "_")
    if name == "sha256":
        return sha256_digest
    if name.startswith("shake_"):
        # variable-length digests have no fixed size to build a tree from
        raise HashAlgorithmUnavailable(
            f"Hash algorithm {algorithm!r} has no fixed digest size",
            algorithm=algorithm,
        )
    try:
        hashlib.new(name)
    except (ValueError, TypeError) as exc:
        raise HashAlgorithmUnavailable(
            f"Hash algorithm {algorithm!r} is not available",
            algorithm=algorithm,
        ) from exc

    def _digest(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    _digest.__name__ = f"{name}_digest"
    return _digest


def hash_concat(hash_fn: HashFunction, left: bytes, right: bytes) -> bytes:
    """Hash the byte-wise concatenation of `left` followed by `right`."""
    return hash_fn(left + right)


__all__ = [
    "HashFunction",
    "get_hash_function",
    "hash_concat",
    "sha256_digest",
]
