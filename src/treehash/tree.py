"""Pairwise tree reduction of leaf digests into a single root digest.

Each level is built from the previous one by hashing adjacent pairs
(left bytes followed by right bytes). When a level has an odd number of
digests, the last one is carried into the next level unchanged, without
re-hashing. This matches the Glacier SHA-256 tree hash, see
https://docs.aws.amazon.com/amazonglacier/latest/dev/checksum-calculations.html
"""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Iterator, List, Optional, Sequence

from .errors import InvalidInputError
from .utils.hashing import HashFunction, hash_concat, sha256_digest

logger = logging.getLogger(__name__)


def reduce_level(
    level: Sequence[bytes],
    hash_fn: HashFunction = sha256_digest,
    executor: Optional[Executor] = None,
) -> List[bytes]:
    """Return the next level: one digest per pair, odd tail carried forward."""
    if not level:
        raise InvalidInputError("Cannot reduce an empty level")
    lefts = level[0::2]
    rights = level[1::2]
    if executor is None:
        combined = [hash_concat(hash_fn, left, right) for left, right in zip(lefts, rights)]
    else:
        combined = list(
            executor.map(lambda pair: hash_concat(hash_fn, *pair), zip(lefts, rights))
        )
    if len(level) % 2:
        combined.append(level[-1])
    return combined


def iter_levels(
    leaves: Sequence[bytes],
    hash_fn: HashFunction = sha256_digest,
    executor: Optional[Executor] = None,
) -> Iterator[List[bytes]]:
    """Yield every level of the tree, from the leaves down to the root level."""
    if not leaves:
        raise InvalidInputError("Leaf sequence must contain at least one digest")
    level = list(leaves)
    yield level
    while len(level) > 1:
        level = reduce_level(level, hash_fn, executor)
        logger.debug("Reduced level to %d digests", len(level))
        yield level


def reduce_tree(
    leaves: Sequence[bytes],
    hash_fn: HashFunction = sha256_digest,
    max_workers: Optional[int] = None,
) -> bytes:
    """Fold `leaves` into the root digest.

    With `max_workers` above one, the pairs of each level are hashed on a
    thread pool. Levels are still reduced strictly one after another and the
    root is identical to the serial result.
    """
    if not leaves:
        raise InvalidInputError("Leaf sequence must contain at least one digest")
    if max_workers is not None and max_workers > 1 and len(leaves) > 2:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return deque(iter_levels(leaves, hash_fn, executor), maxlen=1)[0][0]
    return deque(iter_levels(leaves, hash_fn), maxlen=1)[0][0]


def level_count(leaf_count: int) -> int:
    """Number of reduction levels needed for `leaf_count` leaves."""
    if leaf_count < 1:
        raise InvalidInputError("Leaf sequence must contain at least one digest")
    # ceil(log2(n)) without float rounding
    return (leaf_count - 1).bit_length()


__all__ = [
    "iter_levels",
    "level_count",
    "reduce_level",
    "reduce_tree",
]
