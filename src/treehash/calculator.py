"""Tree hash of a text file: line leaf hashes folded into one root digest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import default_algorithm, resolve_encoding
from .leaves import FileSource, leaf_hashes
from .tree import level_count, reduce_tree
from .utils.hashing import get_hash_function

logger = logging.getLogger(__name__)


def compute_tree_hash(
    file: FileSource,
    algorithm: Optional[str] = None,
    encoding: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> bytes:
    """Return the raw tree hash digest of `file`.

    `encoding` of None uses ``TREEHASH_ENCODING`` if set; ``"raw"`` always
    hashes raw line bytes. Raises FileAccessError, DecodingError (text mode
    only) or HashAlgorithmUnavailable. Nothing partial is returned on failure.
    """
    _, root = _leaves_and_root(file, algorithm, resolve_encoding(encoding), max_workers)
    return root


def compute_tree_hash_hex(
    file: FileSource,
    algorithm: Optional[str] = None,
    encoding: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> str:
    """Lowercase hexadecimal rendering of :func:`compute_tree_hash`."""
    return compute_tree_hash(file, algorithm, encoding, max_workers).hex()


def tree_hash_report(
    file: FileSource,
    algorithm: Optional[str] = None,
    encoding: Optional[str] = None,
    include_leaves: bool = False,
    max_workers: Optional[int] = None,
    source_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Compute the tree hash of `file` and describe it as a JSON-ready dict."""
    algorithm = algorithm or default_algorithm()
    encoding = resolve_encoding(encoding)
    leaves, root = _leaves_and_root(file, algorithm, encoding, max_workers)

    if source_name is None:
        if isinstance(file, (str, Path)):
            source_name = str(Path(file).expanduser().resolve())
        else:
            source_name = getattr(file, "name", None)

    report: Dict[str, Any] = {
        "source_path": source_name,
        "algorithm": algorithm,
        "encoding": encoding,
        "tree_hash": root.hex(),
        "leaf_count": len(leaves),
        "levels": level_count(len(leaves)),
    }
    if include_leaves:
        report["leaves"] = [leaf.hex() for leaf in leaves]
    return report


def _leaves_and_root(
    file: FileSource,
    algorithm: Optional[str],
    encoding: Optional[str],
    max_workers: Optional[int],
) -> Tuple[List[bytes], bytes]:
    hash_fn = get_hash_function(algorithm or default_algorithm())
    leaves = leaf_hashes(file, hash_fn, encoding)
    root = reduce_tree(leaves, hash_fn, max_workers=max_workers)
    logger.debug("Tree hash over %d leaves: %s", len(leaves), root.hex())
    return leaves, root


__all__ = [
    "compute_tree_hash",
    "compute_tree_hash_hex",
    "tree_hash_report",
]
