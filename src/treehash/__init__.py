"""Line-wise SHA-256 tree hash for text files."""

from .calculator import compute_tree_hash, compute_tree_hash_hex, tree_hash_report
from .errors import (
    DecodingError,
    FileAccessError,
    HashAlgorithmUnavailable,
    InvalidInputError,
    TreeHashError,
)
from .leaves import iter_lines, leaf_hashes
from .tree import iter_levels, level_count, reduce_level, reduce_tree
from .utils.hashing import get_hash_function, sha256_digest

__version__ = "0.1.0"

__all__ = [
    "DecodingError",
    "FileAccessError",
    "HashAlgorithmUnavailable",
    "InvalidInputError",
    "TreeHashError",
    "compute_tree_hash",
    "compute_tree_hash_hex",
    "get_hash_function",
    "iter_levels",
    "iter_lines",
    "leaf_hashes",
    "level_count",
    "reduce_level",
    "reduce_tree",
    "sha256_digest",
    "tree_hash_report",
]
