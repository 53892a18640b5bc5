"""Small helper script to print the tree hash of files from the command line."""

import sys
from pathlib import Path

try:
    from treehash.calculator import compute_tree_hash_hex
except ImportError:
    # If the package isn't installed, put src/ on sys.path so the local
    # package can be imported for quick local runs.
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root / "src"))
    from treehash.calculator import compute_tree_hash_hex


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/hash_file.py <file> [<file> ...]")
        sys.exit(2)
    for name in sys.argv[1:]:
        print(f"{compute_tree_hash_hex(name)}  {name}")
