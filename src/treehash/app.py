"""Command line entrypoint for computing tree hashes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from treehash.calculator import tree_hash_report
from treehash.config import (
    default_algorithm,
    default_log_level,
    default_max_workers,
)
from treehash.errors import TreeHashError

logger = logging.getLogger("treehash")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treehash",
        description="Line-wise SHA-256 tree hash (Glacier-style) for text files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute the tree hash of one or more files",
    )
    hash_parser.add_argument("files", nargs="+", help="Paths to the files to hash")
    _add_hash_options(hash_parser)
    hash_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Hash pairs of each level on N threads (default: serial)",
    )
    hash_parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of text",
    )

    leaves_parser = subparsers.add_parser(
        "leaves",
        help="Print the leaf hash of every line in a file",
    )
    leaves_parser.add_argument("file", help="Path to the file to inspect")
    _add_hash_options(leaves_parser)
    leaves_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report, leaves included, as JSON",
    )
    return parser


def _add_hash_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--algorithm",
        default=None,
        help=f"hashlib algorithm name (default: {default_algorithm()})",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help=(
            "Require lines to decode strictly with this encoding; "
            "'raw' hashes bytes as stored (default: TREEHASH_ENCODING or raw)"
        ),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else default_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "hash":
        try:
            workers = args.workers if args.workers is not None else default_max_workers()
        except ValueError as exc:
            parser.error(str(exc))
        if workers is not None and workers < 1:
            parser.error("--workers must be >= 1")

        status = 0
        reports = []
        for path in args.files:
            try:
                report = tree_hash_report(
                    path,
                    algorithm=args.algorithm,
                    encoding=args.encoding,
                    max_workers=workers,
                )
            except TreeHashError as exc:
                logger.error("%s", exc)
                reports.append({"source_path": path, "error": exc.to_dict()})
                status = 1
                continue
            reports.append(report)
            if not args.json:
                print(f"{report['tree_hash']}  {path}")
        if args.json:
            print(json.dumps(reports, indent=2))
        return status
    elif args.command == "leaves":
        try:
            report = tree_hash_report(
                args.file,
                algorithm=args.algorithm,
                encoding=args.encoding,
                include_leaves=True,
            )
        except TreeHashError as exc:
            logger.error("%s", exc)
            return 1
        if args.json:
            print(json.dumps(report, indent=2))
        else:
            for leaf in report["leaves"]:
                print(leaf)
        return 0
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
