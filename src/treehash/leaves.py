"""Leaf hashing: one independent digest per line of a file."""

from __future__ import annotations

import codecs
import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, TextIO, Union

from .errors import DecodingError, FileAccessError
from .utils.hashing import HashFunction, sha256_digest

logger = logging.getLogger(__name__)

FileSource = Union[str, Path, BinaryIO, TextIO]

_BOMS = (
    codecs.BOM_UTF32_LE,
    codecs.BOM_UTF32_BE,
    codecs.BOM_UTF8,
    codecs.BOM_UTF16_LE,
    codecs.BOM_UTF16_BE,
)


def iter_lines(stream: BinaryIO, encoding: Optional[str] = None) -> Iterator[bytes]:
    """Yield the content of each line in `stream`, without its terminator.

    Lines end at ``\\n``; a ``\\r`` right before it belongs to the terminator,
    so ``\\r\\n`` and ``\\n`` files hash the same. A final line with no
    terminator is still yielded, but a terminator at end of file does not
    open an extra empty line. With `encoding` set, every line must decode
    strictly; the yielded bytes are still the line as stored.
    """
    name = getattr(stream, "name", None)
    for line_number, raw in enumerate(stream, start=1):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        if encoding is not None:
            try:
                raw.decode(encoding)
            except UnicodeDecodeError as exc:
                raise DecodingError(
                    f"Line {line_number} is not valid {encoding}: {exc.reason}",
                    path=None if name is None else str(name),
                    line_number=line_number,
                ) from exc
        yield raw


def check_encoding(encoding: str) -> None:
    """Reject encodings whose line terminators are not the ASCII bytes.

    Lines are split on the bytes ``\\r\\n``/``\\n`` before decoding, so only
    codecs that encode those characters as plain ASCII (a leading BOM aside)
    can be validated line by line. UTF-16 and UTF-32 are refused.
    """
    try:
        codecs.lookup(encoding)
        terminator = "\r\n".encode(encoding)
    except LookupError as exc:
        raise DecodingError(f"Unknown text encoding: {encoding!r}") from exc
    for bom in _BOMS:
        if terminator.startswith(bom):
            terminator = terminator[len(bom):]
            break
    if terminator != b"\r\n":
        raise DecodingError(
            f"Text encoding {encoding!r} is not ASCII-compatible; "
            "lines cannot be split on byte terminators"
        )


def leaf_hashes(
    source: FileSource,
    hash_fn: HashFunction = sha256_digest,
    encoding: Optional[str] = None,
) -> List[bytes]:
    """Return the ordered leaf digests for every line of `source`.

    `source` is a path, or a file object that stays open afterwards. Text
    file objects are read through their underlying binary buffer.
    A file without any lines yields the single sentinel leaf ``hash(b"")``.
    """
    if encoding is not None:
        check_encoding(encoding)
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser()
        try:
            with path.open("rb") as stream:
                logger.debug("Reading lines from %s", path)
                return _hash_stream(stream, hash_fn, encoding, str(path))
        except OSError as exc:
            raise FileAccessError(f"Cannot read file: {path} ({exc})", path=str(path)) from exc
    name = getattr(source, "name", None)
    if isinstance(source, io.TextIOBase):
        buffer = getattr(source, "buffer", None)
        if buffer is None:
            raise FileAccessError(
                f"Text stream {name!r} has no binary buffer to read line bytes from",
                path=None if name is None else str(name),
            )
        source = buffer
    try:
        return _hash_stream(source, hash_fn, encoding, name)
    except OSError as exc:
        raise FileAccessError(f"Cannot read stream {name!r} ({exc})", path=name) from exc


def _hash_stream(
    stream: BinaryIO,
    hash_fn: HashFunction,
    encoding: Optional[str],
    name: Optional[str],
) -> List[bytes]:
    leaves = [hash_fn(line) for line in iter_lines(stream, encoding)]
    if not leaves:
        logger.debug("No lines in %s, using empty-input sentinel leaf", name)
        return [hash_fn(b"")]
    logger.debug("Hashed %d lines from %s", len(leaves), name)
    return leaves


__all__ = [
    "FileSource",
    "check_encoding",
    "iter_lines",
    "leaf_hashes",
]
