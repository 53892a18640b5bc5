"""Error types raised while computing tree hashes."""

from __future__ import annotations

from typing import Any, Dict, Optional


class TreeHashError(Exception):
    """Base class for every failure surfaced by the tree hash pipeline."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
        }


class FileAccessError(TreeHashError):
    """Raised when the input file cannot be opened or read.

    Attributes:
        path: The path that could not be read, if known
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data


class DecodingError(TreeHashError):
    """Raised when a line is not valid under the requested text encoding.

    Attributes:
        path: The file being read, if known
        line_number: 1-based number of the offending line
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.path = path
        self.line_number = line_number

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        data["line_number"] = self.line_number
        return data


class InvalidInputError(TreeHashError):
    """Raised when the tree reducer is handed an empty leaf sequence."""


class HashAlgorithmUnavailable(TreeHashError):
    """Raised when the requested hash algorithm cannot be instantiated.

    Attributes:
        algorithm: The algorithm name that was requested
    """

    def __init__(self, message: str, algorithm: Optional[str] = None):
        super().__init__(message)
        self.algorithm = algorithm

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["algorithm"] = self.algorithm
        return data


__all__ = [
    "DecodingError",
    "FileAccessError",
    "HashAlgorithmUnavailable",
    "InvalidInputError",
    "TreeHashError",
]
