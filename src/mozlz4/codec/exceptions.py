"""Exception hierarchy for the mozlz4 codec."""

from __future__ import annotations


class Mozlz4Error(Exception):
    """
    Base exception for all mozlz4 errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidFormatError(Mozlz4Error):
    """
    Raised when input is not a recognizable mozlz4 container.

    Covers a missing or wrong magic and a truncated size field.
    """

    def __init__(self, detail: str = "not a mozlz4 file") -> None:
        super().__init__(detail)


class SizeMismatchError(Mozlz4Error):
    """
    Raised when the decoded payload length differs from the declared size.

    Attributes:
        expected: Size declared in the container header.
        actual: Number of bytes the payload actually decoded to.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual

        super().__init__(f"uncompressed size mismatch: expected {expected}, but got {actual}")


class SizeOverflowError(Mozlz4Error):
    """
    Raised when input is too large for the 32-bit size field.

    Attributes:
        size: Length of the rejected input.
        max_size: Largest length the format can declare.
    """

    def __init__(self, size: int, max_size: int) -> None:
        self.size = size
        self.max_size = max_size

        super().__init__(f"input of {size} bytes exceeds the format limit of {max_size} bytes")


class CompressionFailedError(Mozlz4Error):
    """Raised when the block codec fails to compress the input."""


class DecompressionFailedError(Mozlz4Error):
    """Raised when the block codec cannot decode the payload."""
