"""Tests for the mozlz4 exception hierarchy."""

from __future__ import annotations

import pytest

from mozlz4.codec.exceptions import (
    CompressionFailedError,
    DecompressionFailedError,
    InvalidFormatError,
    Mozlz4Error,
    SizeMismatchError,
    SizeOverflowError,
)


@pytest.mark.parametrize(
    "error",
    [
        InvalidFormatError(),
        SizeMismatchError(expected=3, actual=2),
        SizeOverflowError(2**32, 2**32 - 1),
        CompressionFailedError("boom"),
        DecompressionFailedError("boom"),
    ],
)
def test_all_errors_share_base(error: Mozlz4Error) -> None:
    assert isinstance(error, Mozlz4Error)
    assert str(error) == error.message


def test_invalid_format_default_message() -> None:
    assert str(InvalidFormatError()) == "not a mozlz4 file"


def test_size_mismatch_attributes() -> None:
    error = SizeMismatchError(expected=10, actual=7)
    assert (error.expected, error.actual) == (10, 7)
    assert error.message == "uncompressed size mismatch: expected 10, but got 7"


def test_size_overflow_message() -> None:
    error = SizeOverflowError(5_000_000_000, 4_294_967_295)
    assert "5000000000" in error.message
    assert "4294967295" in error.message


def test_repr() -> None:
    assert repr(CompressionFailedError("boom")) == "CompressionFailedError('boom')"
