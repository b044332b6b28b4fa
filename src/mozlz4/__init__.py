"""Compress and decompress Mozilla mozlz4 files."""

from __future__ import annotations

from .codec import (
    MAGIC,
    BlockCodec,
    CompressionFailedError,
    DecompressionFailedError,
    InvalidFormatError,
    Lz4BlockCodec,
    Mozlz4Error,
    SizeMismatchError,
    SizeOverflowError,
    decode,
    encode,
    is_mozlz4,
)

__all__ = [
    "encode",
    "decode",
    "is_mozlz4",
    "MAGIC",
    "BlockCodec",
    "Lz4BlockCodec",
    "Mozlz4Error",
    "InvalidFormatError",
    "SizeMismatchError",
    "SizeOverflowError",
    "CompressionFailedError",
    "DecompressionFailedError",
]
