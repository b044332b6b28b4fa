"""mozlz4 container codec.

The mozlz4 format is a single LZ4 block behind a 12-byte header. Mozilla
applications use it for JSON stores in the user profile.

Usage::

    from mozlz4.codec import decode, encode

    container = encode(data)
    original = decode(container)
"""

from __future__ import annotations

from .block import BlockCodec, Lz4BlockCodec, compress_bound
from .constants import HEADER_LENGTH, MAGIC, MAX_UNCOMPRESSED_SIZE
from .container import decode, encode, is_mozlz4
from .exceptions import (
    CompressionFailedError,
    DecompressionFailedError,
    InvalidFormatError,
    Mozlz4Error,
    SizeMismatchError,
    SizeOverflowError,
)

__all__ = [
    # Core API
    "encode",
    "decode",
    "is_mozlz4",
    # Block codec
    "BlockCodec",
    "Lz4BlockCodec",
    "compress_bound",
    # Constants
    "MAGIC",
    "HEADER_LENGTH",
    "MAX_UNCOMPRESSED_SIZE",
    # Exceptions
    "Mozlz4Error",
    "InvalidFormatError",
    "SizeMismatchError",
    "SizeOverflowError",
    "CompressionFailedError",
    "DecompressionFailedError",
]
