"""
Constants for the mozlz4 container format.

Reference: Mozilla's ``mfbt/Compression`` and ``toolkit/components/lz4``.
"""

from __future__ import annotations

# ===========================================================================
# Header Layout
# ===========================================================================
#
# Every container starts with a fixed 12-byte header::
#
#     [magic: 8 bytes]["mozLz40\0"]
#     [uncompressed_size: 4 bytes LE]
#
# The LZ4 block payload follows immediately.

MAGIC: bytes = b"mozLz40\x00"
"""Magic bytes identifying a mozlz4 container.

The trailing NUL is part of the magic.
"""

SIZE_FIELD_LENGTH: int = 4
"""Length of the uncompressed-size field in bytes (unsigned 32-bit LE)."""

HEADER_LENGTH: int = len(MAGIC) + SIZE_FIELD_LENGTH
"""Total header length: 8 bytes of magic plus the 4-byte size field."""

MAX_UNCOMPRESSED_SIZE: int = 0xFFFFFFFF
"""Largest uncompressed size the 32-bit size field can declare."""

# ===========================================================================
# Block Bound
# ===========================================================================
#
# LZ4 never expands a block by more than one byte per 255 input bytes,
# plus a small constant for the final token and trailing literals.

BOUND_OVERHEAD: int = 16
"""Constant term of the LZ4 worst-case compressed size."""

BOUND_LITERAL_RUN: int = 255
"""Input bytes covered by each extra length byte in the worst case."""

# ===========================================================================
# Backend Limits
# ===========================================================================
#
# The LZ4 C API measures buffers with a signed int, so the backend cannot
# reach the full range of the 32-bit size field.

LZ4_MAX_INPUT_SIZE: int = 0x7E000000
"""Largest input ``LZ4_compress_default`` accepts (``LZ4_MAX_INPUT_SIZE``)."""

LZ4_MAX_OUTPUT_SIZE: int = 0x7FFFFFFF
"""Largest destination ``LZ4_decompress_safe`` can address (``INT_MAX``)."""
