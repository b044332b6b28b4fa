"""
LZ4 block codec abstraction.

The container format wraps exactly one raw LZ4 block. The framing logic
never touches the LZ4 algorithm directly; it talks to a block codec through
the `BlockCodec` protocol below.

The default backend is `Lz4BlockCodec`, built on the ``lz4`` distribution.
Tests can inject any object with the same three methods, for example a
codec that simply copies bytes.


RAW BLOCKS
----------
A raw LZ4 block carries no length prefix. The decoder must be told how
much space to decode into::

    compressed = compress_block(data)
    original = decompress_block(compressed, uncompressed_size=len(data))

The mozlz4 header stores that length, so ``lz4.block`` is always called
with ``store_size=False`` on the way in and an explicit
``uncompressed_size`` on the way out.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import lz4.block

from .constants import (
    BOUND_LITERAL_RUN,
    BOUND_OVERHEAD,
    LZ4_MAX_INPUT_SIZE,
    LZ4_MAX_OUTPUT_SIZE,
)
from .exceptions import CompressionFailedError, DecompressionFailedError


def compress_bound(n: int) -> int:
    """
    Worst-case compressed size of an ``n``-byte input.

    Mirrors ``LZ4_COMPRESSBOUND``: incompressible data grows by one length
    byte per 255 input bytes plus a small constant.

    Args:
        n: Uncompressed input length.

    Returns:
        Maximum number of bytes a single LZ4 block for ``n`` bytes can occupy.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError("Input length must be non-negative")
    return n + n // BOUND_LITERAL_RUN + BOUND_OVERHEAD


@runtime_checkable
class BlockCodec(Protocol):
    """
    Whole-block compressor and decompressor.

    Implementations raise `CompressionFailedError` or
    `DecompressionFailedError` when the underlying library reports a failure.
    """

    def compress_block(self, src: bytes) -> bytes:
        """Compress ``src`` into a single raw block."""
        ...

    def decompress_block(self, src: bytes, uncompressed_size: int) -> bytes:
        """
        Decode a raw block into at most ``uncompressed_size`` bytes.

        The returned buffer may be shorter than ``uncompressed_size`` if the
        block decodes to less data. Callers check the length.
        """
        ...

    def compress_bound(self, n: int) -> int:
        """Worst-case size of ``compress_block`` output for ``n`` input bytes."""
        ...


class Lz4BlockCodec:
    """
    Block codec backed by ``lz4.block`` (the reference LZ4 library).

    The C library addresses buffers with a signed int. Inputs above
    `LZ4_MAX_INPUT_SIZE` are refused up front, and decoding never asks for
    more than `LZ4_MAX_OUTPUT_SIZE` bytes of destination.
    """

    def compress_block(self, src: bytes) -> bytes:
        if len(src) > LZ4_MAX_INPUT_SIZE:
            raise CompressionFailedError(
                f"Input of {len(src)} bytes exceeds LZ4 backend limit of "
                f"{LZ4_MAX_INPUT_SIZE} bytes"
            )
        try:
            return lz4.block.compress(src, mode="default", store_size=False)
        except (lz4.block.LZ4BlockError, OverflowError) as e:
            raise CompressionFailedError(f"LZ4 compression failed: {e}") from e

    def decompress_block(self, src: bytes, uncompressed_size: int) -> bytes:
        # LZ4 rejects a zero-length destination; an empty block is never valid here.
        if uncompressed_size <= 0:
            raise DecompressionFailedError(
                f"Invalid target size for LZ4 block: {uncompressed_size}"
            )

        # Sizes past INT_MAX cannot be passed to LZ4 at all.
        #
        # Decode into the largest destination the backend supports instead.
        # A block that fits comes back short and the caller reports the mismatch.
        capacity = min(uncompressed_size, LZ4_MAX_OUTPUT_SIZE)
        try:
            return lz4.block.decompress(src, uncompressed_size=capacity)
        except (lz4.block.LZ4BlockError, OverflowError, ValueError) as e:
            if capacity < uncompressed_size:
                raise DecompressionFailedError(
                    f"Declared size of {uncompressed_size} bytes exceeds LZ4 backend limit of "
                    f"{LZ4_MAX_OUTPUT_SIZE} bytes"
                ) from e
            raise DecompressionFailedError(f"LZ4 decompression failed: {e}") from e

    def compress_bound(self, n: int) -> int:
        return compress_bound(n)


DEFAULT_BLOCK_CODEC: BlockCodec = Lz4BlockCodec()
"""Shared stateless backend used when no codec is injected."""
