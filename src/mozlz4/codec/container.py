"""
mozlz4 container encoding and decoding.

Mozilla applications (Firefox session stores, search engine caches, add-on
metadata) store JSON as a single LZ4 block behind a small header.


CONTAINER LAYOUT
----------------
::

    [magic: 8 bytes = "mozLz40\\0"]
    [uncompressed_size: 4 bytes LE]
    [lz4_block: variable]

The size field records the length of the ORIGINAL data. It lets the
decoder allocate the output up front and verify it afterwards.

An empty input encodes to the 12-byte header alone; there is no payload.


VALIDATION
----------
Decoding short-circuits through four stages:

  1. MAGIC: the first 8 bytes must match exactly.
  2. SIZE FIELD: 4 more bytes must be present.
  3. EMPTY: a declared size of 0 returns immediately.
       Trailing bytes after a zero size are ignored.
  4. PAYLOAD: the block must decode to exactly the declared size.

Each stage maps to its own exception class so callers can tell a foreign
file from a corrupted one.
"""

from __future__ import annotations

from .block import DEFAULT_BLOCK_CODEC, BlockCodec
from .constants import HEADER_LENGTH, MAGIC, MAX_UNCOMPRESSED_SIZE, SIZE_FIELD_LENGTH
from .exceptions import (
    CompressionFailedError,
    InvalidFormatError,
    SizeMismatchError,
    SizeOverflowError,
)


def is_mozlz4(data: bytes) -> bool:
    """
    Check whether data starts with the mozlz4 magic.

    This is a prefix test only. A `True` result does not mean the rest
    of the container is valid; only `decode` establishes that.
    """
    return data[: len(MAGIC)] == MAGIC


def encode(data: bytes, codec: BlockCodec | None = None) -> bytes:
    """
    Encode raw bytes as a mozlz4 container.

    Args:
        data: Uncompressed input. May be empty.
        codec: Block codec to compress with. Defaults to LZ4.

    Returns:
        The container: 12-byte header followed by the compressed block.

    Raises:
        SizeOverflowError: If data is longer than the 32-bit size field allows.
        CompressionFailedError: If the block codec fails.
    """
    if codec is None:
        codec = DEFAULT_BLOCK_CODEC

    # Step 1: Validate the size fits the header field.
    size = len(data)
    if size > MAX_UNCOMPRESSED_SIZE:
        raise SizeOverflowError(size, MAX_UNCOMPRESSED_SIZE)

    # Step 2: Write the header.
    #
    # [magic: 8][size: 4 LE]
    output = bytearray(MAGIC)
    output.extend(size.to_bytes(SIZE_FIELD_LENGTH, "little"))

    # Step 3: Empty input has no payload.
    #
    # The block compressor is never invoked on empty data.
    if size == 0:
        return bytes(output)

    # Step 4: Compress the whole input as one block.
    payload = codec.compress_block(data)

    # The block must fit in the space LZ4 guarantees for this input.
    #
    # A larger block means the backend is broken, not that the input is bad.
    bound = codec.compress_bound(size)
    if len(payload) > bound:
        raise CompressionFailedError(
            f"Compressed block of {len(payload)} bytes exceeds bound of {bound} bytes"
        )

    output.extend(payload)
    return bytes(output)


def decode(container: bytes, codec: BlockCodec | None = None) -> bytes:
    """
    Decode a mozlz4 container back to the original bytes.

    Args:
        container: Container bytes, as read from a ``.mozlz4`` / ``.jsonlz4`` file.
        codec: Block codec to decompress with. Defaults to LZ4.

    Returns:
        The original data, exactly as long as the declared size.

    Raises:
        InvalidFormatError: If the magic is missing or the size field is truncated.
        DecompressionFailedError: If the block codec rejects the payload.
        SizeMismatchError: If the payload decodes to a different length.
    """
    if codec is None:
        codec = DEFAULT_BLOCK_CODEC

    # Step 1: Check the magic.
    #
    # Inputs shorter than the magic fail here too.
    if not is_mozlz4(container):
        raise InvalidFormatError()

    # Step 2: Read the uncompressed size.
    if len(container) < HEADER_LENGTH:
        raise InvalidFormatError()
    size = int.from_bytes(container[len(MAGIC) : HEADER_LENGTH], "little")

    # Step 3: Zero size means empty data; anything after the header is ignored.
    if size == 0:
        return b""

    # Step 4: Decompress into a buffer of exactly the declared size.
    decompressed = codec.decompress_block(container[HEADER_LENGTH:], size)

    # The block may decode cleanly yet be shorter than declared.
    if len(decompressed) != size:
        raise SizeMismatchError(expected=size, actual=len(decompressed))

    return decompressed
