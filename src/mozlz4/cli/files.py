"""
Per-file processing for the command-line tool.

Each input goes through the same steps::

    read -> pick direction -> encode/decode -> pick destination -> write -> (delete)

The codec works on in-memory buffers; everything here is the I/O around it.


DIRECTION
---------
Unless forced with -z or -d, an input is decompressed when it starts with the
mozlz4 magic and compressed otherwise.


DESTINATION
-----------
  - An explicit -o FILE or -c always wins.
  - Standard input goes to standard output.
  - Compressing appends the suffix: ``search.json`` -> ``search.json.mozlz4``.
  - Decompressing strips the last extension: ``search.json.mozlz4`` -> ``search.json``.
    A name without an extension is an error.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

import click

from mozlz4.codec import Mozlz4Error, decode, encode, is_mozlz4
from mozlz4.config import STDIN_DISPLAY_NAME, STDIO_NAME

from .options import CommandOptions, Mode

logger = logging.getLogger(__name__)


def read_input(name: str, stdin: BinaryIO) -> bytes:
    """Read a whole input file, or standard input for '-'."""
    if name == STDIO_NAME:
        return stdin.read()
    with open(name, "rb") as f:
        return f.read()


def write_output(name: str, data: bytes, stdout: BinaryIO, *, force: bool) -> None:
    """
    Write data to a file, or standard output for '-'.

    Existing files are left alone unless ``force`` is set.

    Raises:
        FileExistsError: If the file exists and ``force`` is not set.
    """
    if name == STDIO_NAME:
        stdout.write(data)
        stdout.flush()
        return

    with open(name, "wb" if force else "xb") as f:
        f.write(data)


def destination_for(name: str, compress: bool, options: CommandOptions) -> str:
    """
    Choose where the result for one input goes.

    Raises:
        click.ClickException: If a decompressed name cannot be derived.
    """
    if options.destination is not None:
        return options.destination
    if name == STDIO_NAME:
        return STDIO_NAME
    if compress:
        return name + options.suffix

    root, ext = os.path.splitext(name)
    if not ext:
        raise click.ClickException(f"{name} has no extension. use -o/--output option.")
    return root


def should_compress(data: bytes, mode: Mode) -> bool:
    """Resolve the direction for one input."""
    if mode is Mode.COMPRESS:
        return True
    if mode is Mode.DECOMPRESS:
        return False
    return not is_mozlz4(data)


def process_file(name: str, options: CommandOptions, stdin: BinaryIO, stdout: BinaryIO) -> None:
    """
    Compress or decompress one input.

    Args:
        name: Input path, or '-' for standard input.
        options: Validated command options.
        stdin: Binary standard input stream.
        stdout: Binary standard output stream.

    Raises:
        click.ClickException: On any codec, file or terminal error.
    """
    # Step 1: Refuse to wait on an interactive terminal.
    if not options.force and name == STDIO_NAME and stdin.isatty():
        raise click.ClickException("stdin is a terminal")

    # Step 2: Read and transform.
    display_name = STDIN_DISPLAY_NAME if name == STDIO_NAME else name
    try:
        data = read_input(name, stdin)
    except OSError as e:
        raise click.ClickException(str(e)) from e

    compress = should_compress(data, options.mode)
    try:
        result = encode(data) if compress else decode(data)
    except Mozlz4Error as e:
        raise click.ClickException(f"{display_name}: {e}") from e

    # Step 3: Pick the destination.
    dest = destination_for(name, compress, options)
    if not options.force and compress and dest == STDIO_NAME and stdout.isatty():
        raise click.ClickException("stdout is a terminal")

    # Step 4: Write, then optionally remove the input.
    try:
        write_output(dest, result, stdout, force=options.force)
    except OSError as e:
        raise click.ClickException(str(e)) from e

    logger.info(
        "%s %s -> %s (%d -> %d bytes)",
        "compressed" if compress else "decompressed",
        display_name,
        dest,
        len(data),
        len(result),
    )

    if options.delete and name != dest and STDIO_NAME not in (name, dest):
        try:
            os.remove(name)
        except OSError as e:
            raise click.ClickException(str(e)) from e
        logger.debug("removed %s", name)
