"""
mozlz4 command-line entry point.

Usage::

    mozlz4 search.json.mozlz4          # -> search.json
    mozlz4 search.json                 # -> search.json.mozlz4
    mozlz4 -c sessionstore.jsonlz4 | jq .
    cat prefs.json | mozlz4 -z > prefs.json.mozlz4
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import click
from pydantic import ValidationError

from mozlz4.config import MOZLZ4_SUFFIX, STDIO_NAME

from .files import process_file
from .log import setup_logging
from .options import CommandOptions

logger = logging.getLogger(__name__)


def _usage_message(error: ValidationError) -> str:
    """Flatten pydantic errors into one line for click."""
    return "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in error.errors())


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1)
@click.option("-z", "--compress", is_flag=True, help="Force compression")
@click.option("-d", "--decompress", is_flag=True, help="Force decompression")
@click.option(
    "-c",
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Write to the standard output and keep the input files",
)
@click.option("-o", "--output", metavar="FILE", default=None, help="Write to the FILE")
@click.option(
    "-S",
    "--suffix",
    default=MOZLZ4_SUFFIX,
    show_default=True,
    help="Add SUFFIX on compressed file names",
)
@click.option(
    "--rm/--keep",
    " /-k",
    "delete",
    default=False,
    help="Delete the input files after successful (de)compression (default: keep)",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Allow overwriting existing files, reading input from a terminal, "
    "writing compressed data to a terminal",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--no-color", is_flag=True, help="Disable colored logging output")
@click.version_option(package_name="mozlz4", prog_name="mozlz4")
def main(
    files: Sequence[str],
    compress: bool,
    decompress: bool,
    to_stdout: bool,
    output: str | None,
    suffix: str,
    delete: bool,
    force: bool,
    verbose: bool,
    no_color: bool,
) -> None:
    """
    Compress or decompress mozlz4 files.

    With no FILE, or when FILE is -, read standard input.
    """
    setup_logging(verbose, no_color)

    try:
        options = CommandOptions(
            compress=compress,
            decompress=decompress,
            to_stdout=to_stdout,
            output=output,
            suffix=suffix,
            delete=delete,
            force=force,
        )
    except ValidationError as e:
        raise click.UsageError(_usage_message(e)) from e

    if len(files) > 1 and options.destination not in (None, STDIO_NAME):
        raise click.UsageError("-o/--output cannot be used if multiple input files is given")

    stdin = sys.stdin.buffer
    stdout = sys.stdout.buffer

    for name in files or (STDIO_NAME,):
        logger.debug("processing %s in %s mode", name, options.mode)
        process_file(name, options, stdin, stdout)
