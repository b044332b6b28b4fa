"""Command-line interface for compressing and decompressing mozlz4 files."""

from .command import main

__all__ = ["main"]
