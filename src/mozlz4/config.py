"""
Global configuration for the mozlz4 command-line tool.

This module contains environment-specific settings read once at import time.
"""

import os

MOZLZ4_SUFFIX = os.environ.get("MOZLZ4_SUFFIX", ".mozlz4")
"""Suffix appended to compressed file names. Defaults to '.mozlz4'."""

if not MOZLZ4_SUFFIX:
    raise ValueError(
        "Invalid MOZLZ4_SUFFIX environment variable: must not be empty. "
        "Unset it to use the default '.mozlz4'."
    )

STDIO_NAME: str = "-"
"""File name that stands for standard input or standard output."""

STDIN_DISPLAY_NAME: str = "<stdin>"
"""Name used for standard input in error messages."""
