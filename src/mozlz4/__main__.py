"""
mozlz4 CLI entry point.

Usage::

    python -m mozlz4 [OPTIONS] [FILE...]
"""

from mozlz4.cli import main

if __name__ == "__main__":
    main(prog_name="mozlz4")
