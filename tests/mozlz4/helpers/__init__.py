"""Test helpers for the mozlz4 test suite."""

from .mocks import CopyBlockCodec, FailingBlockCodec, OversizedBlockCodec

__all__ = [
    "CopyBlockCodec",
    "FailingBlockCodec",
    "OversizedBlockCodec",
]
