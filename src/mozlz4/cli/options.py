"""Validated command-line options."""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mozlz4.config import MOZLZ4_SUFFIX, STDIO_NAME


class StrictBaseModel(BaseModel):
    """A strict, immutable pydantic base model."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )


class Mode(StrEnum):
    """Which direction to run the codec in."""

    AUTO = "auto"
    """Decompress inputs that carry the mozlz4 magic, compress everything else."""

    COMPRESS = "compress"
    DECOMPRESS = "decompress"


class CommandOptions(StrictBaseModel):
    """
    Options for one invocation of the tool.

    Built from the raw click flags. Contradictory flags fail validation
    instead of silently picking one.
    """

    compress: bool = False
    """Force compression (-z)."""

    decompress: bool = False
    """Force decompression (-d)."""

    to_stdout: bool = False
    """Write to standard output and keep the inputs (-c)."""

    output: str | None = None
    """Explicit destination file (-o)."""

    suffix: str = Field(default=MOZLZ4_SUFFIX, min_length=1)
    """Suffix appended to compressed file names (-S)."""

    delete: bool = False
    """Delete inputs after successful processing (--rm)."""

    force: bool = False
    """Allow overwriting files and reading from or writing to terminals (-f)."""

    @model_validator(mode="after")
    def _check_exclusive_flags(self) -> Self:
        if self.compress and self.decompress:
            raise ValueError("-z/--compress and -d/--decompress are mutually exclusive")
        if self.to_stdout and self.output is not None:
            raise ValueError("-c/--stdout and -o/--output are mutually exclusive")
        return self

    @property
    def mode(self) -> Mode:
        """Direction selected by the flags."""
        if self.compress:
            return Mode.COMPRESS
        if self.decompress:
            return Mode.DECOMPRESS
        return Mode.AUTO

    @property
    def destination(self) -> str | None:
        """Explicit destination, or None to derive one from each input name."""
        if self.to_stdout:
            return STDIO_NAME
        return self.output
