"""Tests for per-file processing helpers."""

from __future__ import annotations

import io
from pathlib import Path

import click
import pytest

from mozlz4.cli.files import destination_for, process_file, should_compress
from mozlz4.cli.options import CommandOptions, Mode
from mozlz4.codec import encode


class TtyBytesIO(io.BytesIO):
    """In-memory binary stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


class TestDestinationFor:
    """Tests for output name selection."""

    def test_compress_appends_suffix(self) -> None:
        assert destination_for("a.json", True, CommandOptions()) == "a.json.mozlz4"

    def test_decompress_strips_last_extension(self) -> None:
        assert destination_for("dir/a.json.mozlz4", False, CommandOptions()) == "dir/a.json"

    def test_stdin_goes_to_stdout(self) -> None:
        assert destination_for("-", True, CommandOptions()) == "-"
        assert destination_for("-", False, CommandOptions()) == "-"

    def test_explicit_output_wins(self) -> None:
        options = CommandOptions(output="out.bin")
        assert destination_for("-", True, options) == "out.bin"
        assert destination_for("a.json", False, options) == "out.bin"

    def test_stdout_flag(self) -> None:
        assert destination_for("a.json", True, CommandOptions(to_stdout=True)) == "-"

    @pytest.mark.parametrize("name", ["compressed", ".mozlz4", "..mozlz4", "dir.d/compressed"])
    def test_no_extension(self, name: str) -> None:
        with pytest.raises(click.ClickException, match="has no extension"):
            destination_for(name, False, CommandOptions())


class TestShouldCompress:
    """Tests for direction selection."""

    def test_auto_detects_magic(self) -> None:
        assert should_compress(b"{}", Mode.AUTO)
        assert not should_compress(encode(b"{}"), Mode.AUTO)

    def test_forced(self) -> None:
        assert should_compress(encode(b"{}"), Mode.COMPRESS)
        assert not should_compress(b"{}", Mode.DECOMPRESS)


class TestTerminalGuards:
    """Interactive terminals are refused unless forced."""

    def test_stdin_terminal_refused(self) -> None:
        with pytest.raises(click.ClickException, match="stdin is a terminal"):
            process_file("-", CommandOptions(), TtyBytesIO(b"{}"), io.BytesIO())

    def test_stdin_terminal_forced(self) -> None:
        stdout = io.BytesIO()
        process_file("-", CommandOptions(force=True), TtyBytesIO(b"{}"), stdout)
        assert stdout.getvalue() == encode(b"{}")

    def test_compressed_to_terminal_refused(self) -> None:
        with pytest.raises(click.ClickException, match="stdout is a terminal"):
            process_file("-", CommandOptions(), io.BytesIO(b"{}"), TtyBytesIO())

    def test_decompressed_to_terminal_allowed(self) -> None:
        stdout = TtyBytesIO()
        process_file("-", CommandOptions(), io.BytesIO(encode(b"{}")), stdout)
        assert stdout.getvalue() == b"{}"

    def test_file_to_terminal_refused(self, tmp_path: Path) -> None:
        source = tmp_path / "a.json"
        source.write_bytes(b"{}")
        options = CommandOptions(to_stdout=True)
        with pytest.raises(click.ClickException, match="stdout is a terminal"):
            process_file(str(source), options, io.BytesIO(), TtyBytesIO())


class TestCommandOptions:
    """Tests for option validation."""

    def test_defaults(self) -> None:
        options = CommandOptions()
        assert options.mode is Mode.AUTO
        assert options.destination is None
        assert options.suffix == ".mozlz4"
        assert not options.delete
        assert not options.force

    def test_mode(self) -> None:
        assert CommandOptions(compress=True).mode is Mode.COMPRESS
        assert CommandOptions(decompress=True).mode is Mode.DECOMPRESS

    def test_exclusive_direction(self) -> None:
        with pytest.raises(ValueError, match="mutually exclusive"):
            CommandOptions(compress=True, decompress=True)

    def test_exclusive_destination(self) -> None:
        with pytest.raises(ValueError, match="mutually exclusive"):
            CommandOptions(to_stdout=True, output="x")

    def test_frozen(self) -> None:
        options = CommandOptions()
        with pytest.raises(ValueError):
            options.force = True  # type: ignore[misc]

    def test_strict(self) -> None:
        with pytest.raises(ValueError):
            CommandOptions(force="yes")  # type: ignore[arg-type]
