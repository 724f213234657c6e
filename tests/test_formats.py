"""Tests for format detection and the codec registry."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from modtool.formats import (
    ModuleFormat,
    detect_format,
    get_codec,
    read_module,
    register_codec,
    unregister_codec,
    write_module,
)
from modtool.formats.json_codec import ModuleJSONReader, ModuleJSONWriter
from modtool.utils.validation import CodecError, UnsupportedFormatError


class TestDetectFormat:
    """Test cases for format detection."""

    def test_suffixes(self):
        """Test detection by file suffix."""
        assert detect_format("song.mod") is ModuleFormat.PROTRACKER
        assert detect_format("song.MOD") is ModuleFormat.PROTRACKER
        assert detect_format("song.p61") is ModuleFormat.PACKED_RUNTIME
        assert detect_format("song.json") is ModuleFormat.JSON

    def test_amiga_prefix(self):
        """Test the Amiga style P61.name convention."""
        assert detect_format("P61.intro") is ModuleFormat.PACKED_RUNTIME
        assert detect_format("dir/p61.intro") is ModuleFormat.PACKED_RUNTIME

    def test_unknown_defaults_to_protracker(self):
        """Test unknown names are taken as ProTracker modules."""
        assert detect_format("mod.intro") is ModuleFormat.PROTRACKER
        assert detect_format("song") is ModuleFormat.PROTRACKER

    def test_forced_p61(self):
        """Test the in_p61 flag overrides the name."""
        assert detect_format("song.mod", in_p61=True) is ModuleFormat.PACKED_RUNTIME

    def test_format_properties(self):
        """Test suffix and description."""
        assert ModuleFormat.JSON.suffix == ".json"
        assert ModuleFormat.PACKED_RUNTIME.description == "The Player 6.1A module"


class TestCodecRegistry:
    """Test cases for reading and writing through the registry."""

    def test_json_registered(self):
        """Test the JSON codec is available by default."""
        codec = get_codec(ModuleFormat.JSON)

        assert codec.parse == ModuleJSONReader.parse_bytes

    def test_binary_not_registered(self, tmp_path):
        """Test reading a .mod without a codec fails cleanly."""
        path = tmp_path / "song.mod"
        path.write_bytes(b"\x00" * 1084)

        with pytest.raises(UnsupportedFormatError) as exc_info:
            read_module(path)

        assert isinstance(exc_info.value, CodecError)

    def test_register_codec(self, tmp_path, sample_module):
        """Test a plugged in codec is used for its format."""
        register_codec(
            ModuleFormat.PROTRACKER,
            ModuleJSONReader.parse_bytes,
            lambda module: ModuleJSONWriter().to_bytes(module),
        )
        try:
            path = tmp_path / "song.mod"
            write_module(sample_module, path)
            assert read_module(path) == sample_module
        finally:
            unregister_codec(ModuleFormat.PROTRACKER)

        with pytest.raises(UnsupportedFormatError):
            get_codec(ModuleFormat.PROTRACKER)

    def test_write_options(self, tmp_path, empty_module):
        """Test codec options reach the JSON writer."""
        path = tmp_path / "out" / "song.json"

        write_module(empty_module, path, items_per_line=4, indent="\t")

        text = path.read_text()
        assert "\t\t\t0, 0, 0, 0,\n" in text

    def test_missing_file(self, tmp_path):
        """Test open errors carry the path."""
        path = tmp_path / "missing.json"

        with pytest.raises(CodecError) as exc_info:
            read_module(path)

        assert exc_info.value.path == str(path)
        assert "Failed to open file" in str(exc_info.value)

    def test_parse_error(self, tmp_path):
        """Test parse errors carry the path."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(CodecError, match="Failed to parse file"):
            read_module(path)

    def test_invalid_value(self, tmp_path):
        """Test validation errors are reported as parse errors."""
        path = tmp_path / "bad.json"
        path.write_text('{"name": "x", "positions": {"data": [0]}}')

        with pytest.raises(CodecError, match="Failed to parse file"):
            read_module(path)
