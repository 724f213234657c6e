"""Tests for the modtool command line."""

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from modtool.formats.json_codec import ModuleJSONReader
from modtool.models.pattern import Pattern

runner = CliRunner()


@pytest.fixture
def song(sample_module, write_json):
    """Sample module with an A01 effect, written as song.json."""
    sample_module.patterns[0].cell(6, 0).effect = 0xA01
    sample_module.sample_info[2].finetune = 0
    return write_json(sample_module)


class TestShowCommand:
    """Test cases for modtool show."""

    def test_default_summary(self, song):
        """Test show without flags prints the summary."""
        result = runner.invoke(app, ["show", str(song)])

        assert result.exit_code == 0
        assert "Songname:" in result.output
        assert "samples" in result.output

    def test_pattern_info(self, song):
        """Test the pattern report includes notes and the usecode."""
        result = runner.invoke(app, ["show", "--pattern-info", str(song)])

        assert result.exit_code == 0
        assert "C-2" in result.output
        assert "Axy Volume slide" in result.output
        assert "The Player usecode: $400" in result.output
        assert "Songname:" not in result.output

    def test_spn(self, song):
        """Test scientific pitch notation."""
        result = runner.invoke(app, ["show", "--pattern-info", "--use-spn", str(song)])

        assert result.exit_code == 0
        assert "C-4" in result.output

    def test_sample_stats(self, song):
        """Test the sample statistics report."""
        result = runner.invoke(app, ["show", "--sample-stats", str(song)])

        assert result.exit_code == 0
        assert "Unused samples: 2 4" in result.output

    def test_bad_value_fails_file(self, song, empty_module, write_json, tmp_path):
        """Test a mistyped cell value fails only that file."""
        bad = write_json(empty_module, "bad.json")
        data = json.loads(bad.read_text())
        data["patterns"][0]["rows"][0]["channels"][0]["effect"] = 2.5
        bad.write_text(json.dumps(data))

        result = runner.invoke(app, ["show", "--pattern-info", str(bad), str(song)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
        assert "Failed to parse file" in result.output
        assert "The Player usecode: $400" in result.output

    def test_missing_file(self, tmp_path):
        """Test a missing file fails the command."""
        result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Failed to open file" in result.output


class TestUsecodeCommand:
    """Test cases for modtool usecode."""

    def test_single_file(self, song):
        """Test the padded usecode of one file."""
        result = runner.invoke(app, ["usecode", str(song)])

        assert result.exit_code == 0
        assert result.output.strip() == "$00000400"

    def test_batch_continues_after_failure(self, song, tmp_path):
        """Test a failing file does not stop the batch."""
        missing = tmp_path / "missing.json"

        result = runner.invoke(app, ["usecode", str(song), str(missing), str(song)])

        assert result.exit_code == 1
        assert result.output.count("$00000400") == 2
        assert "1 of 3 file(s) failed" in result.output

    def test_stop_on_error_config(self, song, tmp_path):
        """Test continue_on_error false stops at the first failure."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"continue_on_error": False}))
        missing = tmp_path / "missing.json"

        result = runner.invoke(
            app, ["--config", str(config), "usecode", str(missing), str(song)]
        )

        assert result.exit_code == 1
        assert "$00000400" not in result.output
        assert "1 of 1 file(s) failed" in result.output

    def test_bad_config(self, song, tmp_path):
        """Test an invalid config file fails before running."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"unknown": 1}))

        result = runner.invoke(app, ["--config", str(config), "usecode", str(song)])

        assert result.exit_code == 1

    def test_mistyped_config(self, song, tmp_path):
        """Test a config value of the wrong type is reported, not raised."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"json_items_per_line": "3"}))

        result = runner.invoke(app, ["--config", str(config), "usecode", str(song)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)


class TestConvertCommand:
    """Test cases for modtool convert."""

    def test_prune(self, four_pattern_module, sample_module, write_json, tmp_path):
        """Test removing unused patterns and samples."""
        module = four_pattern_module
        module.sample_info = sample_module.sample_info
        module.patterns[0].cell(1, 0).sample_number = 3
        path = write_json(module, "four.json")

        result = runner.invoke(
            app, ["convert", "--unused-patterns", "--unused-samples", "clean", str(path)]
        )

        assert result.exit_code == 0
        converted = ModuleJSONReader.read(tmp_path / "clean_four.json")
        assert len(converted.patterns) == 2
        assert converted.active_positions == [0, 1]
        assert converted.sample_info[0].name == "snare"
        assert converted.patterns[0].cell(1, 0).sample_number == 1

    def test_unchanged_without_flags(self, song, tmp_path):
        """Test converting without pruning copies the module."""
        result = runner.invoke(app, ["convert", "copy", str(song)])

        assert result.exit_code == 0
        assert ModuleJSONReader.read(tmp_path / "copy_song.json") == ModuleJSONReader.read(song)

    def test_unknown_format(self, song):
        """Test an unknown --to value is rejected."""
        result = runner.invoke(app, ["convert", "--to", "xm", "out", str(song)])

        assert result.exit_code != 0

    def test_no_binary_codec(self, song, tmp_path):
        """Test writing a format without a codec fails that file."""
        result = runner.invoke(app, ["convert", "--to", "mod", "out", str(song)])

        assert result.exit_code == 1
        assert not (tmp_path / "out_song.mod").exists()


class TestMergeCommand:
    """Test cases for modtool merge."""

    def test_merge(self, song, four_pattern_module, write_json, tmp_path):
        """Test merging appends patterns and play order."""
        other = write_json(four_pattern_module, "other.json")
        target = tmp_path / "merged.json"

        result = runner.invoke(app, ["merge", str(target), str(song), str(other)])

        assert result.exit_code == 0
        merged = ModuleJSONReader.read(target)
        assert merged.length == 3
        assert len(merged.patterns) == 5
        assert merged.active_positions == [0, 1, 3]

    def test_sync(self, song, tmp_path):
        """Test sync mode strips notes from merged patterns."""
        target = tmp_path / "synced.json"

        result = runner.invoke(app, ["merge", "--sync", str(target), str(song), str(song)])

        assert result.exit_code == 0
        merged = ModuleJSONReader.read(target)
        assert merged.patterns[0].cell(0, 0).period == 428
        assert merged.patterns[1].is_empty

    def test_position_table_full(self, empty_module, write_json, tmp_path):
        """Test overflowing the position table fails."""
        empty_module.length = 100
        path = write_json(empty_module, "long.json")
        target = tmp_path / "merged.json"

        result = runner.invoke(app, ["merge", str(target), str(path), str(path)])

        assert result.exit_code == 1
        assert "Position table full" in result.output
        assert not target.exists()


class TestInsertCommand:
    """Test cases for modtool insert."""

    def test_insert(self, empty_module, write_json, tmp_path):
        """Test markers are written and failures reported."""
        full = Pattern.create_empty()
        for _, _, channel in full.iter_channels():
            channel.effect = 0xC40
        empty_module.patterns.append(full)
        path = write_json(empty_module, "song.json")
        target = tmp_path / "marked.json"

        result = runner.invoke(app, ["insert", str(target), str(path)])

        assert result.exit_code == 0
        assert "Failed to add E8x to pattern(s): 1" in result.output
        marked = ModuleJSONReader.read(target)
        assert marked.patterns[0].cell(0, 0).effect == 0xE81
        assert marked.patterns[1] == full


class TestSaveCommand:
    """Test cases for modtool save."""

    def test_save_all(self, song, tmp_path):
        """Test every used sample is written as raw bytes."""
        out = tmp_path / "raw"

        result = runner.invoke(app, ["save", "--all", "-d", str(out), "smp", str(song)])

        assert result.exit_code == 0
        assert sorted(p.name for p in out.iterdir()) == [
            "smp_1.raw",
            "smp_2.raw",
            "smp_3.raw",
            "smp_4.raw",
            "smp_5.raw",
        ]
        assert (out / "smp_3.raw").read_bytes() == bytes([3] * 6)

    def test_save_number_with_name(self, song, tmp_path):
        """Test saving one sample under its own name."""
        result = runner.invoke(
            app,
            ["save", "--number", "5", "--use-sample-name", "-d", str(tmp_path), "smp", str(song)],
        )

        assert result.exit_code == 0
        assert (tmp_path / "hat.raw").read_bytes() == bytes([5] * 10)

    def test_never_overwrites(self, song, tmp_path):
        """Test existing files are left alone."""
        existing = tmp_path / "smp_1.raw"
        existing.write_bytes(b"keep")

        result = runner.invoke(app, ["save", "-n", "1", "-d", str(tmp_path), "smp", str(song)])

        assert result.exit_code == 0
        assert existing.read_bytes() == b"keep"

    def test_skips_empty_sample(self, empty_module, write_json, tmp_path):
        """Test an empty slot writes no file."""
        path = write_json(empty_module, "empty.json")
        out = tmp_path / "raw"

        result = runner.invoke(app, ["save", "--all", "-d", str(out), "smp", str(path)])

        assert result.exit_code == 0
        assert list(out.iterdir()) == []

    def test_invalid_number(self, song, tmp_path):
        """Test sample numbers outside 1-31 are rejected."""
        result = runner.invoke(app, ["save", "-n", "32", "-d", str(tmp_path), "smp", str(song)])

        assert result.exit_code == 1
        assert "Invalid sample number '32'" in result.output

    def test_number_beyond_module(self, song, tmp_path):
        """Test a number above the module's slot count fails the file."""
        result = runner.invoke(app, ["save", "-n", "6", "-d", str(tmp_path), "smp", str(song)])

        assert result.exit_code == 1
        assert "Only 5 samples available" in result.output

    def test_requires_selection(self, song, tmp_path):
        """Test one of --number or --all is required."""
        result = runner.invoke(app, ["save", "-d", str(tmp_path), "smp", str(song)])

        assert result.exit_code == 1


class TestVersion:
    """Test cases for version output."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "modtool" in result.output
