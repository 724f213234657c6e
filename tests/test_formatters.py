"""Tests for CLI display formatting."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.display.formatters import (
    format_cell,
    format_finetune,
    format_index_list,
    slot_bar,
    volume_bar,
)
from modtool.models.pattern import Channel


class TestBars:
    """Test cases for bar graphics."""

    def test_volume_bar(self):
        """Test volumes scale to the 0-64 range."""
        assert volume_bar(48) == "48 [▓▓▓▓▓▓▓···]"
        assert volume_bar(0) == " 0 [··········]"
        assert volume_bar(64) == "64 [▓▓▓▓▓▓▓▓▓▓]"

    def test_volume_bar_clamped(self):
        """Test out of range volumes keep their number but clamp the bar."""
        assert volume_bar(80, width=4) == "80 [▓▓▓▓]"

    def test_slot_bar(self):
        """Test sample slot usage."""
        assert slot_bar(3, 6, width=6) == "[▓▓▓···] 3/6"
        assert slot_bar(0, 0, width=3) == "[···] 0/0"


class TestFormatters:
    """Test cases for text formatters."""

    def test_index_list(self):
        assert format_index_list([0, 2, 5]) == "0 2 5"
        assert format_index_list([]) == "[dim]none[/dim]"

    def test_finetune(self):
        """Test raw finetune nibbles are shown signed."""
        assert format_finetune(0) == "0"
        assert format_finetune(3) == "+3"
        assert format_finetune(0xE) == "-2 (0xE)"

    def test_cell(self):
        """Test tracker style cell display."""
        assert format_cell(Channel(period=428, sample_number=1, effect=0xE81)) == "C-2 01 E81"
        assert format_cell(Channel()) == "--- 00 000"
        assert format_cell(Channel(period=240, sample_number=10, effect=0xC40)) == "A#2 0A C40"
        assert format_cell(Channel(period=430), use_spn=True) == "~C-4 00 000"
