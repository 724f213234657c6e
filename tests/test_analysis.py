"""Tests for usage scanning and the module analyzer."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from modtool.analysis.module_analyzer import ModuleAnalyzer
from modtool.analysis.usage import (
    IntegrityWarning,
    find_empty_patterns,
    find_unused_patterns,
    scan_sample_usage,
)


class TestUsageScan:
    """Test cases for pattern and sample usage scanning."""

    def test_unused_patterns(self, four_pattern_module):
        """Test only patterns in the active play order count as used."""
        assert find_unused_patterns(four_pattern_module) == [1, 3]

    def test_empty_patterns(self, four_pattern_module):
        """Test that a pattern with any content is not empty."""
        four_pattern_module.patterns[2].cell(0, 0).period = 0

        assert find_empty_patterns(four_pattern_module) == [2]

    def test_used_samples(self, sample_module):
        """Test the set of referenced sample numbers."""
        usage = scan_sample_usage(sample_module)

        assert usage.used == {1, 3, 5}
        assert usage.warnings == []

    def test_integrity_warning(self, sample_module, caplog):
        """Test a reference above 31 is reported and logged."""
        sample_module.patterns[0].cell(9, 2).sample_number = 32

        with caplog.at_level(logging.WARNING, logger="modtool.analysis.usage"):
            usage = scan_sample_usage(sample_module)

        assert usage.warnings == [IntegrityWarning(pattern=0, row=9, channel=2, value=32)]
        assert 32 not in usage.used
        assert "Sample number '32'" in caplog.text

    def test_warning_message(self):
        """Test the warning text names its location."""
        warning = IntegrityWarning(pattern=3, row=12, channel=1, value=45)

        assert str(warning) == (
            "Invalid sample number in Pattern '3' Row '12' Channel '1' Sample number '45'"
        )


class TestModuleAnalyzer:
    """Test cases for ModuleAnalyzer."""

    def test_summary(self, sample_module):
        """Test summary fields."""
        analysis = ModuleAnalyzer().analyze(sample_module)

        assert analysis.name == "samples"
        assert analysis.length == 1
        assert analysis.num_patterns == 1
        assert analysis.num_channels == 4
        assert analysis.num_samples == 5
        assert analysis.num_used_samples == 5

    def test_sample_details_in_bytes(self, sample_module):
        """Test sample lengths are shown in bytes."""
        analysis = ModuleAnalyzer().analyze(sample_module)

        hat = analysis.samples[4]
        assert hat.number == 5
        assert hat.length == 10
        assert hat.repeat_start == 2
        assert hat.repeat_length == 4

    def test_unused_samples(self, sample_module):
        """Test unused sample numbers."""
        assert ModuleAnalyzer().analyze(sample_module).unused_samples == [2, 4]

    def test_used_periods(self, sample_module):
        """Test periods are counted, sorted and named."""
        sample_module.patterns[0].cell(8, 0).period = 214
        sample_module.patterns[0].cell(9, 0).period = 430

        periods = ModuleAnalyzer().analyze(sample_module).used_periods

        assert [p.period for p in periods] == [214, 320, 428, 430]
        assert [p.count for p in periods] == [2, 1, 1, 1]
        assert periods[0].label == "C-3"
        assert periods[3].label == "~C-2"

    def test_used_periods_spn(self, sample_module):
        """Test scientific pitch notation labels."""
        periods = ModuleAnalyzer(use_spn=True).analyze(sample_module).used_periods

        assert periods[-1].label == "C-4"

    def test_effects_and_usecode(self, four_pattern_module):
        """Test used effects and usecode."""
        four_pattern_module.patterns[1].cell(0, 0).effect = 0xA01
        four_pattern_module.patterns[2].cell(4, 0).effect = 0x037

        analysis = ModuleAnalyzer().analyze(four_pattern_module)

        assert [e.index for e in analysis.used_effects] == [0, 10]
        assert analysis.used_effects[1].name == "Axy Volume slide"
        assert analysis.usecode == 0x500

    def test_play_order(self, four_pattern_module):
        """Test play order and unused patterns."""
        analysis = ModuleAnalyzer().analyze(four_pattern_module)

        assert analysis.play_order == [0, 2]
        assert analysis.unused_patterns == [1, 3]
        assert analysis.empty_patterns == []
