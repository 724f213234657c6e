"""
Module analyzer.

Extracts everything the ``show`` command reports from a Module:
- Song summary (name, length, sample and pattern counts)
- Per-sample header details
- Statistics over the used samples
- Play order, unused and empty patterns
- Used periods with their note names
- Used effects and the resulting usecode
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from modtool.analysis.usage import (
    IntegrityWarning,
    find_empty_patterns,
    find_unused_patterns,
    scan_sample_usage,
)
from modtool.analysis.usecode import compute_usecode, find_used_effects
from modtool.models.module import Module
from modtool.utils.effects import get_effect_name
from modtool.utils.periods import NoteMatch, resolve_note
from modtool.utils.stats import SampleStats, summarize_samples
from modtool.utils.validation import NoteResolutionError


@dataclass
class SampleDetail:
    """Header details of one sample slot (byte units)."""

    number: int  # 1-based
    name: str
    length: int
    finetune: int
    volume: int
    repeat_start: int
    repeat_length: int


@dataclass
class PeriodUsage:
    """A period value used by note cells."""

    period: int
    count: int
    note: Optional[NoteMatch] = None

    @property
    def label(self) -> str:
        return self.note.label if self.note else ""


@dataclass
class EffectUsage:
    """An effect index used by note cells."""

    index: int
    name: str


@dataclass
class ModuleAnalysis:
    """Complete analysis of a module."""

    # Summary
    name: str
    length: int
    num_patterns: int
    num_channels: int
    num_samples: int
    num_used_samples: int

    # Samples
    samples: List[SampleDetail] = field(default_factory=list)
    sample_stats: Optional[SampleStats] = None
    unused_samples: List[int] = field(default_factory=list)

    # Patterns
    play_order: List[int] = field(default_factory=list)
    unused_patterns: List[int] = field(default_factory=list)
    empty_patterns: List[int] = field(default_factory=list)
    used_periods: List[PeriodUsage] = field(default_factory=list)
    used_effects: List[EffectUsage] = field(default_factory=list)
    usecode: int = 0

    # Problems found while scanning
    warnings: List[IntegrityWarning] = field(default_factory=list)


class ModuleAnalyzer:
    """
    Analyze a decoded Module.

    Example:
        analysis = ModuleAnalyzer(use_spn=True).analyze(module)
        print(analysis.usecode)
    """

    def __init__(self, use_spn: bool = False):
        self.use_spn = use_spn

    def analyze(self, module: Module) -> ModuleAnalysis:
        """
        Analyze a module without modifying it.

        Args:
            module: Module to analyze

        Returns:
            ModuleAnalysis
        """
        usage = scan_sample_usage(module)

        analysis = ModuleAnalysis(
            name=module.name,
            length=module.length,
            num_patterns=len(module.patterns),
            num_channels=module.channel_count,
            num_samples=len(module.sample_info),
            num_used_samples=len(module.used_samples),
        )

        analysis.samples = self._analyze_samples(module)
        analysis.sample_stats = summarize_samples(module)
        analysis.unused_samples = [
            n for n in range(1, len(module.sample_info) + 1) if n not in usage.used
        ]
        analysis.warnings = usage.warnings

        analysis.play_order = list(module.active_positions)
        analysis.unused_patterns = find_unused_patterns(module)
        analysis.empty_patterns = find_empty_patterns(module)
        analysis.used_periods = self._analyze_periods(module)
        analysis.used_effects = [
            EffectUsage(index=i, name=get_effect_name(i)) for i in find_used_effects(module)
        ]
        analysis.usecode = compute_usecode(module)

        return analysis

    def _analyze_samples(self, module: Module) -> List[SampleDetail]:
        return [
            SampleDetail(
                number=number,
                name=si.name,
                length=si.byte_length,
                finetune=si.finetune,
                volume=si.volume,
                repeat_start=si.repeat_start * 2,
                repeat_length=si.repeat_length * 2,
            )
            for number, si in enumerate(module.sample_info, start=1)
        ]

    def _analyze_periods(self, module: Module) -> List[PeriodUsage]:
        """Count used periods, ascending, and resolve each to a note."""
        counts = Counter(
            channel.period for _, _, _, channel in module.iter_channels() if channel.period > 0
        )

        result = []
        for period in sorted(counts):
            try:
                note = resolve_note(period, use_spn=self.use_spn)
            except NoteResolutionError:
                note = None
            result.append(PeriodUsage(period=period, count=counts[period], note=note))
        return result
