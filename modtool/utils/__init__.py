"""Utility functions for modtool."""

from modtool.utils.periods import PERIODS, NOTE_NAMES, NoteMatch, resolve_note
from modtool.utils.stats import Stats, SampleStats, summarize_samples
from modtool.utils.effects import EFFECT_NAMES, effect_index, get_effect_name

__all__ = [
    "PERIODS",
    "NOTE_NAMES",
    "NoteMatch",
    "resolve_note",
    "Stats",
    "SampleStats",
    "summarize_samples",
    "EFFECT_NAMES",
    "effect_index",
    "get_effect_name",
]
