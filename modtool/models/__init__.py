"""Data models for tracker module representation."""

from modtool.models.module import Module, MAX_POSITIONS, MAX_SAMPLES
from modtool.models.pattern import Pattern, Row, Channel
from modtool.models.sample import SampleInfo

__all__ = [
    "Module",
    "Pattern",
    "Row",
    "Channel",
    "SampleInfo",
    "MAX_POSITIONS",
    "MAX_SAMPLES",
]
