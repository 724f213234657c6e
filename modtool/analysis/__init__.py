"""
Module analysis.

Read-only scans over a decoded Module: usage, usecode and reports.
"""

from modtool.analysis.usage import (
    IntegrityWarning,
    SampleUsage,
    find_empty_patterns,
    find_unused_patterns,
    find_unused_samples,
    scan_sample_usage,
)
from modtool.analysis.usecode import compute_usecode, find_used_effects, format_usecode
from modtool.analysis.module_analyzer import ModuleAnalyzer, ModuleAnalysis

__all__ = [
    "IntegrityWarning",
    "SampleUsage",
    "find_empty_patterns",
    "find_unused_patterns",
    "find_unused_samples",
    "scan_sample_usage",
    "compute_usecode",
    "find_used_effects",
    "format_usecode",
    "ModuleAnalyzer",
    "ModuleAnalysis",
]
