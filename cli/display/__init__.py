"""
CLI display modules.
"""

from cli.display.tables import (
    display_summary,
    display_sample_info,
    display_sample_stats,
    display_pattern_info,
    display_integrity_warnings,
    display_marker_reports,
)

__all__ = [
    "display_summary",
    "display_sample_info",
    "display_sample_stats",
    "display_pattern_info",
    "display_integrity_warnings",
    "display_marker_reports",
]
