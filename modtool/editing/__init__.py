"""
Module editing operations.

Every operation edits a Module in place as one complete pass:

    from modtool.editing import remove_unused_patterns, remove_unused_samples

    remove_unused_patterns(module)
    remove_unused_samples(module)
"""

from modtool.editing.prune import remove_unused_patterns, remove_unused_samples
from modtool.editing.merge import merge_modules, sync_pattern, is_sync_effect
from modtool.editing.marker import MarkerReport, MarkerResult, insert_marker, insert_markers

__all__ = [
    "remove_unused_patterns",
    "remove_unused_samples",
    "merge_modules",
    "sync_pattern",
    "is_sync_effect",
    "MarkerReport",
    "MarkerResult",
    "insert_marker",
    "insert_markers",
]
