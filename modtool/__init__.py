"""
modtool - edit and analyze tracker modules.

This library provides tools to:
- Remove unused patterns and samples with full renumbering
- Merge patterns from several modules into one song
- Insert E81 sync markers into patterns
- Compute The Player 6.1A usecode
- Report used periods, notes, effects and sample statistics
- Read and write the JSON interchange format

Example usage:
    from modtool import read_module, write_module
    from modtool.editing import remove_unused_patterns, remove_unused_samples

    module = read_module("song.json")
    remove_unused_patterns(module)
    remove_unused_samples(module)
    write_module(module, "song_pruned.json")
"""

__version__ = "0.5.0"
__author__ = "modtool Contributors"

from modtool.models.module import Module
from modtool.models.pattern import Pattern, Row, Channel
from modtool.models.sample import SampleInfo
from modtool.formats import ModuleFormat, read_module, write_module, register_codec

__all__ = [
    "Module",
    "Pattern",
    "Row",
    "Channel",
    "SampleInfo",
    "ModuleFormat",
    "read_module",
    "write_module",
    "register_codec",
]
