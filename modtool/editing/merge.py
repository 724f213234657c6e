"""
Merge patterns from several modules into one.

The patterns of every source module are appended to the target, and the
source's play order is appended to the target's play order with pattern
indices shifted to the new location.

In sync mode the appended patterns are stripped of notes, samples and all
effects except the transport-control ones (E8x, Bxx, Dxx, Fxx). This turns
a copy of a song into a timing track for demo sync.
"""

import copy
import logging
from typing import Iterable

from modtool.models.module import MAX_POSITIONS, Module
from modtool.models.pattern import Pattern
from modtool.utils.effects import effect_family, is_e8_command
from modtool.utils.validation import PatternLimitError, PositionTableFullError

logger = logging.getLogger(__name__)

# Families kept in sync mode
SYNC_FAMILIES = (0xB, 0xD, 0xF)

# Largest pattern index a position byte can hold
MAX_PATTERN_INDEX = 0xFF


def is_sync_effect(effect: int) -> bool:
    """Check if an effect survives sync mode."""
    return is_e8_command(effect) or effect_family(effect) in SYNC_FAMILIES


def sync_pattern(pattern: Pattern) -> None:
    """
    Strip a pattern down to its transport-control effects.

    Clears period and sample number of every cell, and the effect unless
    it is E8x, Bxx, Dxx or Fxx.

    Args:
        pattern: Pattern to edit in place
    """
    for _, _, channel in pattern.iter_channels():
        effect = channel.effect
        channel.clear()
        if is_sync_effect(effect):
            channel.effect = effect


def merge_modules(target: Module, sources: Iterable[Module], sync: bool = False) -> Module:
    """
    Append the patterns and play order of each source to the target.

    Source modules are not modified. If an error is raised the target is
    left partly merged and must not be reused.

    Args:
        target: Module receiving the patterns
        sources: Modules to append, in order
        sync: Strip appended patterns to transport-control effects

    Returns:
        The target module

    Raises:
        PositionTableFullError: If the play order would exceed 128 entries
        PatternLimitError: If a pattern index would exceed 255
    """
    for source in sources:
        offset = len(target.patterns)

        for pattern in source.patterns:
            pattern = copy.deepcopy(pattern)
            if sync:
                sync_pattern(pattern)
            target.patterns.append(pattern)

        for entry in source.active_positions:
            if target.length >= MAX_POSITIONS:
                raise PositionTableFullError(target.length)

            index = entry + offset
            if index > MAX_PATTERN_INDEX:
                raise PatternLimitError(index)

            target.positions[target.length] = index
            target.length += 1

        logger.debug(
            "Merged %d patterns from '%s' at offset %d (sync=%s)",
            len(source.patterns),
            source.name,
            offset,
            sync,
        )

    return target
