"""
Remove unused patterns and samples from a module.

Both operations renumber every reference to the removed items so the
module plays exactly as before.
"""

import logging
from bisect import bisect_left
from typing import List

from modtool.analysis.usage import find_unused_patterns, find_unused_samples
from modtool.models.module import Module

logger = logging.getLogger(__name__)


def remove_unused_patterns(module: Module) -> List[int]:
    """
    Remove patterns that are not in the active play order.

    Patterns are removed highest index first; after each removal every
    active position above the removed index moves down by one.

    Args:
        module: Module to edit in place

    Returns:
        Removed pattern indices, highest first
    """
    removed = sorted(find_unused_patterns(module), reverse=True)

    for index in removed:
        del module.patterns[index]

        for i in range(module.length):
            if module.positions[i] > index:
                module.positions[i] -= 1

    if removed:
        logger.debug("Removed %d unused patterns: %s", len(removed), removed)
    return removed


def remove_unused_samples(module: Module) -> List[int]:
    """
    Remove samples that no note cell refers to.

    Used samples move to the front in their original order. Unused slots
    are cleared and kept at the end, highest number first, so the slot
    count does not change. Every sample reference is lowered by the number
    of removed slots below it.

    Args:
        module: Module to edit in place

    Returns:
        Removed sample numbers, highest first
    """
    unused = find_unused_samples(module)
    if not unused:
        return []

    unused_set = set(unused)
    removed = sorted(unused, reverse=True)

    kept = [si for number, si in enumerate(module.sample_info, start=1) if number not in unused_set]
    tombstones = []
    for number in removed:
        si = module.sample_info[number - 1]
        si.clear()
        tombstones.append(si)

    module.sample_info = kept + tombstones

    for _, _, _, channel in module.iter_channels():
        number = channel.sample_number
        if number:
            channel.sample_number = number - bisect_left(unused, number)

    logger.debug("Removed %d unused samples: %s", len(removed), removed)
    return removed
