"""
Pattern and sample usage scanning.

Finds patterns that are never played and samples that no note cell refers
to. Both pruners in ``modtool.editing.prune`` build on these scans.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Set

from modtool.models.module import MAX_SAMPLES, Module

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityWarning:
    """A note cell refers to a sample number above 31."""

    pattern: int
    row: int
    channel: int
    value: int

    def __str__(self) -> str:
        return (
            f"Invalid sample number in Pattern '{self.pattern}' Row '{self.row}' "
            f"Channel '{self.channel}' Sample number '{self.value}'"
        )


@dataclass
class SampleUsage:
    """Result of scanning every note cell for sample references."""

    used: Set[int] = field(default_factory=set)
    warnings: List[IntegrityWarning] = field(default_factory=list)


def find_unused_patterns(module: Module) -> List[int]:
    """
    Find patterns that do not appear in the active play order.

    Args:
        module: Module to scan

    Returns:
        Ascending list of unused pattern indices
    """
    played = set(module.active_positions)
    return [i for i in range(len(module.patterns)) if i not in played]


def scan_sample_usage(module: Module) -> SampleUsage:
    """
    Collect the sample numbers referenced by note cells.

    Numbers above 31 are not counted as used; each occurrence is reported
    as an IntegrityWarning and logged.

    Args:
        module: Module to scan

    Returns:
        SampleUsage with the used numbers and any warnings
    """
    usage = SampleUsage()
    for pattern_no, row_no, channel_no, channel in module.iter_channels():
        number = channel.sample_number
        if number == 0:
            continue
        if number > MAX_SAMPLES:
            warning = IntegrityWarning(pattern_no, row_no, channel_no, number)
            logger.warning("%s", warning)
            usage.warnings.append(warning)
        else:
            usage.used.add(number)
    return usage


def find_unused_samples(module: Module) -> List[int]:
    """
    Find sample slots that no note cell refers to.

    Args:
        module: Module to scan

    Returns:
        Ascending list of unused 1-based sample numbers
    """
    used = scan_sample_usage(module).used
    return [n for n in range(1, len(module.sample_info) + 1) if n not in used]


def find_empty_patterns(module: Module) -> List[int]:
    """
    Find patterns where every cell is empty.

    Returns:
        Ascending list of pattern indices
    """
    return [i for i, pattern in enumerate(module.patterns) if pattern.is_empty]
