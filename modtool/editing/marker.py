"""
Insert an E81 sync marker into every pattern.

A pattern that already has an E8x command is left alone. Otherwise the
first cell (row-major) without an effect gets E81.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from modtool.models.module import Module
from modtool.models.pattern import Pattern
from modtool.utils.effects import SYNC_MARKER, is_e8_command

logger = logging.getLogger(__name__)


class MarkerResult(Enum):
    """Outcome of inserting a marker into one pattern."""

    ALREADY_PRESENT = "already_present"
    INSERTED = "inserted"
    NO_FREE_CELL = "no_free_cell"

    @property
    def ok(self) -> bool:
        return self is not MarkerResult.NO_FREE_CELL


@dataclass
class MarkerReport:
    """Marker outcome for one pattern of a module."""

    pattern: int
    result: MarkerResult
    row: int = -1
    channel: int = -1


def insert_marker(pattern: Pattern, marker: int = SYNC_MARKER) -> MarkerReport:
    """
    Insert a marker into a single pattern.

    Args:
        pattern: Pattern to edit in place
        marker: Effect value to write

    Returns:
        MarkerReport with pattern index -1 and the cell written, if any
    """
    for _, _, channel in pattern.iter_channels():
        if is_e8_command(channel.effect):
            return MarkerReport(pattern=-1, result=MarkerResult.ALREADY_PRESENT)

    for row_no, channel_no, channel in pattern.iter_channels():
        if channel.effect == 0:
            channel.effect = marker
            return MarkerReport(
                pattern=-1, result=MarkerResult.INSERTED, row=row_no, channel=channel_no
            )

    return MarkerReport(pattern=-1, result=MarkerResult.NO_FREE_CELL)


def insert_markers(module: Module, marker: int = SYNC_MARKER) -> List[MarkerReport]:
    """
    Insert a marker into every pattern of a module.

    A pattern without a free cell is reported and skipped; the remaining
    patterns are still processed.

    Args:
        module: Module to edit in place
        marker: Effect value to write

    Returns:
        One MarkerReport per pattern
    """
    reports = []
    for index, pattern in enumerate(module.patterns):
        report = insert_marker(pattern, marker)
        report.pattern = index

        if report.result is MarkerResult.NO_FREE_CELL:
            logger.warning("Failed to add E8x marker to pattern %d: no free effect cell", index)
        elif report.result is MarkerResult.INSERTED:
            logger.debug(
                "Inserted %03X in pattern %d row %d channel %d",
                marker,
                index,
                report.row,
                report.channel,
            )
        reports.append(report)

    return reports
