"""
Pattern data model - the note grid of a tracker module.

A Pattern is a fixed grid of Rows (time steps) by Channels (voices).
Every Channel cell carries a period, a sample number and a packed effect.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

# Standard ProTracker grid
DEFAULT_ROWS = 64
DEFAULT_CHANNELS = 4


@dataclass
class Channel:
    """
    One note cell.

    Attributes:
        period: Hardware period (inverse pitch), 0 = no note
        sample_number: Logical sample number 1-31, 0 = no sample
        effect: 12-bit packed command, high nibble family + parameter byte
    """

    period: int = 0
    sample_number: int = 0
    effect: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if the cell carries no note, sample or effect."""
        return self.period == 0 and self.sample_number == 0 and self.effect == 0

    def clear(self) -> None:
        """Reset every field."""
        self.period = 0
        self.sample_number = 0
        self.effect = 0


@dataclass
class Row:
    """A single time step across all channels."""

    channels: List[Channel] = field(default_factory=list)

    @classmethod
    def create_empty(cls, num_channels: int = DEFAULT_CHANNELS) -> "Row":
        return cls(channels=[Channel() for _ in range(num_channels)])


@dataclass
class Pattern:
    """
    A grid of rows playable as a unit.

    Attributes:
        rows: Rows in playback order
    """

    rows: List[Row] = field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_channels(self) -> int:
        return len(self.rows[0].channels) if self.rows else 0

    @property
    def is_empty(self) -> bool:
        """Check if every cell in the pattern is empty."""
        return all(channel.is_empty for row in self.rows for channel in row.channels)

    def iter_channels(self) -> Iterator[Tuple[int, int, Channel]]:
        """
        Iterate over all cells in row-major order.

        Yields:
            (row_no, channel_no, channel) tuples
        """
        for row_no, row in enumerate(self.rows):
            for channel_no, channel in enumerate(row.channels):
                yield row_no, channel_no, channel

    def cell(self, row_no: int, channel_no: int) -> Channel:
        """Get the cell at a row/channel position."""
        return self.rows[row_no].channels[channel_no]

    @classmethod
    def create_empty(
        cls, num_rows: int = DEFAULT_ROWS, num_channels: int = DEFAULT_CHANNELS
    ) -> "Pattern":
        """
        Create a pattern where every cell is empty.

        Args:
            num_rows: Number of rows
            num_channels: Channels per row

        Returns:
            New Pattern instance
        """
        return cls(rows=[Row.create_empty(num_channels) for _ in range(num_rows)])

    def __repr__(self) -> str:
        return f"Pattern(rows={self.num_rows}, channels={self.num_channels})"
