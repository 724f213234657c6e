"""
Module data model - the top-level container for tracker song data.
"""

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from modtool.models.pattern import Channel, Pattern
from modtool.models.sample import SampleInfo

# Position table capacity (bytes after the song length)
MAX_POSITIONS = 128

# Sample slots addressable by a note cell
MAX_SAMPLES = 31

# Restart byte written by ProTracker
DEFAULT_RESTART = 0x7F


def _empty_positions() -> List[int]:
    return [0] * MAX_POSITIONS


@dataclass
class Module:
    """
    Complete module structure.

    A Module is produced whole by a codec, edited in place by the
    operations in ``modtool.editing`` and handed back to a codec.

    Attributes:
        name: Song name (max 20 characters in the legacy format)
        length: Number of active entries in ``positions``
        positions: Play order, always MAX_POSITIONS pattern indices
        patterns: Patterns, list index is the pattern number
        sample_info: Sample slots, slot 0 is logical sample 1
        restart: Byte stored after the song length, carried unchanged
    """

    name: str = ""
    length: int = 0
    positions: List[int] = field(default_factory=_empty_positions)
    patterns: List[Pattern] = field(default_factory=list)
    sample_info: List[SampleInfo] = field(default_factory=list)
    restart: int = DEFAULT_RESTART

    @property
    def active_positions(self) -> List[int]:
        """Play order entries that are actually played."""
        return self.positions[: self.length]

    @property
    def channel_count(self) -> int:
        """Channels per row, taken from the first pattern."""
        if not self.patterns:
            return 0
        return self.patterns[0].num_channels

    @property
    def used_samples(self) -> List[SampleInfo]:
        """Sample slots with a length greater than zero."""
        return [si for si in self.sample_info if si.is_used]

    def iter_channels(self) -> Iterator[Tuple[int, int, int, Channel]]:
        """
        Iterate over every cell of every pattern.

        Yields:
            (pattern_no, row_no, channel_no, channel) tuples
        """
        for pattern_no, pattern in enumerate(self.patterns):
            for row_no, channel_no, channel in pattern.iter_channels():
                yield pattern_no, row_no, channel_no, channel

    def get_sample(self, number: int) -> SampleInfo:
        """
        Get a sample by its 1-based logical number.

        Raises:
            IndexError: If no slot exists for the number
        """
        if not 1 <= number <= len(self.sample_info):
            raise IndexError(
                f"Sample number {number} out of range (1-{len(self.sample_info)})"
            )
        return self.sample_info[number - 1]

    def validate(self) -> List[str]:
        """
        Check the cross-reference invariants.

        Returns:
            List of problems found (empty if consistent)
        """
        errors = []

        if not 0 <= self.length <= MAX_POSITIONS:
            errors.append(f"Song length {self.length} outside 0-{MAX_POSITIONS}")

        if len(self.positions) != MAX_POSITIONS:
            errors.append(
                f"Position table has {len(self.positions)} entries (need {MAX_POSITIONS})"
            )

        for i, pos in enumerate(self.active_positions):
            if pos >= len(self.patterns):
                errors.append(
                    f"Position {i} refers to pattern {pos} "
                    f"but only {len(self.patterns)} patterns exist"
                )

        return errors

    @classmethod
    def create_empty(
        cls,
        name: str = "",
        num_patterns: int = 1,
        num_samples: int = MAX_SAMPLES,
        num_channels: int = 4,
    ) -> "Module":
        """
        Create a module with empty patterns and unused sample slots.

        The play order lists every pattern once.

        Args:
            name: Song name
            num_patterns: Number of empty patterns
            num_samples: Number of sample slots
            num_channels: Channels per row

        Returns:
            New Module instance
        """
        module = cls(name=name)
        module.patterns = [
            Pattern.create_empty(num_channels=num_channels) for _ in range(num_patterns)
        ]
        module.sample_info = [SampleInfo() for _ in range(num_samples)]
        module.length = min(num_patterns, MAX_POSITIONS)
        for i in range(module.length):
            module.positions[i] = i
        return module

    def copy(self) -> "Module":
        """Create a deep copy of this module."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"Module(name={self.name!r}, length={self.length}, "
            f"patterns={len(self.patterns)}, samples={len(self.used_samples)}/{len(self.sample_info)})"
        )
