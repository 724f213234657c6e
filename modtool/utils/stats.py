"""
Streaming aggregate statistics.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from modtool.models.module import Module
from modtool.utils.validation import StatsError


class Stats:
    """
    Running min/max/sum/count over a series of integers.

    Call ``finalize()`` once all values are in, then read ``average``.

    Example:
        stats = Stats()
        for value in (4, 8, 9):
            stats.update(value)
        stats.finalize()
        stats.average  # 7
    """

    def __init__(self, values: Optional[Iterable[int]] = None):
        self.min: Optional[int] = None
        self.max: Optional[int] = None
        self.sum = 0
        self.count = 0
        self._average: Optional[int] = None

        if values is not None:
            for value in values:
                self.update(value)

    def update(self, value: int) -> None:
        """Add one value to the series."""
        self.min = value if self.min is None else min(self.min, value)
        self.max = value if self.max is None else max(self.max, value)
        self.sum += value
        self.count += 1
        self._average = None

    def finalize(self) -> None:
        """
        Compute the average (truncating integer division).

        Raises:
            StatsError: If no values were added
        """
        if self.count == 0:
            raise StatsError("Cannot average an empty series")
        self._average = self.sum // self.count

    @property
    def average(self) -> int:
        """
        Average of the series.

        Raises:
            StatsError: If finalize() has not been called since the last update
        """
        if self._average is None:
            raise StatsError("finalize() must be called before reading the average")
        return self._average

    def __repr__(self) -> str:
        return f"Stats(min={self.min}, max={self.max}, sum={self.sum}, count={self.count})"


@dataclass
class SampleStats:
    """Statistics over the used samples of a module (byte units)."""

    used_count: int
    length: Optional[Stats] = None
    finetune: Optional[Stats] = None
    volume: Optional[Stats] = None
    repeat_start: Optional[Stats] = None
    repeat_length: Optional[Stats] = None


def summarize_samples(module: Module) -> SampleStats:
    """
    Build statistics over samples with a length greater than zero.

    Args:
        module: Module to summarize

    Returns:
        SampleStats; the Stats fields are None if no sample is used
    """
    used = module.used_samples
    result = SampleStats(used_count=len(used))
    if not used:
        return result

    result.length = Stats(si.byte_length for si in used)
    result.finetune = Stats(si.finetune for si in used)
    result.volume = Stats(si.volume for si in used)
    result.repeat_start = Stats(si.repeat_start * 2 for si in used)
    result.repeat_length = Stats(si.repeat_length * 2 for si in used)

    for stats in (
        result.length,
        result.finetune,
        result.volume,
        result.repeat_start,
        result.repeat_length,
    ):
        stats.finalize()

    return result
