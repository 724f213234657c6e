"""
Period and note name lookup tables.

Periods are Amiga hardware values; a lower period plays a higher pitch.
The table covers five octaves of the extended ProTracker range with
finetune 0, lowest octave first.
"""

from dataclasses import dataclass
from typing import Sequence

from modtool.utils.validation import NoteResolutionError

# =============================================================================
# PERIOD TABLE
# =============================================================================
# 5 octaves x 12 semitones, starting at C-0
# fmt: off
PERIODS = (
    1712, 1616, 1525, 1440, 1357, 1281, 1209, 1141, 1077, 1017, 961, 907,
    856, 808, 762, 720, 678, 640, 604, 570, 538, 508, 480, 453,
    428, 404, 381, 360, 339, 320, 302, 285, 269, 254, 240, 226,
    214, 202, 190, 180, 170, 160, 151, 143, 135, 127, 120, 113,
    107, 101, 95, 90, 85, 80, 76, 71, 67, 64, 60, 57,
)
# fmt: on

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Octave offset when displaying in scientific pitch notation
SPN_OCTAVE_OFFSET = 2


@dataclass(frozen=True)
class NoteMatch:
    """Nearest table entry for a period."""

    name: str
    octave: int
    exact: bool
    index: int
    difference: int

    @property
    def label(self) -> str:
        """Display form, e.g. 'C-2' or '~A#-3' for an approximate match."""
        prefix = "" if self.exact else "~"
        return f"{prefix}{self.name}-{self.octave}"


def resolve_note(
    period: int, use_spn: bool = False, periods: Sequence[int] = PERIODS
) -> NoteMatch:
    """
    Find the note whose period is closest to the given one.

    Ties keep the first (lowest index) entry.

    Args:
        period: Period value from a note cell
        use_spn: Number octaves in scientific pitch notation
        periods: Reference table, 12 entries per octave

    Returns:
        NoteMatch for the closest entry

    Raises:
        NoteResolutionError: If period is 0 or the table is empty
    """
    if period == 0:
        raise NoteResolutionError("Period 0 does not denote a note")

    found = -1
    min_diff = None
    for i, candidate in enumerate(periods):
        diff = abs(period - candidate)
        if min_diff is None or diff < min_diff:
            min_diff = diff
            found = i

    if found == -1:
        raise NoteResolutionError(f"Failed to find note name for period {period}")

    octave = found // 12
    if use_spn:
        octave += SPN_OCTAVE_OFFSET

    return NoteMatch(
        name=NOTE_NAMES[found % 12],
        octave=octave,
        exact=min_diff == 0,
        index=found,
        difference=min_diff,
    )
