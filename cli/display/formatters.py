"""
Display formatting utilities for CLI output.

Provides bar graphics, index lists, and tracker-style cell formatting.
"""

from typing import Iterable

from modtool.models.pattern import Channel
from modtool.utils.effects import format_effect
from modtool.utils.periods import resolve_note
from modtool.utils.validation import NoteResolutionError

# Loudest sample volume
MAX_VOLUME = 64


def volume_bar(volume: int, width: int = 10) -> str:
    """
    Draw a sample volume (0-64) as a bar.

    Volumes above 64 are drawn full, the number shows the stored value.

    Returns:
        String like "48 [▓▓▓▓▓▓▓···]"
    """
    filled = min(max(volume, 0), MAX_VOLUME) * width // MAX_VOLUME
    bar = "▓" * filled + "·" * (width - filled)
    return f"{volume:2d} [{bar}]"


def slot_bar(used: int, total: int, width: int = 31) -> str:
    """
    Draw how many of a module's sample slots hold data.

    Returns:
        Bar scaled to width, then "used/total", e.g. "[▓▓▓···] 3/6" for width 6
    """
    filled = used * width // total if total > 0 else 0
    bar = "▓" * filled + "·" * (width - filled)
    return f"[{bar}] {used}/{total}"


def format_index_list(values: Iterable[int], empty: str = "[dim]none[/dim]") -> str:
    """
    Format pattern or sample numbers as a space separated list.

    Returns:
        "0 2 5" or the empty marker
    """
    text = " ".join(str(v) for v in values)
    return text if text else empty


def format_finetune(raw: int) -> str:
    """
    Format a finetune nibble with its signed value.

    Returns:
        "0", "+3" or "-2 (0xE)"
    """
    value = raw & 0x0F
    signed = value - 16 if value > 7 else value
    if signed == 0:
        return "0"
    if signed > 0:
        return f"+{signed}"
    return f"{signed} (0x{value:X})"


def format_cell(channel: Channel, use_spn: bool = False) -> str:
    """
    Format a note cell the way trackers show it.

    Returns:
        "C-2 01 E81", "--- 00 000" or "~D#3 0A C40"
    """
    if channel.period == 0:
        note = "---"
    else:
        try:
            match = resolve_note(channel.period, use_spn=use_spn)
            note = f"{match.name}{'-' if len(match.name) == 1 else ''}{match.octave}"
            if not match.exact:
                note = "~" + note
        except NoteResolutionError:
            note = "???"

    return f"{note} {channel.sample_number:02X} {format_effect(channel.effect)}"
