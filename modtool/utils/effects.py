"""
ProTracker effect command lookup tables.

Effects are packed into 12 bits: the high nibble is the command family
(0x0-0xF), the low byte its parameter. Family 0xE is the extended command
bank; its parameter's high nibble selects one of 16 sub-commands.

The 32-entry numbering used here puts the 16 plain families at 0-15 and the
16 extended sub-commands at 16-31.
"""

from typing import Optional

EXTENDED_FAMILY = 0xE
EXTENDED_BASE = 16

# =============================================================================
# EFFECT NAMES
# =============================================================================
# Index: family (0-15), then 16 + extended sub-command (16-31)
EFFECT_NAMES = (
    "0xy Arpeggio",
    "1xx Portamento up",
    "2xx Portamento down",
    "3xx Tone portamento",
    "4xy Vibrato",
    "5xy Tone portamento + volume slide",
    "6xy Vibrato + volume slide",
    "7xy Tremolo",
    "8xx Unused (sync)",
    "9xx Set sample offset",
    "Axy Volume slide",
    "Bxx Position jump",
    "Cxx Set volume",
    "Dxx Pattern break",
    "Exy Extended command",
    "Fxx Set speed/tempo",
    "E0x Set filter",
    "E1x Fine portamento up",
    "E2x Fine portamento down",
    "E3x Glissando control",
    "E4x Set vibrato waveform",
    "E5x Set finetune",
    "E6x Pattern loop",
    "E7x Set tremolo waveform",
    "E8x Unused (sync)",
    "E9x Retrigger note",
    "EAx Fine volume slide up",
    "EBx Fine volume slide down",
    "ECx Note cut",
    "EDx Note delay",
    "EEx Pattern delay",
    "EFx Invert loop",
)

# Marker written into patterns that lack an E8x command
SYNC_MARKER = 0xE81


def effect_family(effect: int) -> int:
    """Command nibble of a packed effect."""
    return (effect >> 8) & 0xF


def effect_index(effect: int) -> Optional[int]:
    """
    Map a packed effect to its 32-entry index.

    Args:
        effect: 12-bit packed effect

    Returns:
        Index 0-31, or None if the cell carries no command
        (family 0 with a zero parameter)
    """
    family = effect_family(effect)
    if family == 0 and effect & 0xFF == 0:
        return None
    if family == EXTENDED_FAMILY:
        return EXTENDED_BASE + ((effect >> 4) & 0xF)
    return family


def is_e8_command(effect: int) -> bool:
    """Check for an E8x command (E80-E8F)."""
    return effect & 0xFF0 == 0xE80


def get_effect_name(index: int) -> str:
    """Get effect name from its 32-entry index."""
    if 0 <= index < len(EFFECT_NAMES):
        return EFFECT_NAMES[index]
    return f"Unknown ({index})"


def format_effect(effect: int) -> str:
    """Format a packed effect the way trackers display it, e.g. 'E81'."""
    return f"{effect & 0xFFF:03X}"
