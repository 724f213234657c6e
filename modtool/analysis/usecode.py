"""
The Player 6.1A usecode calculation.

The usecode is a 32-bit mask telling the replay routine which effect
handlers a module needs. Bit ``i`` is set for every effect index ``i``
(see ``modtool.utils.effects``) used in any note cell, with two special
cases: command 0 (arpeggio) sets bit 8 since the player converts it to
command 8, and bit 0 flags that some sample has a nonzero finetune.
"""

from typing import List

from modtool.models.module import Module
from modtool.utils.effects import EFFECT_NAMES, effect_index

# Bit set for arpeggio (command 0)
ARPEGGIO_BIT = 8

# Bit set when finetune is in use
FINETUNE_BIT = 0


def find_used_effects(module: Module) -> List[int]:
    """
    Find the effect indices used by any note cell.

    Args:
        module: Module to scan

    Returns:
        Ascending list of indices 0-31
    """
    seen = [False] * len(EFFECT_NAMES)
    for _, _, _, channel in module.iter_channels():
        index = effect_index(channel.effect)
        if index is not None:
            seen[index] = True
    return [i for i, used in enumerate(seen) if used]


def uses_finetune(module: Module) -> bool:
    """Check whether any sample slot has a nonzero finetune."""
    return any(si.finetune != 0 for si in module.sample_info)


def compute_usecode(module: Module) -> int:
    """
    Compute the usecode of a module.

    Args:
        module: Module to scan

    Returns:
        Usecode bitmask
    """
    usecode = 0
    for index in find_used_effects(module):
        if index == 0:
            usecode |= 1 << ARPEGGIO_BIT
        else:
            usecode |= 1 << index

    if uses_finetune(module):
        usecode |= 1 << FINETUNE_BIT

    return usecode


def format_usecode(usecode: int, width: int = 0) -> str:
    """
    Format a usecode as '$' followed by uppercase hex.

    Args:
        usecode: Usecode bitmask
        width: Zero-pad to this many digits

    Returns:
        String like '$400' or '$00000400'
    """
    return f"${usecode:0{width}X}"
