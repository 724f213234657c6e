"""
Sample header and data model.
"""

from dataclasses import dataclass, field


@dataclass
class SampleInfo:
    """
    Instrument sample slot.

    Lengths and repeat offsets are stored in words, the way the legacy
    format stores them. Multiply by 2 for bytes.

    Attributes:
        name: Sample name (max 22 characters in the legacy format)
        length: Length in words, 0 = unused slot
        finetune: Raw finetune nibble (0-15, 8-15 are negative)
        volume: Default volume (0-64)
        repeat_start: Loop start in words
        repeat_length: Loop length in words
        data: Raw 8-bit PCM data, length * 2 bytes
    """

    name: str = ""
    length: int = 0
    finetune: int = 0
    volume: int = 0
    repeat_start: int = 0
    repeat_length: int = 0
    data: bytearray = field(default_factory=bytearray, repr=False)

    @property
    def is_used(self) -> bool:
        """A slot with no length holds no sample."""
        return self.length > 0

    @property
    def byte_length(self) -> int:
        return self.length * 2

    @property
    def signed_finetune(self) -> int:
        """Finetune as a signed value (-8 to +7)."""
        value = self.finetune & 0x0F
        return value - 16 if value > 7 else value

    def clear(self) -> None:
        """
        Turn this slot into an unused slot.

        Name, finetune and volume are kept.
        """
        self.length = 0
        self.repeat_start = 0
        self.repeat_length = 0
        self.data = bytearray()
