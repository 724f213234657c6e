"""
Error types and argument validation for module data.
"""

from typing import Any, NewType

from modtool.models.module import MAX_POSITIONS, MAX_SAMPLES

# A sample number already checked to be 1-31
SampleNumber = NewType("SampleNumber", int)


class ModtoolError(Exception):
    """Base class for all modtool errors."""

    pass


class ValidationError(ModtoolError):
    """Raised when an argument or capacity check fails."""

    pass


class SampleNumberError(ValidationError):
    """Raised when a sample number is outside 1-31."""

    def __init__(self, value: int, message: str = ""):
        self.value = value
        super().__init__(message or f"Invalid sample number '{value}' (must be 1-{MAX_SAMPLES})")


class PositionTableFullError(ValidationError):
    """Raised when a merge would overflow the position table."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Position table full: cannot add entry {length + 1} (max {MAX_POSITIONS})"
        )


class PatternLimitError(ValidationError):
    """Raised when a pattern index would not fit in a position byte."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Pattern index {index} does not fit in a position entry (max 255)")


class NoteResolutionError(ModtoolError):
    """Raised when a period cannot be resolved to a note name."""

    pass


class StatsError(ModtoolError):
    """Raised when aggregate statistics are read before they are complete."""

    pass


class CodecError(ModtoolError):
    """Raised when a module cannot be read or written."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{message}: '{path}'" if path else message)


class UnsupportedFormatError(CodecError):
    """Raised when no codec is registered for a module format."""

    pass


def validate_sample_number(value: int) -> SampleNumber:
    """
    Validate an externally supplied sample number.

    Args:
        value: Sample number (1-31)

    Returns:
        The value as a SampleNumber

    Raises:
        SampleNumberError: If value is out of range
    """
    if not 1 <= value <= MAX_SAMPLES:
        raise SampleNumberError(value)
    return SampleNumber(value)


def validate_sample_available(number: SampleNumber, available: int) -> None:
    """
    Check that a sample number addresses an existing slot.

    Args:
        number: Validated sample number
        available: Number of sample slots in the module

    Raises:
        SampleNumberError: If the module has fewer slots
    """
    if number > available:
        raise SampleNumberError(
            number, f"Invalid sample number '{number}'. Only {available} samples available."
        )


def validate_int(value: Any, name: str = "value") -> None:
    """
    Validate that a value is an integer.

    Raises:
        ValidationError: If value is not an int (bools are rejected too)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")


def validate_string(value: Any, name: str = "value") -> None:
    """
    Validate that a value is a string.

    Raises:
        ValidationError: If value is not a str
    """
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {value!r}")


def validate_byte(value: int, name: str = "value") -> None:
    """
    Validate an unsigned 8-bit value.

    Raises:
        ValidationError: If value is not an integer or out of range
    """
    validate_int(value, name)
    if not 0 <= value <= 0xFF:
        raise ValidationError(f"{name} must be 0-255, got {value}")


def validate_word(value: int, name: str = "value") -> None:
    """
    Validate an unsigned 16-bit value.

    Raises:
        ValidationError: If value is not an integer or out of range
    """
    validate_int(value, name)
    if not 0 <= value <= 0xFFFF:
        raise ValidationError(f"{name} must be 0-65535, got {value}")


def validate_effect(value: int) -> None:
    """
    Validate a packed 12-bit effect value.

    Raises:
        ValidationError: If value is not an integer or out of range
    """
    validate_int(value, "effect")
    if not 0 <= value <= 0xFFF:
        raise ValidationError(f"effect must be 0x000-0xFFF, got 0x{value:X}")
