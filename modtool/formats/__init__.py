"""
Module file formats.

Two binary formats exist for module data: the ProTracker .mod layout and
The Player 6.1A packed layout used by demo replay routines. Their codecs
live outside this package and are plugged in with ``register_codec``.
The JSON interchange format is built in.

The format is resolved once, at the file boundary; everything after that
works on the decoded Module.

Example:
    from modtool.formats import ModuleFormat, read_module, write_module

    module = read_module("song.json")
    write_module(module, "pruned.json", ModuleFormat.JSON)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from modtool.formats.json_codec import ModuleJSONReader, ModuleJSONWriter
from modtool.models.module import Module
from modtool.utils.validation import CodecError, UnsupportedFormatError, ValidationError


class ModuleFormat(Enum):
    """On-disk module formats."""

    PROTRACKER = "mod"
    PACKED_RUNTIME = "p61"
    JSON = "json"

    @property
    def suffix(self) -> str:
        return f".{self.value}"

    @property
    def description(self) -> str:
        return {
            ModuleFormat.PROTRACKER: "ProTracker module",
            ModuleFormat.PACKED_RUNTIME: "The Player 6.1A module",
            ModuleFormat.JSON: "JSON interchange",
        }[self]


@dataclass
class Codec:
    """
    Reader and writer for one format.

    ``parse`` turns file contents into a Module. ``dump`` turns a Module
    into file contents and accepts format-specific keyword options.
    """

    parse: Callable[[bytes], Module]
    dump: Callable[..., bytes]


_CODECS: Dict[ModuleFormat, Codec] = {}


def register_codec(
    fmt: ModuleFormat, parse: Callable[[bytes], Module], dump: Callable[..., bytes]
) -> None:
    """
    Register the codec for a format, replacing any previous one.

    Args:
        fmt: Format handled by the codec
        parse: Function from file contents to Module
        dump: Function from Module (and keyword options) to file contents
    """
    _CODECS[fmt] = Codec(parse=parse, dump=dump)


def unregister_codec(fmt: ModuleFormat) -> None:
    """Remove the codec for a format, if any."""
    _CODECS.pop(fmt, None)


def get_codec(fmt: ModuleFormat) -> Codec:
    """
    Get the codec for a format.

    Raises:
        UnsupportedFormatError: If no codec is registered
    """
    codec = _CODECS.get(fmt)
    if codec is None:
        raise UnsupportedFormatError(f"No codec registered for {fmt.description} files")
    return codec


def detect_format(filepath: Union[str, Path], in_p61: bool = False) -> ModuleFormat:
    """
    Work out a file's format from its name.

    Args:
        filepath: File path
        in_p61: Force The Player 6.1A format

    Returns:
        ModuleFormat; unknown names are taken to be ProTracker modules
    """
    if in_p61:
        return ModuleFormat.PACKED_RUNTIME

    path = Path(filepath)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return ModuleFormat.JSON
    if suffix == ".p61" or path.name.lower().startswith("p61."):
        return ModuleFormat.PACKED_RUNTIME
    return ModuleFormat.PROTRACKER


def read_module(filepath: Union[str, Path], fmt: Optional[ModuleFormat] = None) -> Module:
    """
    Read a module file.

    Args:
        filepath: File to read
        fmt: File format (detected from the name if omitted)

    Returns:
        Decoded Module

    Raises:
        CodecError: If the file cannot be opened or parsed
    """
    filepath = Path(filepath)
    codec = get_codec(fmt or detect_format(filepath))

    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as e:
        raise CodecError(f"Failed to open file ({e.strerror})", str(filepath)) from e

    try:
        return codec.parse(data)
    except (ValueError, KeyError, TypeError, ValidationError) as e:
        raise CodecError(f"Failed to parse file ({e})", str(filepath)) from e


def write_module(
    module: Module,
    filepath: Union[str, Path],
    fmt: Optional[ModuleFormat] = None,
    **options: Any,
) -> None:
    """
    Write a module file.

    Args:
        module: Module to write
        filepath: Output file path
        fmt: File format (detected from the name if omitted)
        **options: Passed to the codec's dump function

    Raises:
        CodecError: If the module cannot be encoded or written
    """
    filepath = Path(filepath)
    codec = get_codec(fmt or detect_format(filepath))

    try:
        data = codec.dump(module, **options)
    except (ValueError, ValidationError) as e:
        raise CodecError(f"Failed to encode module ({e})", str(filepath)) from e

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "wb") as f:
            f.write(data)
    except OSError as e:
        raise CodecError(f"Failed to write module ({e.strerror})", str(filepath)) from e


def _dump_json(module: Module, **options: Any) -> bytes:
    return ModuleJSONWriter(**options).to_bytes(module)


register_codec(ModuleFormat.JSON, ModuleJSONReader.parse_bytes, _dump_json)


__all__ = [
    "Codec",
    "ModuleFormat",
    "ModuleJSONReader",
    "ModuleJSONWriter",
    "detect_format",
    "get_codec",
    "read_module",
    "register_codec",
    "unregister_codec",
    "write_module",
]
