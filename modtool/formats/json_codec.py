"""
JSON interchange format for modules.

The layout matches the text written by the mod2json tool so that files
can be passed back and forth:

- every object key starts on its own line, indented by depth
- arrays of numbers are written 16 values per line
- arrays of objects put each object on its own line
- empty arrays and objects are written as [] and {}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from modtool.models.module import DEFAULT_RESTART, MAX_POSITIONS, Module
from modtool.models.pattern import Channel, Pattern, Row
from modtool.models.sample import SampleInfo
from modtool.utils.validation import (
    ValidationError,
    validate_byte,
    validate_effect,
    validate_int,
    validate_string,
    validate_word,
)

DEFAULT_INDENT = "  "
DEFAULT_ITEMS_PER_LINE = 16


def module_to_dict(module: Module) -> Dict[str, Any]:
    """
    Convert a Module to plain JSON-compatible data.

    Key order follows the interchange format.
    """
    return {
        "name": module.name,
        "sample_info": [
            {
                "name": si.name,
                "length": si.length,
                "finetune": si.finetune,
                "volume": si.volume,
                "repeat_start": si.repeat_start,
                "repeat_length": si.repeat_length,
                "data": list(si.data),
            }
            for si in module.sample_info
        ],
        "length": module.length,
        "positions": {"data": list(module.positions)},
        "b1": module.restart,
        "patterns": [
            {
                "rows": [
                    {
                        "channels": [
                            {
                                "period": ch.period,
                                "sample_number": ch.sample_number,
                                "effect": ch.effect,
                            }
                            for ch in row.channels
                        ]
                    }
                    for row in pattern.rows
                ]
            }
            for pattern in module.patterns
        ],
    }


def _sample_from_dict(data: Dict[str, Any]) -> SampleInfo:
    si = SampleInfo(
        name=data["name"],
        length=data["length"],
        finetune=data["finetune"],
        volume=data["volume"],
        repeat_start=data["repeat_start"],
        repeat_length=data["repeat_length"],
        data=bytearray(data.get("data", [])),
    )
    validate_string(si.name, "sample name")
    validate_word(si.length, "sample length")
    validate_byte(si.finetune, "finetune")
    validate_byte(si.volume, "volume")
    validate_word(si.repeat_start, "repeat start")
    validate_word(si.repeat_length, "repeat length")
    return si


def _channel_from_dict(data: Dict[str, Any]) -> Channel:
    channel = Channel(
        period=data["period"],
        sample_number=data["sample_number"],
        effect=data["effect"],
    )
    validate_word(channel.period, "period")
    validate_byte(channel.sample_number, "sample number")
    validate_effect(channel.effect)
    return channel


def module_from_dict(data: Dict[str, Any]) -> Module:
    """
    Build a Module from interchange data.

    Raises:
        ValidationError: If a value is out of range
        KeyError: If a required key is missing
    """
    positions = list(data["positions"]["data"])
    if len(positions) != MAX_POSITIONS:
        raise ValidationError(
            f"Position table has {len(positions)} entries (need {MAX_POSITIONS})"
        )
    for pos in positions:
        validate_byte(pos, "position")
    validate_byte(data.get("b1", DEFAULT_RESTART), "b1")
    validate_string(data["name"], "name")
    validate_int(data["length"], "length")

    module = Module(
        name=data["name"],
        length=data["length"],
        positions=positions,
        restart=data.get("b1", DEFAULT_RESTART),
    )
    if not 0 <= module.length <= MAX_POSITIONS:
        raise ValidationError(f"Song length must be 0-{MAX_POSITIONS}, got {module.length}")

    module.sample_info = [_sample_from_dict(si) for si in data["sample_info"]]
    module.patterns = [
        Pattern(
            rows=[
                Row(channels=[_channel_from_dict(ch) for ch in row["channels"]])
                for row in pattern["rows"]
            ]
        )
        for pattern in data["patterns"]
    ]
    return module


class PrettyEncoder:
    """
    JSON text encoder with the interchange layout.

    Example:
        PrettyEncoder().encode({"data": [1, 2, 3]})
        # '{\\n  "data": [\\n    1, 2, 3\\n  ]\\n}'
    """

    def __init__(self, indent: str = DEFAULT_INDENT, items_per_line: int = DEFAULT_ITEMS_PER_LINE):
        if items_per_line < 1:
            raise ValueError(f"items_per_line must be at least 1, got {items_per_line}")
        self.indent = indent
        self.items_per_line = items_per_line

    def encode(self, value: Any) -> str:
        parts: List[str] = []
        self._write(value, 0, parts)
        return "".join(parts)

    def _write(self, value: Any, depth: int, out: List[str]) -> None:
        if isinstance(value, dict):
            self._write_object(value, depth, out)
        elif isinstance(value, (list, tuple)):
            self._write_array(value, depth, out)
        else:
            out.append(json.dumps(value, ensure_ascii=False))

    def _write_object(self, value: Dict[str, Any], depth: int, out: List[str]) -> None:
        if not value:
            out.append("{}")
            return

        out.append("{")
        for i, (key, item) in enumerate(value.items()):
            out.append("\n" if i == 0 else ",\n")
            out.append(self.indent * (depth + 1))
            out.append(json.dumps(str(key), ensure_ascii=False))
            out.append(": ")
            self._write(item, depth + 1, out)
        out.append("\n" + self.indent * depth + "}")

    def _write_array(self, value: Union[list, tuple], depth: int, out: List[str]) -> None:
        if not value:
            out.append("[]")
            return

        nested = any(isinstance(item, (dict, list, tuple)) for item in value)
        per_line = 1 if nested else self.items_per_line

        out.append("[")
        for i, item in enumerate(value):
            if i % per_line == 0:
                out.append("\n" if i == 0 else ",\n")
                out.append(self.indent * (depth + 1))
            else:
                out.append(", ")
            self._write(item, depth + 1, out)
        out.append("\n" + self.indent * depth + "]")


class ModuleJSONReader:
    """
    Reader for JSON interchange files.

    Example:
        module = ModuleJSONReader.read("song.json")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Module:
        """
        Read a JSON interchange file.

        Args:
            filepath: Path to .json file

        Returns:
            Parsed Module
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return cls.parse_bytes(data)

    @classmethod
    def parse_bytes(cls, data: bytes) -> Module:
        """
        Parse interchange text.

        Raises:
            ValueError: If the text is not valid JSON
            KeyError: If a required key is missing
            ValidationError: If a value is out of range
        """
        return module_from_dict(json.loads(data.decode("utf-8")))


class ModuleJSONWriter:
    """
    Writer for JSON interchange files.

    Example:
        ModuleJSONWriter.write(module, "song.json")
    """

    def __init__(self, indent: str = DEFAULT_INDENT, items_per_line: int = DEFAULT_ITEMS_PER_LINE):
        self.encoder = PrettyEncoder(indent=indent, items_per_line=items_per_line)

    @classmethod
    def write(cls, module: Module, filepath: Union[str, Path], **kwargs: Any) -> None:
        """
        Write a Module to a JSON interchange file.

        Args:
            module: Module to write
            filepath: Output file path
        """
        writer = cls(**kwargs)
        data = writer.to_bytes(module)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

    def to_text(self, module: Module) -> str:
        return self.encoder.encode(module_to_dict(module))

    def to_bytes(self, module: Module) -> bytes:
        return self.to_text(module).encode("utf-8")

