"""
Configuration for modtool.

Settings come from built-in defaults, optionally overridden by a JSON
config file. Command line flags override both.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

from modtool.formats.json_codec import DEFAULT_INDENT, DEFAULT_ITEMS_PER_LINE
from modtool.utils.validation import ValidationError

# Environment variable naming the config file
CONFIG_ENV_VAR = "MODTOOL_CONFIG"

# Accepted types per setting
_FIELD_TYPES = {
    "use_spn": (bool,),
    "json_indent": (str,),
    "json_items_per_line": (int,),
    "continue_on_error": (bool,),
    "output_format": (str, type(None)),
}


@dataclass
class ToolConfig:
    """
    Settings shared by all commands.

    Attributes:
        use_spn: Show octaves in scientific pitch notation
        json_indent: Indent unit for JSON output
        json_items_per_line: Numbers per line in JSON arrays
        continue_on_error: Keep processing a batch after a file fails
        output_format: Format for written modules ("mod", "p61", "json"),
            None to keep the input format
    """

    use_spn: bool = False
    json_indent: str = DEFAULT_INDENT
    json_items_per_line: int = DEFAULT_ITEMS_PER_LINE
    continue_on_error: bool = True
    output_format: Optional[str] = None

    def validate(self) -> None:
        """
        Check setting types and values.

        Raises:
            ValidationError: If a value has the wrong type or is invalid
        """
        for f in fields(self):
            value = getattr(self, f.name)
            expected = _FIELD_TYPES[f.name]
            # bool is an int subclass, so it only matches bool fields
            if isinstance(value, bool) and bool not in expected:
                ok = False
            else:
                ok = isinstance(value, expected)
            if not ok:
                names = " or ".join(t.__name__ for t in expected)
                raise ValidationError(f"{f.name} must be {names}, got {value!r}")

        if self.json_items_per_line < 1:
            raise ValidationError(
                f"json_items_per_line must be at least 1, got {self.json_items_per_line}"
            )
        if self.output_format not in (None, "mod", "p61", "json"):
            raise ValidationError(f"Unknown output format: {self.output_format}")

    @property
    def json_options(self) -> dict:
        """Keyword options for the JSON writer."""
        return {"indent": self.json_indent, "items_per_line": self.json_items_per_line}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "ToolConfig":
        """
        Load settings from a JSON file.

        Args:
            path: Config file; defaults are returned if None or missing

        Returns:
            ToolConfig

        Raises:
            ValidationError: If the file is not valid JSON, has unknown keys
                or invalid values
        """
        config = cls()
        if path is None:
            return config

        path = Path(path)
        if not path.exists():
            return config

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Could not load config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValidationError(f"Config file {path} must contain a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        return config

    def save(self, path: Union[str, Path]) -> None:
        """Save settings to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
