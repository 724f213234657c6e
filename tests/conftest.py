"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from modtool.formats.json_codec import ModuleJSONWriter
from modtool.models.module import Module
from modtool.models.sample import SampleInfo


def make_sample(name: str, length: int, fill: int = 0, **kwargs) -> SampleInfo:
    """Build a sample slot whose data bytes are all ``fill``."""
    return SampleInfo(name=name, length=length, data=bytearray([fill] * length * 2), **kwargs)


@pytest.fixture
def empty_module():
    """Return a module with one empty pattern and 31 unused sample slots."""
    return Module.create_empty("empty")


@pytest.fixture
def four_pattern_module():
    """
    Return a module with 4 patterns where only 0 and 2 are played.

    Each pattern is tagged with its own index as the period of cell (0, 0)
    so tests can follow pattern contents through renumbering.
    """
    module = Module.create_empty("four", num_patterns=4)
    module.length = 2
    module.positions[0] = 0
    module.positions[1] = 2
    module.positions[2] = 3  # past the song length, never played
    module.positions[3] = 1
    for i, pattern in enumerate(module.patterns):
        pattern.cell(0, 0).period = 100 + i
    return module


@pytest.fixture
def sample_module():
    """
    Return a module with 5 sample slots where samples 2 and 4 are unused.

    Cells reference samples 1, 3 and 5.
    """
    module = Module.create_empty("samples", num_patterns=1, num_samples=5)
    module.sample_info = [
        make_sample("kick", 4, fill=1, volume=64),
        make_sample("spare", 2, fill=2, volume=10),
        make_sample("snare", 3, fill=3, volume=48, finetune=2),
        make_sample("unused", 1, fill=4),
        make_sample("hat", 5, fill=5, volume=32, repeat_start=1, repeat_length=2),
    ]

    pattern = module.patterns[0]
    pattern.cell(0, 0).sample_number = 1
    pattern.cell(0, 0).period = 428
    pattern.cell(1, 1).sample_number = 3
    pattern.cell(1, 1).period = 320
    pattern.cell(2, 2).sample_number = 5
    pattern.cell(2, 2).period = 214
    pattern.cell(3, 3).sample_number = 5
    return module


@pytest.fixture
def write_json(tmp_path):
    """Return a function that writes a module to a JSON file in tmp_path."""

    def _write(module: Module, name: str = "song.json") -> Path:
        path = tmp_path / name
        ModuleJSONWriter.write(module, path)
        return path

    return _write
