#!/usr/bin/env python3
"""
Example: Module report

Builds a small module in memory and prints what the analyzer finds.
"""

import sys

sys.path.insert(0, "..")

from modtool.analysis.module_analyzer import ModuleAnalyzer
from modtool.analysis.usecode import format_usecode
from modtool.models.module import Module
from modtool.models.sample import SampleInfo


def build_module():
    module = Module.create_empty("example", num_patterns=3, num_samples=4)
    module.length = 2
    module.positions[:2] = [0, 2]

    module.sample_info[0] = SampleInfo(name="bass", length=32, volume=64, data=bytearray(64))
    module.sample_info[2] = SampleInfo(
        name="lead", length=16, volume=40, finetune=3, data=bytearray(32)
    )

    pattern = module.patterns[0]
    pattern.cell(0, 0).period = 428
    pattern.cell(0, 0).sample_number = 1
    pattern.cell(4, 1).period = 339
    pattern.cell(4, 1).sample_number = 3
    pattern.cell(4, 1).effect = 0x037
    module.patterns[2].cell(63, 0).effect = 0xD00

    return module


def main():
    analysis = ModuleAnalyzer(use_spn=True).analyze(build_module())

    print(f"Song: {analysis.name}")
    print(f"Length: {analysis.length}, patterns: {analysis.num_patterns}")
    print(f"Play order: {analysis.play_order}")
    print(f"Unused patterns: {analysis.unused_patterns}")
    print(f"Unused samples: {analysis.unused_samples}")
    print()

    print("Periods:")
    for usage in analysis.used_periods:
        print(f"  {usage.period:5d} {usage.label:6s} x{usage.count}")
    print()

    print("Effects:")
    for effect in analysis.used_effects:
        print(f"  {effect.index:2d} {effect.name}")
    print()

    print(f"Usecode: {format_usecode(analysis.usecode, width=8)}")


if __name__ == "__main__":
    main()
