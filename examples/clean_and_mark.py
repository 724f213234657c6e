#!/usr/bin/env python3
"""
Example: Clean up a module for a demo

Removes unused patterns and samples, inserts E81 sync markers and writes
the result as JSON.

Usage:
    python clean_and_mark.py input.json output.json
"""

import sys

sys.path.insert(0, "..")

from modtool.editing import insert_markers, remove_unused_patterns, remove_unused_samples
from modtool.formats import read_module, write_module


def main():
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    source, target = sys.argv[1], sys.argv[2]
    module = read_module(source)
    print(f"Loaded: {module}")

    patterns = remove_unused_patterns(module)
    samples = remove_unused_samples(module)
    print(f"Removed patterns: {patterns or 'none'}")
    print(f"Removed samples: {samples or 'none'}")

    for report in insert_markers(module):
        if not report.result.ok:
            print(f"Pattern {report.pattern}: no free cell for E81")

    write_module(module, target)
    print(f"Saved: {target}")


if __name__ == "__main__":
    main()
