#!/usr/bin/env python3
"""
Demo: Flatten sample nested sequences and print an analysis of each.
"""

from nestflat import flatten
from nestflat.analyzer import analyze_sequence
from nestflat.examples import build_example_sequence, build_sample_sequences


def main():
    print(flatten(build_example_sequence(4)))

    print()
    print("=" * 70)
    print("FLATTEN DEMO")
    print("=" * 70)

    for name, sequence in build_sample_sequences().items():
        report = analyze_sequence(sequence)
        print(f"\n{name.upper()}")
        print("-" * 70)
        print(f"  Input:      {sequence!r}")
        print(f"  Flattened:  {flatten(sequence)!r}")
        print(f"  Leaves:     {report.leaf_count}")
        print(f"  Depth:      {report.max_depth}")
        for warning in report.warnings:
            print(f"  WARNING: {warning}")


if __name__ == "__main__":
    main()
