"""
Sequence Analyzer: structural inventory of nested sequences.

This module provides lightweight analysis of nested sequences:
    - Leaf and nested-sequence counts
    - Nesting depth
    - Empty sub-sequences that contribute nothing to the flattened result
    - Warning flags for unusually deep inputs

IMPORTANT: Analysis is read-only. It does NOT flatten or modify the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from nestflat.sequences import is_sequence

DEFAULT_DEPTH_WARNING = 32


@dataclass
class SequenceMetrics:
    """Metrics about a single (sub-)sequence."""
    depth: int = 1
    leaf_count: int = 0
    sequence_count: int = 0
    empty_paths: List[str] = field(default_factory=list)

    def add(self, other: SequenceMetrics) -> None:
        self.depth = max(self.depth, other.depth + 1)
        self.leaf_count += other.leaf_count
        self.sequence_count += other.sequence_count + 1
        self.empty_paths.extend(other.empty_paths)


def _analyze_sequence(seq: Sequence, path: str) -> SequenceMetrics:
    """Recursively measure a sequence; `path` is its index path from the root."""
    metrics = SequenceMetrics()
    if len(seq) == 0:
        metrics.empty_paths.append(path)

    for index, item in enumerate(seq):
        if is_sequence(item):
            metrics.add(_analyze_sequence(item, f"{path}[{index}]"))
        else:
            metrics.leaf_count += 1

    return metrics


def nesting_depth(arr: Sequence) -> int:
    """
    Count the sequence levels on the deepest path of `arr`.

    The root counts as one level:
        nesting_depth([])                  -> 1
        nesting_depth([1, 2])              -> 1
        nesting_depth([1, [2, [3, [4]]]])  -> 4
    """
    depth = 1
    for item in arr:
        if is_sequence(item):
            depth = max(depth, nesting_depth(item) + 1)
    return depth


@dataclass
class SequenceReport:
    """Analysis report for a nested sequence."""

    leaf_count: int = 0
    sequence_count: int = 0
    empty_sequences: int = 0
    empty_paths: List[str] = field(default_factory=list)
    max_depth: int = 1
    is_flat: bool = True

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_sequence(arr: Sequence, depth_warning: int = DEFAULT_DEPTH_WARNING) -> SequenceReport:
    """
    Analyze the structure of a nested sequence.

    Args:
        arr: Ordered sequence of scalars and/or nested sequences
        depth_warning: Depth above which a warning is recorded

    Returns:
        SequenceReport with counts, depth and warnings
    """
    metrics = _analyze_sequence(arr, "root")

    report = SequenceReport(
        leaf_count=metrics.leaf_count,
        sequence_count=metrics.sequence_count,
        empty_sequences=len(metrics.empty_paths),
        empty_paths=metrics.empty_paths,
        max_depth=metrics.depth,
        is_flat=metrics.sequence_count == 0,
    )

    nested_empty = [p for p in report.empty_paths if p != "root"]
    if nested_empty:
        report.add_warning(
            f"Empty nested sequences contribute no leaves: {', '.join(nested_empty)}"
        )

    if report.max_depth > depth_warning:
        report.add_warning(
            f"Deep nesting: depth {report.max_depth} exceeds {depth_warning}"
        )

    return report


__all__ = [
    "DEFAULT_DEPTH_WARNING",
    "SequenceMetrics",
    "SequenceReport",
    "analyze_sequence",
    "nesting_depth",
]
