"""
Sample nested sequences for the demo and tests.

build_example_sequence(4) gives the canonical staircase [1, [2, [3, [4]]]].
"""
from typing import Any, Dict, List


def build_example_sequence(depth: int = 4) -> List[Any]:
    """Build [1, [2, [... [depth]]]], one value per nesting level."""
    sequence: List[Any] = [depth]
    for value in range(depth - 1, 0, -1):
        sequence = [value, sequence]
    return sequence


def build_sample_sequences() -> Dict[str, List[Any]]:
    return {
        "staircase": build_example_sequence(4),
        "mixed": [[1, 2], [3, [4, 5]], 6],
        "flat": [1, 2, 3],
        "empty": [],
        "scalars": ["ab", None, True, 2.5, (0, b"raw")],
        "hollow": [[], [[]], 1],
    }
