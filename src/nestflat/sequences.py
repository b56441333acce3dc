"""
Core Flattening Operations

Converts a nested sequence into a flat list of its scalar leaves.

Classification:
    A value is a SEQUENCE when it is a collections.abc.Sequence
    that is not text or binary data (str, bytes, bytearray, memoryview).
    Everything else is a SCALAR and is kept as-is.

Traversal:
    Depth-first, left-to-right.
    Nested sequences are replaced by their leaves, in order.

ARCHITECTURAL RULE:
    These functions are pure.
        - They never mutate the input
        - They always return a new list
        - They define no errors of their own
"""

from collections import UserString
from collections.abc import Sequence
from typing import Any, Iterator, List

# Sequence subclasses that are leaves, not containers.
TEXT_TYPES = (str, UserString, bytes, bytearray, memoryview)


def is_sequence(value: Any) -> bool:
    """
    Decide whether a value is itself a nested sequence.

    Args:
        value: Any element of a nested sequence

    Returns:
        True for lists, tuples, ranges and other Sequence types;
        False for scalars, strings and binary data
    """
    return isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES)


def flatten(arr: Sequence) -> List[Any]:
    """
    Recursively flatten a nested sequence.

    Example:
        flatten([1, [2, [3, [4]]]]) -> [1, 2, 3, 4]

    Args:
        arr: Ordered sequence of scalars and/or nested sequences

    Returns:
        New list of every scalar leaf, in depth-first order

    Depth is bounded by the interpreter recursion limit.
    Use flatten_iterative() for pathologically deep inputs.
    """
    result = []
    for item in arr:
        if is_sequence(item):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result


def iter_flatten(arr: Sequence) -> Iterator[Any]:
    """Lazily yield the leaves of a nested sequence, in the order flatten() returns them."""
    for item in arr:
        if is_sequence(item):
            yield from iter_flatten(item)
        else:
            yield item


def flatten_iterative(arr: Sequence) -> List[Any]:
    """
    Flatten a nested sequence without recursion.

    Keeps an explicit stack of iterators, one per open nesting level,
    so depth is limited only by memory.

    Args:
        arr: Ordered sequence of scalars and/or nested sequences

    Returns:
        Same list flatten() would return
    """
    result = []
    stack = [iter(arr)]
    while stack:
        for item in stack[-1]:
            if is_sequence(item):
                stack.append(iter(item))
                break
            result.append(item)
        else:
            # current level exhausted
            stack.pop()
    return result


__all__ = [
    "flatten",
    "flatten_iterative",
    "is_sequence",
    "iter_flatten",
    "TEXT_TYPES",
]
