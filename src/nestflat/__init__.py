"""
Nested Sequence Flattening Package

Turns arbitrarily nested sequences into one flat, ordered list.

GUARANTEES:
-----------
    - Depth-first, left-to-right leaf order
    - Input is never mutated
    - Strings and bytes are leaves, not sequences

The core lives in `nestflat.sequences`.
Analysis and JSON/YAML helpers are layered on top and never alter it.
"""

from nestflat.sequences import flatten, flatten_iterative, is_sequence, iter_flatten

__version__ = "0.1.0"

__all__ = ["flatten", "flatten_iterative", "is_sequence", "iter_flatten"]
