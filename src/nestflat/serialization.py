"""
Serialization helpers for nested sequences.

Loads nested sequences from JSON/YAML text and dumps them back,
so that documents can be flattened without writing any glue code.

The top-level document must be a list; anything else is rejected.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, List, Sequence

import yaml

from nestflat.sequences import flatten, is_sequence


class SequenceLoadError(Exception):
    """Raised when a document cannot be loaded as a nested sequence."""
    pass


def _require_list(data: Any, fmt: str) -> List[Any]:
    if not isinstance(data, list):
        raise SequenceLoadError(
            f"Top-level {fmt} document must be a list, got {type(data).__name__}"
        )
    return data


def sequence_to_plain(seq: Sequence) -> List[Any]:
    """Convert every nested sequence (tuples, ranges, ...) to a plain list."""
    return [sequence_to_plain(item) if is_sequence(item) else item for item in seq]


def sequence_from_json(text: str) -> List[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SequenceLoadError(f"Invalid JSON: {str(e)}") from e
    return _require_list(data, "JSON")


def sequence_from_yaml(text: str) -> List[Any]:
    if not text.strip():
        warnings.warn("Empty YAML document, treating as empty sequence", UserWarning)
        return []
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SequenceLoadError(f"Invalid YAML: {str(e)}") from e
    return _require_list(data, "YAML")


def sequence_to_json(seq: Sequence) -> str:
    return json.dumps(sequence_to_plain(seq))


def sequence_to_yaml(seq: Sequence) -> str:
    return yaml.safe_dump(sequence_to_plain(seq), default_flow_style=True).strip()


def flatten_json(text: str) -> str:
    """Load a JSON list, flatten it, and dump the result as JSON."""
    return sequence_to_json(flatten(sequence_from_json(text)))


def flatten_yaml(text: str) -> str:
    """Load a YAML list, flatten it, and dump the result as YAML."""
    return sequence_to_yaml(flatten(sequence_from_yaml(text)))


__all__ = [
    "SequenceLoadError",
    "flatten_json",
    "flatten_yaml",
    "sequence_from_json",
    "sequence_from_yaml",
    "sequence_to_json",
    "sequence_to_plain",
    "sequence_to_yaml",
]
