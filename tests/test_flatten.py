"""
Tests for the core flattening operations.

These tests verify:
    - Depth-first, left-to-right leaf order
    - Classification of sequences versus scalars
    - Purity (new list, input untouched)
    - Agreement between the recursive, lazy and iterative variants
"""

import sys
from collections import UserString

import pytest

from nestflat import flatten, flatten_iterative, is_sequence, iter_flatten


NESTED_CASES = [
    ([], []),
    ([1, [2, [3, [4]]]], [1, 2, 3, 4]),
    ([[1, 2], [3, [4, 5]], 6], [1, 2, 3, 4, 5, 6]),
    ([[[[]]]], []),
    ([[], [[]], 1], [1]),
    ([1, (2, (3,)), [4]], [1, 2, 3, 4]),
    (["ab", ["cd", [b"ef"]]], ["ab", "cd", b"ef"]),
    ([None, [True, [False, [0.5]]]], [None, True, False, 0.5]),
]


class TestIsSequence:
    """Test sequence classification."""

    @pytest.mark.parametrize("value", [[], [1], (), (1, 2), range(3)])
    def test_sequences(self, value):
        """Lists, tuples and ranges are nested sequences."""
        assert is_sequence(value)

    @pytest.mark.parametrize(
        "value",
        [0, 1.5, True, None, "text", "", b"raw", bytearray(b"x"), memoryview(b"x"), UserString("ab"), {"a": 1}, {1, 2}],
    )
    def test_scalars(self, value):
        """Numbers, text, binary data, mappings and sets are leaves."""
        assert not is_sequence(value)


class TestFlatten:
    """Test the recursive flatten."""

    @pytest.mark.parametrize("nested, expected", NESTED_CASES)
    def test_flatten(self, nested, expected):
        assert flatten(nested) == expected

    def test_empty(self):
        """An empty sequence flattens to an empty list."""
        assert flatten([]) == []

    def test_staircase(self):
        assert flatten([1, [2, [3, [4]]]]) == [1, 2, 3, 4]

    def test_flat_sequence_is_copied(self):
        """A flat sequence comes back equal but not identical."""
        flat = [1, "two", 3.0, None]
        result = flatten(flat)
        assert result == flat
        assert result is not flat

    def test_flat_tuple_returns_list(self):
        assert flatten((1, 2, 3)) == [1, 2, 3]

    def test_input_not_mutated(self):
        nested = [[1, 2], [3, [4, 5]], 6]
        flatten(nested)
        assert nested == [[1, 2], [3, [4, 5]], 6]

    def test_result_has_no_nested_sequences(self):
        result = flatten([[1, [2, (3, [4])]], range(5, 7)])
        assert result == [1, 2, 3, 4, 5, 6]
        assert not any(is_sequence(item) for item in result)

    def test_strings_are_not_split(self):
        assert flatten(["hello", ["world"]]) == ["hello", "world"]

    def test_user_strings_are_leaves(self):
        """String-like Sequence subclasses are kept whole."""
        text = UserString("ab")
        assert flatten([text, [text]]) == [text, text]
        assert list(iter_flatten([[text]])) == [text]
        assert flatten_iterative([text, [text]]) == [text, text]

    def test_mappings_are_leaves(self):
        mapping = {"a": [1, 2]}
        assert flatten([mapping, [mapping]]) == [mapping, mapping]

    @pytest.mark.parametrize("nested, expected", NESTED_CASES)
    def test_idempotent(self, nested, expected):
        """Flattening twice gives the same result as flattening once."""
        assert flatten(flatten(nested)) == flatten(nested)

    def test_non_sequence_argument(self):
        """A non-iterable argument is left to Python to reject."""
        with pytest.raises(TypeError):
            flatten(42)

    def test_pathological_depth_exhausts_recursion(self):
        nested = [0]
        for _ in range(sys.getrecursionlimit() + 100):
            nested = [nested]
        with pytest.raises(RecursionError):
            flatten(nested)


class TestIterFlatten:
    """Test the lazy generator variant."""

    @pytest.mark.parametrize("nested, expected", NESTED_CASES)
    def test_matches_flatten(self, nested, expected):
        assert list(iter_flatten(nested)) == expected

    def test_is_lazy(self):
        leaves = iter_flatten([1, [2, [3]]])
        assert next(leaves) == 1
        assert next(leaves) == 2
        assert list(leaves) == [3]


class TestFlattenIterative:
    """Test the explicit-stack variant."""

    @pytest.mark.parametrize("nested, expected", NESTED_CASES)
    def test_matches_flatten(self, nested, expected):
        assert flatten_iterative(nested) == expected

    def test_flat_sequence_is_copied(self):
        flat = [1, 2, 3]
        result = flatten_iterative(flat)
        assert result == flat
        assert result is not flat

    def test_depth_beyond_recursion_limit(self):
        """Depth is limited by memory, not the recursion limit."""
        nested = [1, [2]]
        for _ in range(sys.getrecursionlimit() * 3):
            nested = [nested]
        assert flatten_iterative(nested) == [1, 2]
