"""
Tests for mathcustom/util/frequency.py
"""

import pandas as pd
import pytest

from mathcustom.util.frequency import distinct_counts, distinct_map


def test_distinct_map_counts_occurrences():
    """Test counting on a small hand-made sequence."""
    assert distinct_map([1, 2, 2, 3, 3, 3]) == {1: 1, 2: 2, 3: 3}


def test_distinct_map_empty_sequence():
    """Test that an empty sequence gives an empty mapping."""
    assert distinct_map([]) == {}


def test_distinct_map_native_keys_keep_types_apart():
    """Test that 1 and "1" are counted separately by default."""
    assert distinct_map([1, "1", 1]) == {1: 2, "1": 1}


def test_distinct_map_stringified_keys_collide():
    """Test the legacy string-key mode where 1 and "1" share a key."""
    assert distinct_map([1, "1", 1], stringify_keys=True) == {"1": 3}


def test_distinct_map_accepts_generators_and_strings():
    """Test that any iterable works, including a plain string of symbols."""
    assert distinct_map(c for c in "abca") == {"a": 2, "b": 1, "c": 1}
    assert distinct_map("aab") == {"a": 2, "b": 1}


def test_distinct_map_unhashable_elements():
    """Test that unhashable elements raise unless stringified."""
    with pytest.raises(TypeError):
        distinct_map([[1], [1]])

    assert distinct_map([[1], [1]], stringify_keys=True) == {"[1]": 2}


def test_distinct_map_returns_plain_dict():
    """Test that the result is a dict, not a Counter subclass."""
    assert type(distinct_map(["x"])) is dict


def test_distinct_counts_matches_distinct_map():
    """Test that the pandas tally agrees with the dict tally."""
    sequence = ["fire", "water", "fire", "earth", "fire", "water"]
    counts = distinct_counts(sequence)

    assert isinstance(counts, pd.Series)
    assert counts.name == "count"
    assert counts.to_dict() == distinct_map(sequence)


def test_distinct_counts_empty_sequence():
    """Test that an empty sequence gives an empty Series."""
    counts = distinct_counts([])
    assert counts.empty


def test_distinct_counts_keeps_missing_values():
    """Test that None is counted rather than dropped."""
    counts = distinct_counts(["a", None, None])

    assert counts["a"] == 1
    assert counts.sum() == 3


def test_distinct_map_stringified_keys_use_python_spelling():
    """Test that stringified keys follow str(), so 1, 1.0 and True stay apart."""
    counts = distinct_map([1, 1.0, True, None], stringify_keys=True)
    assert counts == {"1": 1, "1.0": 1, "True": 1, "None": 1}
