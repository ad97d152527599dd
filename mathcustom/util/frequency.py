"""
Frequency tallies over sequences.

Procedural generators often need to check what they produced, e.g. how many
times each symbol was sampled. These helpers turn a sequence into a
value -> count table.

**Key policy**: `distinct_map` keeps native typed keys by default, so the
integer 1 and the string "1" are counted separately. Python equality still
applies, meaning 1, 1.0 and True share one key just as they would in any dict.
Pass `stringify_keys=True` to coerce every element with `str()` first; then
1 and "1" collide into the single key "1". This approximates string-keyed
hash maps but uses Python's spelling: 1.0, True and None become "1.0",
"True" and "None" (not "1", "true" and "null"), so 1 and 1.0 stay apart.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any

import pandas as pd


def distinct_map(sequence: Iterable, stringify_keys: bool = False) -> dict[Any, int]:
    """
    Count how many times each distinct element occurs in a sequence.

    Args:
        sequence: Any iterable of hashable elements.
        stringify_keys: If True, coerce every element with Python's `str()`
            before counting (so 1.0 becomes "1.0" and True becomes "True").

    Returns:
        Dict mapping each distinct element (or its string form) to its count.
        An empty sequence gives an empty dict.

    Raises:
        TypeError: If an element is unhashable and `stringify_keys` is False.
    """
    if stringify_keys:
        return dict(Counter(str(item) for item in sequence))
    return dict(Counter(sequence))


def distinct_counts(sequence: Iterable) -> pd.Series:
    """
    Tally a sequence into a pandas Series of counts.

    Same counting as `distinct_map` with native keys, but returned as a Series
    indexed by value (in order of first occurrence) for analysis code that
    works in pandas. Missing values (None/NaN) are counted rather than dropped.

    Args:
        sequence: Any iterable of hashable elements.

    Returns:
        Series of int counts named "count", indexed by distinct value.
    """
    values = pd.Series(list(sequence), dtype=object)
    counts = values.value_counts(sort=False, dropna=False)
    counts.index.name = None
    return counts.rename("count")
