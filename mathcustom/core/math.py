"""
Closed-form numeric helpers: angle conversion, truncation, log10 and linear range mapping.

This module provides the small arithmetic building blocks used throughout
the library (and by procedural-generation code calling into it): converting
between degrees and radians, rounding toward zero, base-10 logarithms and
the classic Arduino-style linear `map`.

All functions follow IEEE-754 float semantics and never raise on bad numeric
input: division by zero yields inf/NaN, the log of a non-positive number
yields -inf/NaN. Scalars come back as Python floats; lists, numpy arrays and
pandas Series are processed element-wise.
"""

from typing import Optional, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

NumericResult = Union[float, np.ndarray, pd.Series]


def _is_absent(option) -> bool:
    """
    Return True for an optional scalar argument that counts as "not given".

    None, 0 and NaN are all absent. NaN is included because it never
    carries a usable scale or exponent.
    """
    if not option:
        return True
    # NaN is the only value that is not equal to itself
    return bool(option != option)


def _as_numeric(x: ArrayLike):
    """
    Coerce an input into a float64 numpy value (or float Series).

    pandas Series keep their index so callers get a Series back; everything
    else becomes a numpy array (0-d for scalars).
    """
    if isinstance(x, pd.Series):
        return x.astype(float)
    return np.asarray(x, dtype=float)


def _finish(result) -> NumericResult:
    """Return a Python float for scalar results, leave arrays/Series untouched."""
    if np.ndim(result) == 0:
        return float(result)
    return result


def deg_to_rad(x: ArrayLike) -> NumericResult:
    """
    Convert an angle from degrees to radians.

    **Mathematical**:
        rad = deg * π / 180

    **Edge cases**:
    - NaN and ±inf propagate unchanged through the multiplication.

    Args:
        x: Angle in degrees (scalar or array-like).

    Returns:
        Angle in radians, same shape as input.
    """
    values = _as_numeric(x)
    # Multiply first, then divide, so deg_to_rad(180) lands exactly on np.pi
    with np.errstate(all="ignore"):
        return _finish(values * np.pi / 180.0)


def rad_to_deg(x: ArrayLike) -> NumericResult:
    """
    Convert an angle from radians to degrees.

    **Mathematical**:
        deg = 180 * rad / π

    Args:
        x: Angle in radians (scalar or array-like).

    Returns:
        Angle in degrees, same shape as input.
    """
    values = _as_numeric(x)
    with np.errstate(all="ignore"):
        return _finish(180.0 * values / np.pi)


def truncate(x: ArrayLike, decimals: Optional[int] = None) -> NumericResult:
    """
    Round a value toward zero, optionally keeping a number of decimal places.

    **Conceptual**: Truncation discards the fractional part without changing
    sign: 3.7 → 3 and -3.7 → -3. With `decimals`, the value is scaled by
    10^decimals first, truncated, then scaled back, so 3.14159 with 2
    decimals gives 3.14.

    **Mathematical**:
        truncate(x)    = floor(x) if x >= 0 else ceil(x)
        truncate(x, d) = truncate(x * 10^d) / 10^d

    floor-for-positive / ceil-for-negative is exactly numpy's `trunc`.

    **Functionally**:
    - `decimals` is a scalar. None, 0 and NaN all mean "no scaling".
      Passing 0 is therefore identical to omitting it; there is no separate
      "explicitly zero decimal places" state.
    - Negative `decimals` truncate to tens, hundreds, ... (1234 with -2 → 1200).

    **Edge cases**:
    - NaN stays NaN, ±inf stays ±inf.
    - Very large `decimals` can overflow the scale to inf and produce NaN.

    Args:
        x: Value(s) to truncate.
        decimals: Optional number of decimal places to keep.

    Returns:
        Truncated value(s), same shape as input.
    """
    values = _as_numeric(x)

    with np.errstate(all="ignore"):
        if not _is_absent(decimals):
            # np.power keeps overflow inside float semantics (10.0 ** 400 would raise)
            scale = np.power(10.0, decimals)
            return _finish(np.trunc(values * scale) / scale)

        return _finish(np.trunc(values))


def log10(x: ArrayLike) -> NumericResult:
    """
    Compute the base-10 logarithm as ln(x) / ln(10).

    **Functionally**:
    - log10(100) ≈ 2, log10(1) == 0.
    - Non-positive input is not special-cased: log10(0) is -inf and a
      negative input gives NaN, exactly what the natural log yields.

    Args:
        x: Value(s) to take the logarithm of.

    Returns:
        Base-10 logarithm, same shape as input.
    """
    values = _as_numeric(x)
    with np.errstate(all="ignore"):
        return _finish(np.log(values) / np.log(10.0))


def map_range(
    val: ArrayLike,
    in_min: ArrayLike,
    in_max: ArrayLike,
    out_min: ArrayLike,
    out_max: ArrayLike,
) -> NumericResult:
    """
    Linearly map a value from [in_min, in_max] onto [out_min, out_max].

    **Conceptual**: The Arduino `map` function. Answers "where would this
    value sit in the output range if it sat at the same relative position in
    the input range?" Values outside the input range are extrapolated, not
    clamped.

    **Mathematical**:
        out = (val - in_min) * (out_max - out_min) / (in_max - in_min) + out_min

    **Edge cases**:
    - in_max == in_min divides by zero: the result is ±inf, or NaN when val
      also equals in_min. No exception is raised.
    - Reversed ranges (out_min > out_max) invert the mapping.

    Args:
        val: Value(s) to map.
        in_min: Lower bound of the input range.
        in_max: Upper bound of the input range.
        out_min: Lower bound of the output range.
        out_max: Upper bound of the output range.

    Returns:
        Mapped value(s), same shape as `val`.
    """
    values = _as_numeric(val)
    in_min, in_max, out_min, out_max = (
        np.asarray(bound, dtype=float) for bound in (in_min, in_max, out_min, out_max)
    )

    with np.errstate(all="ignore"):
        return _finish((values - in_min) * (out_max - out_min) / (in_max - in_min) + out_min)
