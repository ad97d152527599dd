"""
Curved range mapping.

`map_curved` remaps a value through a shaping curve: the input is first
normalized to [0, 1] relative to the input range, pushed through either a
power function or a custom function, then scaled onto the output range.
This is the workhorse for procedural generation where a linear map feels
too uniform (e.g. easing, falloff, density curves).

The curve argument is an explicit variant:
  - Exponent(power): t' = t ** power
  - CurveFunction(func): t' = func(t)
  - Invalid(value): anything else; `map_curved` falls back to returning
    the original value unchanged instead of raising.

Raw numbers and callables are accepted too and classified with `as_curve`.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Union

import numpy as np
from numpy.typing import ArrayLike

from mathcustom.core.math import NumericResult, _as_numeric, _finish

logger = logging.getLogger(__name__)


def _power_as_float(power) -> float:
    """Convert an exponent to float, saturating integers too large for a double to ±inf."""
    try:
        return float(power)
    except OverflowError:
        return float("inf") if power > 0 else float("-inf")


def _curve_power(t, power: float):
    """
    Raise t to `power` with IEEE pow semantics for the non-finite cases.

    numpy follows C99 where 1 ** NaN == 1 and 1 ** inf == 1; here a NaN
    power always yields NaN and ±1 raised to an infinite power yields NaN.
    """
    if power != power:
        return t * np.nan

    shaped = np.power(t, power)
    if np.isinf(power):
        shaped = shaped + np.where(np.abs(t) == 1, np.nan, 0.0)
    return shaped


@dataclass(frozen=True)
class Exponent:
    """Polynomial curve: the normalized value is raised to `power`."""
    power: float


@dataclass(frozen=True)
class CurveFunction:
    """Custom curve: the normalized value is passed through `func`."""
    func: Callable[[Any], Any]


@dataclass(frozen=True)
class Invalid:
    """
    A curve argument that is neither a number nor a callable.

    Keeps the offending value around for debugging. `map_curved` treats it
    as "mapping failed" and returns the input value unchanged.
    """
    value: Any = None


Curve = Union[Exponent, CurveFunction, Invalid]


def as_curve(obj: Any) -> Curve:
    """
    Classify a raw curve argument into a Curve variant.

    - Existing variants are returned unchanged.
    - Real numbers (int, float, numpy scalars) become Exponent. `bool` is
      excluded: True/False are flags, not exponents.
    - Callables become CurveFunction.
    - Everything else (None, strings, lists, ...) becomes Invalid.

    Args:
        obj: The raw curve argument.

    Returns:
        The matching Curve variant.
    """
    if isinstance(obj, (Exponent, CurveFunction, Invalid)):
        return obj
    if isinstance(obj, numbers.Real) and not isinstance(obj, bool):
        return Exponent(obj)
    if callable(obj):
        return CurveFunction(obj)
    return Invalid(obj)


def map_curved(
    val: Any,
    in_min: ArrayLike,
    in_max: ArrayLike,
    out_min: ArrayLike,
    out_max: ArrayLike,
    curve: Any = None,
) -> Union[NumericResult, Any]:
    """
    Map a value from [in_min, in_max] onto [out_min, out_max] through a curve.

    **Mathematical**:
        t  = (val - in_min) / (in_max - in_min)
        t' = t ** power          (Exponent)
        t' = func(t)             (CurveFunction)
        out = t' * (out_max - out_min) + out_min

    An exponent of 1 reduces to `map_range`. Exponents above 1 bend the
    curve toward out_min (slow start), exponents between 0 and 1 bend it
    toward out_max (fast start).

    **Functionally**:
    - No clamping: values outside the input range give t outside [0, 1].
    - Scalar input hands the curve function a Python float; array-like
      input hands it a numpy array (or Series), so vectorized functions work.
    - An Invalid curve (including the default `None`) returns `val`
      unchanged. This fallback is intentional and never raises.

    **Edge cases**:
    - in_max == in_min makes t inf/NaN; the curve is still applied.
    - Fractional powers of a negative t give NaN rather than a complex number.
    - A NaN exponent gives NaN for every t (including t == 1), and an
      infinite exponent gives NaN at t == ±1.
    - Integer exponents too large for a float saturate to ±inf instead of
      raising OverflowError.

    Args:
        val: Value(s) to map.
        in_min: Lower bound of the input range.
        in_max: Upper bound of the input range.
        out_min: Lower bound of the output range.
        out_max: Upper bound of the output range.
        curve: Exponent, CurveFunction, a raw number or a raw callable.

    Returns:
        The curved, rescaled value(s), or `val` itself when the curve is invalid.
    """
    shape = as_curve(curve)
    if isinstance(shape, Invalid):
        logger.debug("map_curved: unsupported curve %r, returning input unchanged", shape.value)
        return val

    values = _as_numeric(val)
    in_min, in_max, out_min, out_max = (
        np.asarray(bound, dtype=float) for bound in (in_min, in_max, out_min, out_max)
    )

    with np.errstate(all="ignore"):
        t = _finish((values - in_min) / (in_max - in_min))

        if isinstance(shape, Exponent):
            shaped = _curve_power(t, _power_as_float(shape.power))
        else:
            shaped = shape.func(t)

        return _finish(_as_numeric(shaped) * (out_max - out_min) + out_min)
