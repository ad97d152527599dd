"""
Random helpers for procedural generation.

This module provides two sampling primitives built on numpy's Generator API:
  - random_sign: a fair coin returning -1 or 1
  - random_range: a uniform draw on [min, max), optionally bent by an exponent

**Generators and threads**: every function accepts an explicit `rng`
(a `numpy.random.Generator`). When omitted, a module-level default generator
is used, seeded from `MATHCUSTOM_SEED` if set. numpy generators are not
thread-safe, so concurrent callers should each pass their own generator
(e.g. one `np.random.default_rng(seed)` per thread or task).
"""

import logging
from typing import Optional, Union

import numpy as np
from scipy import stats

from mathcustom.config.settings import get_settings
from mathcustom.core.math import _is_absent

logger = logging.getLogger(__name__)

_default_rng: Optional[np.random.Generator] = None


def get_default_rng() -> np.random.Generator:
    """
    Return the module-level default generator, creating it on first use.

    The generator is seeded from `Settings.random.seed`; with no seed
    configured it draws entropy from the OS.

    Returns:
        The shared default numpy Generator.
    """
    global _default_rng

    if _default_rng is None:
        seed = get_settings().random.seed
        _default_rng = np.random.default_rng(seed)
        logger.debug("Created default random generator (seed=%s)", seed)

    return _default_rng


def seed_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Replace the default generator with a freshly seeded one.

    Args:
        seed: Seed for the new generator, or None for OS entropy.

    Returns:
        The new default generator.
    """
    global _default_rng

    _default_rng = np.random.default_rng(seed)
    logger.debug("Reseeded default random generator (seed=%s)", seed)
    return _default_rng


def _resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else get_default_rng()


def random_sign(
    rng: Optional[np.random.Generator] = None,
    size: Optional[Union[int, tuple]] = None,
) -> Union[int, np.ndarray]:
    """
    Return -1 or 1 with equal probability.

    **Mathematical**: Draw u ~ Uniform[0, 1); return -1 if u < 0.5 else 1.

    Args:
        rng: Generator to draw from (default: module-level generator).
        size: Optional output shape for multiple independent draws.

    Returns:
        An int (-1 or 1) when `size` is None, otherwise an int array of signs.
    """
    draws = _resolve(rng).random(size)
    signs = np.where(draws < 0.5, -1, 1)

    if size is None:
        return int(signs)
    return signs


def random_range(
    min_value: float,
    max_value: float,
    exp: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    size: Optional[Union[int, tuple]] = None,
) -> Union[float, np.ndarray]:
    """
    Draw a random number in [min_value, max_value), optionally weighted by an exponent.

    **Conceptual**: With no exponent this is a plain uniform draw. With an
    exponent, the uniform draw u is raised to that power before scaling,
    which bends the distribution:
      - exp > 1: samples cluster toward min_value
      - 0 < exp < 1: samples cluster toward max_value

    **Mathematical**:
        u ~ Uniform[0, 1)
        x = u ** exp * (max_value - min_value) + min_value    (exp given)
        x = u * (max_value - min_value) + min_value            (otherwise)

    **Functionally**:
    - `exp` follows a falsy policy: None, 0 and NaN all mean "no exponent".
    - No check that min_value < max_value; reversed bounds simply flip the
      range to (max_value, min_value].
    - Negative exponents are allowed; u == 0 then maps to inf.

    Args:
        min_value: Lower bound of the range.
        max_value: Upper bound of the range.
        exp: Optional exponent shaping the distribution.
        rng: Generator to draw from (default: module-level generator).
        size: Optional output shape for multiple independent draws.

    Returns:
        A float when `size` is None, otherwise a float array.
    """
    draws = _resolve(rng).random(size)

    with np.errstate(all="ignore"):
        if not _is_absent(exp):
            draws = np.power(draws, exp)
        samples = draws * (max_value - min_value) + min_value

    if size is None:
        return float(samples)
    return samples


def random_range_distribution(
    min_value: float,
    max_value: float,
    exp: Optional[float] = None,
):
    """
    Return the scipy distribution that `random_range` samples from.

    **Mathematical**: For u ~ Uniform[0, 1) and k > 0, the variable u ** k has
    CDF P(u ** k <= x) = x ** (1/k), which is the Beta(1/k, 1) distribution.
    Shifting by min_value and scaling by (max_value - min_value) gives the
    distribution of `random_range(min_value, max_value, k)`. Without an
    exponent the distribution is uniform on [min_value, max_value).

    Useful for checking sampled output (e.g. a KS test) or for computing
    expected values without sampling:

        >>> random_range_distribution(0, 10, 2).mean()
        3.333...

    Args:
        min_value: Lower bound of the range.
        max_value: Upper bound of the range (must exceed min_value).
        exp: Optional positive exponent (same falsy policy as `random_range`).

    Returns:
        A frozen scipy.stats distribution.

    Raises:
        ValueError: If max_value <= min_value or exp is negative.
    """
    scale = max_value - min_value
    if not scale > 0:
        raise ValueError(
            f"max_value must be greater than min_value, got min={min_value}, max={max_value}"
        )

    if not _is_absent(exp):
        if not exp > 0:
            raise ValueError(f"exp must be positive to describe a distribution, got: {exp}")
        return stats.beta(1.0 / exp, 1.0, loc=min_value, scale=scale)

    return stats.uniform(loc=min_value, scale=scale)
