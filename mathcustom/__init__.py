"""
mathcustom - small math helpers for procedural generation.

Subpackages:
  - core: angle conversion, truncation, log10, linear and curved range mapping
  - random: sign selection and weighted range sampling
  - util: frequency tallies
  - config: environment settings and logging setup

Every public operation is re-exported here:

    >>> from mathcustom import map_curved, random_range
    >>> map_curved(5, 0, 10, 0, 100, 2)
    25.0
"""

import logging

from mathcustom.core.curves import Curve, CurveFunction, Exponent, Invalid, as_curve, map_curved
from mathcustom.core.math import deg_to_rad, log10, map_range, rad_to_deg, truncate
from mathcustom.random.sampling import (
    get_default_rng,
    random_range,
    random_range_distribution,
    random_sign,
    seed_default_rng,
)
from mathcustom.util.frequency import distinct_counts, distinct_map

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Curve",
    "CurveFunction",
    "Exponent",
    "Invalid",
    "as_curve",
    "deg_to_rad",
    "distinct_counts",
    "distinct_map",
    "get_default_rng",
    "log10",
    "map_curved",
    "map_range",
    "rad_to_deg",
    "random_range",
    "random_range_distribution",
    "random_sign",
    "seed_default_rng",
    "truncate",
]
