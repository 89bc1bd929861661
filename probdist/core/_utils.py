import math
from typing import Optional

import numpy as np

from ..custom_types import PRNG, Real


def _as_real(x: Real, name: str = "x") -> float:
    """Converts a real scalar to a Python float.

    Accepts Python numbers, NumPy scalars and 0-d arrays. Arrays with more
    than one element are rejected because every evaluation in probdist is
    pointwise.

    Args:
        x: Scalar value.
        name: Argument name used in the error message.

    Returns:
        float: ``x`` as a Python float (NaN and infinities preserved).

    Raises:
        TypeError: If ``x`` is not a real scalar.
    """
    arr = np.asarray(x)
    if arr.ndim != 0:
        raise TypeError(f"{name} must be a real scalar, got shape {arr.shape!r}.")
    if np.iscomplexobj(arr):
        raise TypeError(f"{name} must be real, got {x!r}.")
    return float(arr)


def _as_generator(rng: Optional[PRNG]) -> PRNG:
    """Returns ``rng``, or a freshly seeded default generator when ``None``."""
    return rng or np.random.default_rng()


def _is_pos_inf(x: float) -> bool:
    return math.isinf(x) and x > 0.0
