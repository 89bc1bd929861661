# custom_types.py
"""
Scalar type aliases shared across probdist.

All distributions in this package are univariate and evaluated one point
at a time, so the public signatures use plain ``float`` for values and
``PRNG`` for the randomness source consumed by ``sample``.
"""
from __future__ import annotations
from typing import TypeAlias, Union
from numpy.random import Generator as NumpyRNG

from numpy import floating as NumpyFloating

Real: TypeAlias = Union[float, int, NumpyFloating]
PRNG: TypeAlias = NumpyRNG
