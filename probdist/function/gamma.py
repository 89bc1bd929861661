"""Gamma-family special functions.

Scalar wrappers over :mod:`scipy.special` that return Python floats and
report domain violations as :class:`~probdist.errors.DomainError` instead
of silently returning NaN.
"""
import logging
import math

import scipy.special as sps

from ..core._utils import _as_real
from ..errors import DomainError

__all__ = [
    "gamma",
    "ln_gamma",
    "digamma",
    "gamma_lr",
]

logger = logging.getLogger(__name__)


def _domain_error(function: str, argument: str, value: float, reason: str) -> DomainError:
    logger.debug("%s rejected %s=%r: %s", function, argument, value, reason)
    return DomainError(function, argument, value, reason)


def gamma(x: float) -> float:
    """Gamma function Γ(x).

    Poles (zero and negative integers) and overflow follow SciPy's
    conventions (``inf`` / ``nan``); this function never raises.
    """
    return float(sps.gamma(_as_real(x)))


def ln_gamma(x: float) -> float:
    """Natural logarithm of the absolute value of the gamma function."""
    return float(sps.gammaln(_as_real(x)))


def digamma(x: float) -> float:
    """Digamma function ψ(x) = d/dx ln Γ(x).

    Args:
        x: Evaluation point.

    Returns:
        float: ψ(x). NaN input yields NaN.

    Raises:
        DomainError: If ``x`` is zero, a negative integer or ``-inf``.
    """
    x = _as_real(x)
    if math.isnan(x):
        return math.nan
    if x <= 0.0 and (math.isinf(x) or x == math.floor(x)):
        raise _domain_error("digamma", "x", x, "is a pole of the digamma function")
    return float(sps.psi(x))


def gamma_lr(a: float, x: float) -> float:
    """Regularized lower incomplete gamma function P(a, x).

    ``P(a, x) = γ(a, x) / Γ(a)``, the CDF of a Gamma(a, 1) variate at ``x``.

    Args:
        a: Shape, must satisfy ``0 < a < inf``.
        x: Upper integration limit, must satisfy ``x >= 0``.

    Returns:
        float: Value in [0, 1]. NaN in either argument yields NaN;
        ``x == inf`` yields 1.0.

    Raises:
        DomainError: If ``a`` is not in (0, inf) or ``x`` is negative.
    """
    a = _as_real(a, "a")
    x = _as_real(x, "x")
    if math.isnan(a) or math.isnan(x):
        return math.nan
    if a <= 0.0 or math.isinf(a):
        raise _domain_error("gamma_lr", "a", a, "must lie in (0, inf)")
    if x < 0.0:
        raise _domain_error("gamma_lr", "x", x, "must be >= 0")
    if math.isinf(x):
        return 1.0
    if x == 0.0:
        return 0.0
    return float(sps.gammainc(a, x))
