import logging
import math
from typing import Optional

import numpy as np

from ..core._utils import _as_real, _as_generator, _is_pos_inf
from ..core.distributions import Univariate, Continuous
from ..custom_types import PRNG, Real
from ..errors import BadParamsError, PreconditionError
from ..function import gamma as _gamma
from . import normal

__all__ = ["Chi", "LOG_DENSITY_CUTOVER"]

logger = logging.getLogger(__name__)

# Above this many degrees of freedom the direct density formula loses
# precision (x^(k-1) and Γ(k/2) overflow), so pdf is taken as exp(ln_pdf).
LOG_DENSITY_CUTOVER = 160.0


class Chi(Univariate, Continuous):
    """Chi distribution with ``k`` degrees of freedom.

    The distribution of the Euclidean norm of ``k`` independent standard
    normal variates, supported on [0, inf). Moments and densities are
    evaluated in closed form through :mod:`probdist.function.gamma`.

    Instances are immutable values: two ``Chi`` objects with the same
    ``freedom`` compare equal and hash alike.

    Numerical policy:
        - ``freedom == inf`` is accepted as a limiting parameter; the
          density is 0 everywhere and the CDF is 1 everywhere.
        - For ``freedom > LOG_DENSITY_CUTOVER`` the density is computed in
          the log domain and exponentiated.
        - Moments follow IEEE semantics and may be ``nan`` / ``inf`` once
          Γ(k/2) overflows (``freedom`` above roughly 340).

    Attributes:
        _freedom: Degrees of freedom, > 0.
    """

    def __init__(self, freedom: Real):
        """Initializes a Chi distribution.

        Args:
            freedom: Degrees of freedom, must be > 0. ``inf`` is allowed.

        Raises:
            BadParamsError: If ``freedom`` is NaN or not positive.
        """
        k = _as_real(freedom, "freedom")
        if math.isnan(k) or k <= 0.0:
            logger.debug("rejecting Chi parameters: freedom=%r", freedom)
            raise BadParamsError(f"freedom must be > 0, got {freedom!r}")
        self._freedom = k

    @property
    def freedom(self) -> float:
        """float: Degrees of freedom as passed to the constructor."""
        return self._freedom

    def __repr__(self) -> str:
        return f"Chi(freedom={self._freedom!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chi):
            return NotImplemented
        return self._freedom == other._freedom

    def __hash__(self) -> int:
        return hash((Chi, self._freedom))

    # ------------------------ Distribution ------------------------

    def sample(self, rng: Optional[PRNG] = None) -> float:
        """Draws one Chi variate.

        Sums ``floor(freedom)`` squared standard-normal draws and takes the
        square root. For non-integer ``freedom`` the fractional part is
        ignored, so the draw is only exact for integer degrees of freedom.

        Args:
            rng: Generator consumed by the draw. If ``None``, a default
                generator is created.

        Returns:
            float: A non-negative draw; ``inf`` when ``freedom`` is infinite.
        """
        rng = _as_generator(rng)
        if _is_pos_inf(self._freedom):
            return math.inf
        total = 0.0
        for _ in range(int(self._freedom)):
            total += normal.sample_unchecked(rng, 0.0, 1.0) ** 2
        return math.sqrt(total)

    # ------------------------ Univariate ------------------------

    def mean(self) -> float:
        """Returns ``sqrt(2) * Γ((k+1)/2) / Γ(k/2)``."""
        k = self._freedom
        with np.errstate(all="ignore"):
            return float(np.sqrt(2.0) * _gamma.gamma((k + 1.0) / 2.0) / _gamma.gamma(k / 2.0))

    def variance(self) -> float:
        """Returns ``k - mean()^2``."""
        m = self.mean()
        return self._freedom - m * m

    def std_dev(self) -> float:
        with np.errstate(all="ignore"):
            return float(np.sqrt(self.variance()))

    def entropy(self) -> float:
        """Returns the differential entropy.

        ``ln Γ(k/2) + (k - ln 2 - (k - 1) ψ(k/2)) / 2``

        Raises:
            DomainError: Propagated from :func:`~probdist.function.gamma.digamma`.
        """
        k = self._freedom
        return _gamma.ln_gamma(k / 2.0) + (
            k - math.log(2.0) - (k - 1.0) * _gamma.digamma(k / 2.0)
        ) / 2.0

    def skewness(self) -> float:
        """Returns ``mean() * (1 - 2σ²) / σ³`` with σ = ``std_dev()``.

        A zero standard deviation is not guarded and yields ``inf`` / ``nan``.
        """
        sigma = np.float64(self.std_dev())
        with np.errstate(all="ignore"):
            return float(self.mean() * (1.0 - 2.0 * sigma * sigma) / (sigma * sigma * sigma))

    def median(self) -> float:
        """Not implemented; the Chi median has no closed form here.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError("Median is not implemented for the Chi distribution.")

    def cdf(self, x: Real) -> float:
        """Evaluates P[X <= x] = P(k/2, x²/2).

        Args:
            x: Evaluation point.

        Returns:
            float: 1.0 when ``x`` or ``freedom`` is ``inf``; 0.0 for
            negative ``x``; otherwise the regularized lower incomplete gamma
            function at ``(k/2, x²/2)``.

        Raises:
            DomainError: Propagated from :func:`~probdist.function.gamma.gamma_lr`.
        """
        x = _as_real(x)
        if _is_pos_inf(x) or _is_pos_inf(self._freedom):
            return 1.0
        if x < 0.0:
            return 0.0
        return _gamma.gamma_lr(self._freedom / 2.0, x * x / 2.0)

    # ------------------------ Continuous ------------------------

    def mode(self) -> float:
        """Returns ``sqrt(k - 1)``.

        Raises:
            PreconditionError: If ``freedom < 1``.
        """
        if self._freedom < 1.0:
            raise PreconditionError("Cannot calculate Chi distribution mode for freedom < 1")
        return math.sqrt(self._freedom - 1.0)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    def _outside_density(self, x: float) -> bool:
        # Points where the density is reported as exactly zero.
        return _is_pos_inf(self._freedom) or _is_pos_inf(x) or x <= 0.0

    def pdf(self, x: Real) -> float:
        """Evaluates the density.

        ``2^(1-k/2) x^(k-1) exp(-x²/2) / Γ(k/2)`` for ``k <= 160``, and
        ``exp(ln_pdf(x))`` above that.

        Args:
            x: Evaluation point.

        Returns:
            float: Density value; 0.0 at ``x <= 0``, ``x == inf`` or
            ``freedom == inf``.
        """
        x = _as_real(x)
        if self._outside_density(x):
            return 0.0
        k = self._freedom
        if k > LOG_DENSITY_CUTOVER:
            logger.debug("Chi(freedom=%r).pdf: evaluating in log domain", k)
            with np.errstate(all="ignore"):
                return float(np.exp(self.ln_pdf(x)))
        with np.errstate(all="ignore"):
            return float(
                np.power(2.0, 1.0 - k / 2.0)
                * np.power(x, k - 1.0)
                * np.exp(-x * x / 2.0)
                / _gamma.gamma(k / 2.0)
            )

    def ln_pdf(self, x: Real) -> float:
        """Evaluates the log-density.

        ``(1 - k/2) ln 2 + (k - 1) ln x - x²/2 - ln Γ(k/2)``

        Args:
            x: Evaluation point.

        Returns:
            float: Log-density value; ``-inf`` wherever :meth:`pdf` is 0.
        """
        x = _as_real(x)
        if self._outside_density(x):
            return -math.inf
        k = self._freedom
        with np.errstate(all="ignore"):
            return float(
                (1.0 - k / 2.0) * np.log(2.0)
                + (k - 1.0) * np.log(x)
                - x * x / 2.0
                - _gamma.ln_gamma(k / 2.0)
            )
