from typing import Optional
from abc import ABC, abstractmethod

from ..custom_types import PRNG

__all__ = [
    "Distribution",
    "Univariate",
    "Continuous",
]


# -------------------------- Abstract Classes ----------------------------


class Distribution(ABC):
    """
    Abstract base class for probability distributions.

    This class defines the sampling interface shared by every distribution
    in probdist. Statistical summaries and densities live in the
    :class:`Univariate` and :class:`Continuous` capability sets, so generic
    code can depend on exactly the capabilities it uses.
    """

    @abstractmethod
    def sample(self, rng: Optional[PRNG] = None) -> float:
        """
        Draws a single variate from the distribution.

        Args:
            rng: Random number generator consumed by the draw. If ``None``,
                a default generator is created.

        Returns:
            float: One draw from the distribution.
        """
        raise NotImplementedError


class Univariate(Distribution):
    """
    Abstract base class for distributions over the real line.

    Subclasses provide closed-form moments, entropy and the cumulative
    distribution function. A summary that has no closed form for a given
    family may raise ``NotImplementedError``.
    """

    @abstractmethod
    def mean(self) -> float:
        """Returns the mean E[X]."""
        raise NotImplementedError

    @abstractmethod
    def variance(self) -> float:
        """Returns the variance Var[X]."""
        raise NotImplementedError

    @abstractmethod
    def std_dev(self) -> float:
        """Returns the standard deviation sqrt(Var[X])."""
        raise NotImplementedError

    @abstractmethod
    def entropy(self) -> float:
        """Returns the differential entropy in nats."""
        raise NotImplementedError

    @abstractmethod
    def skewness(self) -> float:
        """Returns the skewness E[((X - mu) / sigma)^3]."""
        raise NotImplementedError

    @abstractmethod
    def median(self) -> float:
        """Returns the median.

        Raises:
            NotImplementedError: If the family has no implemented median.
        """
        raise NotImplementedError

    @abstractmethod
    def cdf(self, x: float) -> float:
        """
        Evaluates the cumulative distribution function P[X <= x].

        Args:
            x: Point at which to evaluate the CDF.

        Returns:
            float: CDF value in [0, 1].
        """
        raise NotImplementedError


class Continuous(ABC):
    """
    Abstract capability set for continuous distributions.

    Covers the support bounds, the mode and the density. Densities are
    evaluated pointwise; ``ln_pdf`` is expected to stay finite where
    ``pdf`` would underflow.
    """

    @abstractmethod
    def mode(self) -> float:
        """Returns the mode (the density's argmax)."""
        raise NotImplementedError

    @abstractmethod
    def min(self) -> float:
        """Returns the lower bound of the support."""
        raise NotImplementedError

    @abstractmethod
    def max(self) -> float:
        """Returns the upper bound of the support."""
        raise NotImplementedError

    @abstractmethod
    def pdf(self, x: float) -> float:
        """
        Evaluates the probability density function at ``x``.

        Args:
            x: Point at which to evaluate the density.

        Returns:
            float: Density value p(x).
        """
        raise NotImplementedError

    @abstractmethod
    def ln_pdf(self, x: float) -> float:
        """
        Evaluates the natural logarithm of the density at ``x``.

        Args:
            x: Point at which to evaluate the log-density.

        Returns:
            float: Log-density value log p(x).
        """
        raise NotImplementedError
