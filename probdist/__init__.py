from probdist.core.distributions import Distribution, Univariate, Continuous
from probdist.distributions.chi import Chi
from probdist.errors import StatsError, BadParamsError, DomainError, PreconditionError

__all__ = [
    "Distribution",
    "Univariate",
    "Continuous",
    "Chi",
    "StatsError",
    "BadParamsError",
    "DomainError",
    "PreconditionError",
]
