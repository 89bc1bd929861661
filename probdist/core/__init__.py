from .distributions import Distribution, Univariate, Continuous
