from ..custom_types import PRNG


def sample_unchecked(rng: PRNG, mean: float, std_dev: float) -> float:
    """Draws one N(mean, std_dev²) variate without validating parameters.

    Args:
        rng: Generator consumed by the draw.
        mean: Location of the normal distribution.
        std_dev: Scale of the normal distribution; assumed > 0.

    Returns:
        float: ``mean + std_dev * z`` with ``z`` standard normal.
    """
    return mean + std_dev * float(rng.standard_normal())
