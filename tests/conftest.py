import pytest
import numpy as np
from probdist.distributions.chi import Chi

@pytest.fixture
def rng():
    return np.random.default_rng(42)

@pytest.fixture
def chi3():
    return Chi(3.0)

@pytest.fixture
def chi_inf():
    return Chi(np.inf)

@pytest.fixture
def freedoms():
    return [0.5, 1.0, 2.0, 2.5, 3.0, 10.0, 50.0, 150.0]
