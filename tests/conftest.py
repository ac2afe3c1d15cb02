import numpy as np
import pytest

from seqnet import SeqNet, Dense, Bias, Activation, ReLU, Sigmoid


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def linear_net():
    """Dense(2 -> 1) with weights [1, 2] followed by Bias [0.5]."""
    return SeqNet([Dense(2, 1, [1.0, 2.0]), Bias(1, [0.5])])


@pytest.fixture
def small_net(rng):
    return SeqNet([
        Dense.random(3, 4, -0.5, 0.5, rng=rng),
        Bias.random(4, -0.5, 0.5, rng=rng),
        Activation(4, ReLU()),
        Dense.random(4, 2, -0.5, 0.5, rng=rng),
        Bias.random(2, -0.5, 0.5, rng=rng),
        Activation(2, Sigmoid()),
    ])
