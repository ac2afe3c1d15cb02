import numpy as np
import pytest

from seqnet import (
    SeqNet,
    Dense,
    Bias,
    Activation,
    ReLU,
    SGDOptimizer,
    MomentumOptimizer,
    RMSPropOptimizer,
)

OPTIMIZERS = [
    lambda net: SGDOptimizer(net, lr=0.1),
    lambda net: MomentumOptimizer(net, lr=0.1, momentum=0.9),
    lambda net: MomentumOptimizer(net, lr=0.1, momentum=0.9, legacy_blend=True),
    lambda net: RMSPropOptimizer(net, lr=0.1, beta=0.9),
]

GRADS = [np.array([1.0, -2.0]), np.array([0.5]), np.array([])]


@pytest.fixture
def net():
    return SeqNet([Dense(2, 1, [1.0, 2.0]), Bias(1, [0.5]), Activation(1, ReLU())])


def params_of(net):
    return [layer.params().copy() for layer in net.layers]


class TestSGD:
    def test_single_update_is_plain_descent(self, net):
        opt = SGDOptimizer(net, lr=0.1)
        opt.update(GRADS)
        opt.step(net)
        np.testing.assert_allclose(net.layers[0].params(), [0.9, 2.2])
        np.testing.assert_allclose(net.layers[1].params(), [0.45])

    def test_updates_are_summed_into_one_step(self, net):
        opt = SGDOptimizer(net, lr=0.1)
        opt.update(GRADS)
        opt.update(GRADS)
        opt.step(net)
        np.testing.assert_allclose(net.layers[0].params(), [0.8, 2.4])
        np.testing.assert_allclose(net.layers[1].params(), [0.4])

    def test_gradient_is_scaled_at_update_time(self, net):
        opt = SGDOptimizer(net, lr=0.1)
        opt.update(GRADS)
        opt.lr = 1.0
        opt.step(net)
        np.testing.assert_allclose(net.layers[1].params(), [0.45])


class TestMomentum:
    def test_velocity_carries_over(self, net):
        lr, m = 0.1, 0.5
        opt = MomentumOptimizer(net, lr=lr, momentum=m)
        g = GRADS[0]
        v1 = lr * g
        v2 = m * v1 + lr * g
        opt.update(GRADS)
        opt.step(net)
        np.testing.assert_allclose(net.layers[0].params(), np.array([1.0, 2.0]) - v1)
        opt.update(GRADS)
        opt.step(net)
        np.testing.assert_allclose(net.layers[0].params(), np.array([1.0, 2.0]) - v1 - v2)

    def test_legacy_blend(self, net):
        lr, m = 0.1, 0.5
        opt = MomentumOptimizer(net, lr=lr, momentum=m, legacy_blend=True)
        g = GRADS[1]
        v1 = g * (1 - m) * lr
        v2 = v1 * m * lr + g * (1 - m) * lr
        for _ in range(2):
            opt.update(GRADS)
            opt.step(net)
        np.testing.assert_allclose(net.layers[1].params(), np.array([0.5]) - v1 - v2)

    def test_update_accumulates_raw_gradient(self, net):
        opt = MomentumOptimizer(net, lr=0.1, momentum=0.5)
        opt.update(GRADS)
        opt.update(GRADS)
        np.testing.assert_allclose(opt.grads[0], 2 * GRADS[0])

    @pytest.mark.parametrize("momentum", [-0.1, 1.0])
    def test_rejects_bad_momentum(self, net, momentum):
        with pytest.raises(ValueError):
            MomentumOptimizer(net, momentum=momentum)


class TestRMSProp:
    def test_single_step(self, net):
        lr, beta, eps = 0.1, 0.9, 1e-8
        opt = RMSPropOptimizer(net, lr=lr, beta=beta, eps=eps)
        opt.update(GRADS)
        opt.step(net)
        g = GRADS[0]
        avg_sq = (1 - beta) * g * g
        np.testing.assert_allclose(opt.avg_sq[0], avg_sq)
        expected = np.array([1.0, 2.0]) - g / (np.sqrt(avg_sq) + eps) * lr
        np.testing.assert_allclose(net.layers[0].params(), expected)

    def test_running_average_persists(self, net):
        beta = 0.9
        opt = RMSPropOptimizer(net, lr=0.1, beta=beta)
        for _ in range(2):
            opt.update(GRADS)
            opt.step(net)
        g = GRADS[1]
        np.testing.assert_allclose(opt.avg_sq[1], beta * (1 - beta) * g * g + (1 - beta) * g * g)

    def test_untouched_parameter_stays_put(self, net):
        opt = RMSPropOptimizer(net, lr=0.1)
        opt.update([np.array([0.0, 1.0]), np.array([0.0]), np.array([])])
        opt.step(net)
        assert net.layers[0].params()[0] == 1.0
        assert net.layers[1].params()[0] == 0.5
        assert np.all(np.isfinite(net.layers[0].params()))

    @pytest.mark.parametrize("beta", [-0.5, 1.0])
    def test_rejects_bad_beta(self, net, beta):
        with pytest.raises(ValueError):
            RMSPropOptimizer(net, beta=beta)


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_update_does_not_touch_parameters(net, make):
    opt = make(net)
    before = params_of(net)
    opt.update(GRADS)
    for p, layer in zip(before, net.layers):
        np.testing.assert_array_equal(layer.params(), p)


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_step_without_update_is_a_no_op(net, make):
    opt = make(net)
    opt.step(net)
    fresh = params_of(net)
    for p, layer in zip(fresh, net.layers):
        np.testing.assert_array_equal(layer.params(), p)

    # also after history has built up
    opt.update(GRADS)
    opt.step(net)
    after_one = params_of(net)
    opt.step(net)
    opt.step(net)
    for p, layer in zip(after_one, net.layers):
        np.testing.assert_array_equal(layer.params(), p)


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_step_clears_accumulators(net, make):
    opt = make(net)
    opt.update(GRADS)
    opt.step(net)
    assert opt.pending == 0
    for g in opt.grads:
        assert not np.any(g)


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_zero_grad_discards_pending_updates(net, make):
    opt = make(net)
    before = params_of(net)
    opt.update(GRADS)
    opt.zero_grad()
    opt.step(net)
    for p, layer in zip(before, net.layers):
        np.testing.assert_array_equal(layer.params(), p)


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_accumulators_match_layer_sizes(net, make):
    opt = make(net)
    assert opt.shapes == [2, 1, 0]
    assert [g.shape[0] for g in opt.grads] == [2, 1, 0]


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_rejects_misshaped_gradients(net, make):
    opt = make(net)
    with pytest.raises(ValueError, match="layers"):
        opt.update(GRADS[:2])
    with pytest.raises(ValueError, match="Layer 0"):
        opt.update([np.zeros(3), np.zeros(1), np.zeros(0)])
    assert opt.pending == 0


@pytest.mark.parametrize("make", OPTIMIZERS)
def test_rejects_differently_shaped_network(net, make):
    opt = make(net)
    other = SeqNet([Dense(3, 1), Bias(1), Activation(1, ReLU())])
    with pytest.raises(ValueError, match="parameter counts"):
        opt.step(other)


@pytest.mark.parametrize("lr", [0.0, -1e-3])
def test_rejects_non_positive_learning_rate(net, lr):
    with pytest.raises(ValueError):
        SGDOptimizer(net, lr=lr)
