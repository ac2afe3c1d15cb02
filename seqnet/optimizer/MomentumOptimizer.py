from .Optimizer import Optimizer
from ..helpers.Backend import backend


class MomentumOptimizer(Optimizer):
    """
    Gradient descent with a velocity that persists across steps:

        v = momentum * v + lr * g
        param -= v

    legacy_blend=True reproduces the older blended form
    v = v * momentum * lr + g * (1 - momentum) * lr instead.
    """
    def __init__(self, net, lr=1e-2, momentum=0.9, legacy_blend=False):
        super().__init__(net, lr)
        if not 0.0 <= momentum < 1.0:
            raise ValueError(f"Momentum must be in [0, 1), got {momentum}")
        self.momentum = momentum
        self.legacy_blend = legacy_blend
        self.velocities = [backend.zeros(n) for n in self.shapes]

    def _compute_step(self, i, grad):
        v = self.velocities[i]
        if self.legacy_blend:
            v[...] = v * self.momentum * self.lr + grad * (1.0 - self.momentum) * self.lr
        else:
            v[...] = self.momentum * v + self.lr * grad
        return v
