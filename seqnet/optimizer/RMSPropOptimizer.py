from .Optimizer import Optimizer
from ..helpers.Backend import backend


class RMSPropOptimizer(Optimizer):
    def __init__(self, net, lr=1e-3, beta=0.999, eps=1e-8):
        super().__init__(net, lr)
        if not 0.0 <= beta < 1.0:
            raise ValueError(f"Beta must be in [0, 1), got {beta}")
        self.beta = beta
        self.eps = eps
        # running average of squared gradients, persists across steps
        self.avg_sq = [backend.zeros(n) for n in self.shapes]

    def _compute_step(self, i, grad):
        s = self.avg_sq[i]
        s[...] = self.beta * s + (1.0 - self.beta) * (grad * grad)
        # eps keeps untouched parameters (s == 0) at a zero step
        return grad / (backend.sqrt(s) + self.eps) * self.lr
