from .Optimizer import Optimizer


class SGDOptimizer(Optimizer):
    def __init__(self, net, lr=1e-2):
        super().__init__(net, lr)

    def _accumulate(self, acc, g):
        # running sum is already scaled, step() applies it as-is
        acc += self.lr * g

    def _compute_step(self, i, grad):
        return grad
