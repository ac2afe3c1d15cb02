from ..helpers.Backend import backend


class Optimizer:
    """
    Base for the decoupled update()/step() optimizers.

    update() folds one example's per-layer gradients into the accumulators
    and never touches the network; step() turns the accumulated state into
    one delta per layer, applies it, then clears the accumulators. Any
    number of update() calls may precede a step() (mini-batch).

    The optimizer snapshots the network's per-layer parameter counts at
    construction and refuses networks or gradients of any other shape.
    """
    def __init__(self, net, lr):
        if lr <= 0:
            raise ValueError(f"Learning rate must be positive, got {lr}")
        self.lr = lr
        self.shapes = list(net.num_params())
        self.grads = [backend.zeros(n) for n in self.shapes]  # reset every step
        self.pending = 0  # update() calls since the last step()

    def update(self, gradients):
        gradients = self._check_gradients(gradients)
        for acc, g in zip(self.grads, gradients):
            self._accumulate(acc, g)
        self.pending += 1

    def step(self, net):
        self._check_network(net)
        # nothing accumulated: leave parameters and history untouched
        if self.pending == 0:
            return
        for i, layer in enumerate(net.layers):
            if self.shapes[i]:
                layer.apply_step(self._compute_step(i, self.grads[i]))
        self.zero_grad()

    def zero_grad(self):
        for g in self.grads:
            g[...] = 0.0
        self.pending = 0

    # Subclasses override as needed
    def _accumulate(self, acc, g):
        acc += g

    def _compute_step(self, i, grad):
        raise NotImplementedError

    # ----- helpers -----
    def _check_gradients(self, gradients):
        if len(gradients) != len(self.shapes):
            raise ValueError(
                f"Expected gradients for {len(self.shapes)} layers, got {len(gradients)}"
            )
        checked = []
        for i, (g, n) in enumerate(zip(gradients, self.shapes)):
            g = backend.ensure_array(g)
            if g.ndim != 1 or g.shape[0] != n:
                raise ValueError(
                    f"Layer {i}: expected gradient of length {n}, got shape {tuple(g.shape)}"
                )
            checked.append(g)
        return checked

    def _check_network(self, net):
        shapes = list(net.num_params())
        if shapes != self.shapes:
            raise ValueError(
                f"{self.__class__.__name__} was built for parameter counts {self.shapes}, got {shapes}"
            )
