import time
import numpy as np

from .layers import Layer
from .loss.SquaredErrorLoss import SquaredErrorLoss
from .helpers.logger import RunLogger
from .helpers.Backend import backend


class SeqNet:
    """
    A fixed, ordered sequence of layers trained one example at a time.

    feed_forward() is inference only. back_propagate() runs the cached
    forward pass, walks the layers in reverse collecting each layer's
    parameter gradient, and hands the list to an optimizer's update().
    Parameters change only when the optimizer's step() is called.
    """
    def __init__(self, layers):
        layers = tuple(layers)
        if len(layers) == 0:
            raise ValueError("SeqNet needs at least one layer")
        for i, layer in enumerate(layers):
            if not isinstance(layer, Layer):
                raise ValueError(f"Layer {i} is not a Layer: {layer!r}")
        for prev, nxt in zip(layers, layers[1:]):
            if prev.out_features != nxt.in_features:
                raise ValueError(
                    f"{prev!r} outputs {prev.out_features} values but {nxt!r} expects {nxt.in_features}"
                )
        self.layers = layers
        self.loss_fn = SquaredErrorLoss()
        self.last_loss = None  # 0.5 * squared error of the last back_propagate() example

    def __call__(self, x):
        return self.feed_forward(x)

    @property
    def in_features(self):
        return self.layers[0].in_features

    @property
    def out_features(self):
        return self.layers[-1].out_features

    def feed_forward(self, x):
        x = backend.ensure_array(x)
        for layer in self.layers:
            x = layer.feed_forward(x)
        return x

    def training_forward(self, x):
        x = backend.ensure_array(x)
        for layer in self.layers:
            x = layer.cached_feed_forward(x)
        return x

    def back_propagate(self, x, expected, optimizer=None):
        """
        Computes one example's per-layer parameter gradients for the
        squared-error loss and passes them to optimizer.update() when an
        optimizer is given. Returns the gradients, one vector per layer.
        """
        expected = backend.ensure_array(expected)
        if expected.ndim != 1 or expected.shape[0] != self.out_features:
            raise ValueError(
                f"Expected output of length {self.out_features}, got shape {tuple(expected.shape)}"
            )
        prediction = self.training_forward(x)
        self.last_loss = self.loss_fn.forward(prediction, expected)
        error = self.loss_fn.backward()

        grads = [None] * len(self.layers)
        for i in range(len(self.layers) - 1, 0, -1):
            grads[i] = self.layers[i].gradient_for(error)
            error = self.layers[i].backward(error)
        grads[0] = self.layers[0].gradient_for(error)

        if optimizer is not None:
            optimizer.update(grads)
        return grads

    def total_error(self, inputs, outputs):
        """Sum over examples of the summed squared output differences."""
        if len(inputs) != len(outputs):
            raise ValueError(f"Got {len(inputs)} inputs but {len(outputs)} outputs")
        total = 0.0
        for x, y in zip(inputs, outputs):
            diff = self.feed_forward(x) - backend.ensure_array(y)
            total += float(backend.to_cpu(backend.sum(diff * diff)))
        return total

    def num_params(self):
        return [layer.num_params() for layer in self.layers]

    def clear_cache(self):
        for layer in self.layers:
            layer.clear_cache()

    def fit(
        self,
        inputs,
        outputs,
        optimizer,
        iterations,
        batch_size=1,
        rng=None,
        seed=None,
        verbose=1,
        log_every=None,
        tag="run",
        runs_root=None,
    ):
        """
        Each iteration samples batch_size examples uniformly at random,
        back-propagates each into the optimizer, then takes one step.
        There is no convergence criterion; it always runs `iterations`.
        """
        if len(inputs) == 0 or len(inputs) != len(outputs):
            raise ValueError(f"Got {len(inputs)} inputs but {len(outputs)} outputs")
        if iterations <= 0 or batch_size <= 0:
            raise ValueError(f"iterations and batch_size must be positive, got {iterations}, {batch_size}")
        if rng is None:
            rng = np.random.default_rng(seed)
        if log_every is None:
            log_every = max(1, iterations // 10)
        if log_every <= 0:
            raise ValueError(f"log_every must be positive, got {log_every}")

        logger = RunLogger(root=runs_root, tag=tag) if runs_root is not None else None
        history = {"iteration": [], "loss": []}
        n = len(inputs)

        if verbose > 0:
            print(f"Starting training for {iterations} iterations...")
        t0 = time.time()
        for it in range(1, iterations + 1):
            for idx in rng.integers(0, n, size=batch_size):
                self.back_propagate(inputs[idx], outputs[idx], optimizer)
            optimizer.step(self)

            if it % log_every == 0 or it == 1 or it == iterations:
                loss = self.total_error(inputs, outputs)
                history["iteration"].append(it)
                history["loss"].append(loss)
                if logger is not None:
                    logger.log_iteration(it, loss=loss, time_s=time.time() - t0)
                if verbose > 0:
                    print(f"Iteration {it}/{iterations} - loss: {loss:.4f}")

        history["time_s"] = time.time() - t0
        if logger is not None:
            logger.save_json(time_s=history["time_s"], iterations=iterations)
            logger.plot_loss(history, tag=tag)
        return history

    def __repr__(self):
        inner = ", ".join(repr(layer) for layer in self.layers)
        return f"SeqNet([{inner}])"
