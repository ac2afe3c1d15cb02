import numpy as np
from .Layer import Layer
from ..helpers.Backend import backend


class Dense(Layer):
    def __init__(self, in_features, out_features, weights=None):
        # weights: flat row-major by output unit, W[o][i] = weights[o * in + i]
        # or an (out_features, in_features) matrix
        super().__init__()
        if in_features <= 0 or out_features <= 0:
            raise ValueError(f"Dense sizes must be positive, got ({in_features}, {out_features})")
        self.in_features = in_features
        self.out_features = out_features

        n = in_features * out_features
        if weights is None:
            self._params = backend.zeros(n)
        else:
            weights = backend.ensure_array(weights, copy=True)
            if weights.size != n or weights.ndim not in (1, 2) or (
                weights.ndim == 2 and weights.shape != (out_features, in_features)
            ):
                raise ValueError(
                    f"{self!r} expected {n} weights, got shape {tuple(weights.shape)}"
                )
            self._params = backend.reshape(weights, (n,))
        # (out, in) view onto the flat parameter vector
        self.weights = backend.reshape(self._params, (out_features, in_features))
        self.x = backend.zeros(in_features)  # last input, cache for backward

    @classmethod
    def random(cls, in_features, out_features, low=-0.1, high=0.1, rng=None):
        if low >= high:
            raise ValueError(f"Empty init range [{low}, {high})")
        if rng is None:
            rng = np.random.default_rng()
        return cls(in_features, out_features, rng.uniform(low, high, in_features * out_features))

    def feed_forward(self, x):
        # x shape: (in,)
        # return: (out,)
        x = self._check_vector(x, self.in_features, "input")
        return backend.matmul(self.weights, x)

    def cached_feed_forward(self, x):
        x = self._check_vector(x, self.in_features, "input")
        self.x[...] = x
        self._mark_cached()
        return backend.matmul(self.weights, x)

    def backward(self, error):
        self._require_cache("backward")
        error = self._check_vector(error, self.out_features, "error")
        return backend.matmul(error, self.weights)  # (in,)

    def gradient_for(self, error):
        self._require_cache("gradient_for")
        error = self._check_vector(error, self.out_features, "error")
        # dW[o][i] = error[o] * x[i], flattened like the parameters
        return backend.reshape(backend.outer(error, self.x), (-1,))

    def params(self):
        return self._params
