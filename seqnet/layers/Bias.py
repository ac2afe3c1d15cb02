import numpy as np
from .Layer import Layer
from ..helpers.Backend import backend


class Bias(Layer):
    def __init__(self, out_features, bias=None):
        super().__init__()
        if out_features <= 0:
            raise ValueError(f"Bias size must be positive, got {out_features}")
        self.in_features = out_features
        self.out_features = out_features
        if bias is None:
            self.bias = backend.zeros(out_features)
        else:
            self.bias = self._check_vector(backend.ensure_array(bias, copy=True), out_features, "bias")

    @classmethod
    def random(cls, out_features, low=0.0, high=0.1, rng=None):
        if low >= high:
            raise ValueError(f"Empty init range [{low}, {high})")
        if rng is None:
            rng = np.random.default_rng()
        return cls(out_features, rng.uniform(low, high, out_features))

    def feed_forward(self, x):
        x = self._check_vector(x, self.in_features, "input")
        return x + self.bias

    def cached_feed_forward(self, x):
        # nothing to remember beyond the ready flag
        out = self.feed_forward(x)
        self._mark_cached()
        return out

    def backward(self, error):
        self._require_cache("backward")
        return self._check_vector(error, self.out_features, "error").copy()

    def gradient_for(self, error):
        self._require_cache("gradient_for")
        return self._check_vector(error, self.out_features, "error").copy()

    def params(self):
        return self.bias

    def __repr__(self):
        return f"Bias({self.out_features})"
