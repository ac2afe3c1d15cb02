from .Layer import Layer
from ..helpers.Backend import backend


class Activation(Layer):
    """Elementwise nonlinearity; no trainable parameters."""

    def __init__(self, out_features, function):
        super().__init__()
        if out_features <= 0:
            raise ValueError(f"Activation size must be positive, got {out_features}")
        self.in_features = out_features
        self.out_features = out_features
        self.function = function
        self.derivative = backend.zeros(out_features)  # f'(pre-activation), cache for backward

    def feed_forward(self, x):
        x = self._check_vector(x, self.in_features, "input")
        return self.function.out(x)

    def cached_feed_forward(self, x):
        x = self._check_vector(x, self.in_features, "input")
        out, self.derivative[...] = self.function.d_out(x)
        self._mark_cached()
        return out

    def backward(self, error):
        self._require_cache("backward")
        error = self._check_vector(error, self.out_features, "error")
        return error * self.derivative

    def gradient_for(self, error):
        self._require_cache("gradient_for")
        self._check_vector(error, self.out_features, "error")
        return backend.zeros(0)

    def __repr__(self):
        return f"Activation({self.out_features}, {self.function!r})"
