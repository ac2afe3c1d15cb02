from ..helpers.Backend import backend


class Layer:
    """
    Base of the closed layer set {Dense, Bias, Activation}.

    Every layer maps a vector of length in_features to a vector of length
    out_features and owns a flat parameter vector of length num_params().
    cached_feed_forward() stores what backward()/gradient_for() need; the
    cache is overwritten on every call, so one layer instance must not be
    driven by more than one training call at a time.
    """
    in_features = 0
    out_features = 0

    def __init__(self):
        self._cache_ready = False

    # Subclasses override as needed
    def feed_forward(self, x):
        raise NotImplementedError

    def cached_feed_forward(self, x):
        raise NotImplementedError

    def backward(self, error):
        # Return grad wrt input
        raise NotImplementedError

    def gradient_for(self, error):
        # Return grad wrt this layer's own parameters, flat
        raise NotImplementedError

    def params(self):
        # Flat parameter vector (live view)
        return backend.zeros(0)

    def num_params(self):
        return int(self.params().shape[0])

    def apply_step(self, step):
        step = self._check_vector(step, self.num_params(), "step")
        if step.shape[0]:
            self.params()[...] -= step

    def clear_cache(self):
        self._cache_ready = False

    # ----- helpers -----
    def _mark_cached(self):
        self._cache_ready = True

    def _require_cache(self, op):
        if not self._cache_ready:
            raise ValueError(f"Must call cached_feed_forward() before {op}() on {self!r}")

    def _check_vector(self, v, size, what):
        v = backend.ensure_array(v)
        if v.ndim != 1 or v.shape[0] != size:
            raise ValueError(
                f"{self!r} expected {what} of length {size}, got shape {tuple(v.shape)}"
            )
        return v

    def __repr__(self):
        return f"{self.__class__.__name__}({self.in_features}, {self.out_features})"
