from .Function import Function
from ..helpers.Backend import backend


class ReLU(Function):
    def out(self, x):
        return backend.maximum(0.0, x)

    def d_out(self, x):
        # zero is treated as non-positive: derivative 0
        mask = (x > 0).astype(backend.default_float)
        return backend.maximum(0.0, x), mask
