from .Function import Function
from ..helpers.Backend import backend


class Sigmoid(Function):
    def out(self, x):
        return 1.0 / (1.0 + backend.exp(-x))

    def d_out(self, x):
        s = self.out(x)
        return s, s * (1.0 - s)
