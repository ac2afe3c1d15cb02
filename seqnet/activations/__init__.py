from .Function import Function
from .ReLU import ReLU
from .Sigmoid import Sigmoid

__all__ = [
    "Function",
    "ReLU",
    "Sigmoid",
]
