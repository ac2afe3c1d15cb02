from .Layer import Layer
from .Dense import Dense
from .Bias import Bias
from .Activation import Activation

__all__ = [
    "Layer",
    "Dense",
    "Bias",
    "Activation",
]
