from .SeqNet import SeqNet
from .layers import Layer, Dense, Bias, Activation
from .activations import Function, ReLU, Sigmoid
from .optimizer import Optimizer, SGDOptimizer, MomentumOptimizer, RMSPropOptimizer
from .loss import SquaredErrorLoss

__all__ = [
    "SeqNet",
    "Layer",
    "Dense",
    "Bias",
    "Activation",
    "Function",
    "ReLU",
    "Sigmoid",
    "Optimizer",
    "SGDOptimizer",
    "MomentumOptimizer",
    "RMSPropOptimizer",
    "SquaredErrorLoss",
]
