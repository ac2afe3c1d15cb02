from .Optimizer import Optimizer
from .SGDOptimizer import SGDOptimizer
from .MomentumOptimizer import MomentumOptimizer
from .RMSPropOptimizer import RMSPropOptimizer

__all__ = [
    "Optimizer",
    "SGDOptimizer",
    "MomentumOptimizer",
    "RMSPropOptimizer",
]
