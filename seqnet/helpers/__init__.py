from .Backend import backend, Backend
from .logger import RunLogger

__all__ = [
    "backend",
    "Backend",
    "RunLogger",
]
