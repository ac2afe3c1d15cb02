# seqnet/helpers/Backend.py
import os
import numpy as np

VERBOSE_STARTUP = False  # set True to print device info on import

try:
    import cupy as cp
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
        if VERBOSE_STARTUP:
            print("CuPy:", cp.__version__)
            print("GPU count:", cp.cuda.runtime.getDeviceCount())
    except Exception as e:
        print(f"CuPy installed but CUDA runtime error: {e}")
        print("Falling back to CPU (NumPy)")
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=False, default_float=np.float64, verbose=VERBOSE_STARTUP):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        if verbose:
            print("Using GPU backend (CuPy)" if self.use_gpu else "Using CPU backend (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None:
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None, copy=False):
        """
        Ensure 'x' is an array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray.
        """
        if dtype is None:
            dtype = self.default_float
        if self.use_gpu and isinstance(x, np.ndarray):
            x = cp.asarray(x)
        elif (not self.use_gpu) and (cp is not None) and isinstance(x, cp.ndarray):
            x = cp.asnumpy(x)
        arr = self.xp.asarray(x, dtype=dtype)
        if copy and arr is x:
            arr = arr.copy()
        return arr

    def zeros(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return self.xp.zeros(*args, **kwargs)

    # -------- math / linalg (thin wrappers) --------
    def sqrt(self, x):       return self.xp.sqrt(x)
    def maximum(self, a, b): return self.xp.maximum(a, b)
    def exp(self, x):        return self.xp.exp(x)
    def sum(self, x, axis=None, keepdims=False): return self.xp.sum(x, axis=axis, keepdims=keepdims)
    def matmul(self, a, b):  return self.xp.matmul(a, b)
    def outer(self, a, b):   return self.xp.outer(a, b)
    def reshape(self, x, shape): return self.xp.reshape(x, shape)


# Global backend instance; opt into CuPy with SEQNET_USE_GPU=1
backend = Backend(use_gpu=os.environ.get("SEQNET_USE_GPU", "0") == "1")
