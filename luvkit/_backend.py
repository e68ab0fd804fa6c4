"""Backend dispatch for numpy/torch compatibility.

Provides unified math operations that work with both numpy arrays and torch tensors.
Torch is imported lazily on first use to avoid loading it when not needed.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

logger = logging.getLogger(__name__)

Array = Any  # numpy.ndarray or torch.Tensor

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
        logger.debug("Loaded torch backend (torch %s)", torch.__version__)
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


def as_float_array(x: Array) -> Array:
    """Pass tensors and float arrays through; turn anything else into a float64 array."""
    if is_torch(x):
        if not x.is_floating_point():
            return x.to(_get_torch().float64)
        return x
    arr = np.asarray(x)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


@contextmanager
def ignore_float_errors() -> Iterator[None]:
    """Silence numpy divide/invalid/overflow warnings.

    Used where a degenerate branch is computed and then discarded by where().
    Torch never warns, so this only matters for numpy inputs.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        yield


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def hypot(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().hypot(x, y)
    return np.hypot(x, y)


def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def clip(x: Array, lo: float, hi: float) -> Array:
    if is_torch(x):
        return _get_torch().clamp(x, lo, hi)
    return np.clip(x, lo, hi)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        return _get_torch().where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    """Stack arrays along a new axis."""
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)


def broadcast_arrays(*arrays: Array) -> tuple[Array, ...]:
    """Broadcast arrays to a common shape."""
    if is_torch(arrays[0]):
        return tuple(_get_torch().broadcast_tensors(*arrays))
    return tuple(np.broadcast_arrays(*arrays))


def atan2(y: Array, x: Array) -> Array:
    if is_torch(y):
        return _get_torch().atan2(y, x)
    return np.arctan2(y, x)


def minimum(x: Array, y: Array) -> Array:
    if is_torch(x):
        return _get_torch().minimum(x, y)
    return np.minimum(x, y)


def zeros_like(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().zeros_like(x)
    return np.zeros_like(x)


def finfo_max_like(x: Array) -> Array:
    """Array shaped like x filled with the largest finite value of its dtype."""
    if is_torch(x):
        torch = _get_torch()
        return torch.full_like(x, torch.finfo(x.dtype).max)
    x = np.asarray(x)
    return np.full_like(x, np.finfo(x.dtype).max)


def all_along_axis(x: Array, axis: int) -> Array:
    """Check if all values are True along axis."""
    if is_torch(x):
        return _get_torch().all(x, dim=axis)
    return np.all(x, axis=axis)


def to_numpy(x: Array) -> np.ndarray:
    """Convert to numpy array (moves from GPU if needed)."""
    if is_torch(x):
        return x.detach().cpu().numpy()
    return np.asarray(x)
