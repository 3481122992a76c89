"""Scalar and lane-wise numeric helpers shared by the noise generators."""

from __future__ import annotations

import enum
from typing import Any

import numpy as np

_F32 = np.float32
_I32 = np.int32


class SimdLevel(enum.IntEnum):
    """Vector instruction levels a generator can be built for."""

    AUTO = 0
    FALLBACK = 1
    NEON = 2
    SSE2 = 3
    SSE42 = 4
    AVX2 = 5


def _wrap32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def fast_floor(a: float) -> int:
    """Floor that truncates and steps down for every non-positive input."""
    if a > 0:
        return int(a)
    return int(a) - 1


def dot2(x0: float, y0: float, x1: float, y1: float) -> float:
    """Two-component dot product."""
    return x0 * x1 + y0 * y1


def dot3(x0: float, y0: float, z0: float, x1: float, y1: float, z1: float) -> float:
    """Three-component dot product."""
    return x0 * x1 + y0 * y1 + z0 * z1


def partial_jenkins_hash(seed: int, key: int) -> int:
    """Partial Jenkins one-at-a-time hash with signed 32-bit wrap-around."""
    h = _wrap32(seed + key)
    h = _wrap32(h + (h << 10))
    h ^= h >> 6
    h = _wrap32(h + (h << 3))
    h ^= h >> 11
    h = _wrap32(h + (h << 15))
    return h


def _floats(values: Any) -> np.ndarray:
    return np.asarray(values, dtype=_F32)


def _ints(values: Any) -> np.ndarray:
    arr = np.asarray(values)
    if arr.dtype.kind not in "iub":
        raise TypeError("integer lanes expected")
    return arr.astype(np.int64).astype(_I32)


def lane_floor(a: Any) -> np.ndarray:
    """Lane-wise floor that truncates, then subtracts one where the lane is <= 0."""
    lanes = _floats(a)
    return (np.trunc(lanes) - (lanes <= 0).astype(_F32)).astype(_F32)


def lane_abs(x: Any) -> np.ndarray:
    """Lane-wise absolute value."""
    return np.abs(_floats(x))


def lane_dot2(x0: Any, y0: Any, x1: Any, y1: Any) -> np.ndarray:
    """Lane-wise two-component dot product in 32-bit floats."""
    return _floats(x0) * _floats(x1) + _floats(y0) * _floats(y1)


def lane_dot3(x0: Any, y0: Any, z0: Any, x1: Any, y1: Any, z1: Any) -> np.ndarray:
    """Lane-wise three-component dot product in 32-bit floats."""
    return (_floats(x0) * _floats(x1) + _floats(y0) * _floats(y1)) + _floats(z0) * _floats(z1)


def lane_blend(x: Any, y: Any, mask: Any) -> np.ndarray:
    """Pick ``y`` where ``mask`` is set and ``x`` elsewhere."""
    return np.where(np.asarray(mask, dtype=bool), _floats(y), _floats(x)).astype(_F32)


def lane_jenkins_hash(seed: Any, key: Any) -> np.ndarray:
    """Lane-wise partial Jenkins hash on signed 32-bit lanes."""
    s = _ints(seed)
    k = _ints(key)
    with np.errstate(over="ignore"):
        h = np.add(s, k, dtype=_I32)
        h = np.add(h, np.left_shift(h, 10, dtype=_I32), dtype=_I32)
        h = np.bitwise_xor(h, np.right_shift(h, 6, dtype=_I32), dtype=_I32)
        h = np.add(h, np.left_shift(h, 3, dtype=_I32), dtype=_I32)
        h = np.bitwise_xor(h, np.right_shift(h, 11, dtype=_I32), dtype=_I32)
        h = np.add(h, np.left_shift(h, 15, dtype=_I32), dtype=_I32)
    return np.asarray(h, dtype=_I32)