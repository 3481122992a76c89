"""Simplex noise evaluated on float32 lanes, following the SSE2 code path."""

from __future__ import annotations

from typing import Any

import numpy as np

from .arrays import AlignedArray2D, AlignedArray3D
from .noise import LaneNoise, Noise
from .simd import lane_floor, lane_jenkins_hash
from .simplex import F2, F3, G2, G3

_f = np.float32
_I32 = np.int32
_INT_MIN = -(1 << 31)

_ZERO = _f(0.0)
_ONE = _f(1.0)
_TWO = _f(2.0)
_HALF = _f(0.5)
_RADIUS3 = _f(0.6)
_TWO_G2 = _TWO * G2
_TWO_G3 = _TWO * G3
_THREE_G3 = _f(3.0) * G3
_SCALE2 = _f(40.0)
_SCALE3 = _f(32.0)
_VECTOR_ALIGNMENT = 16


def _prepare(seed: Any, *coords: Any) -> tuple[np.ndarray, list[np.ndarray], tuple]:
    """Broadcast seed and coordinate lanes together and flatten them to 1-d."""
    seed_lanes = np.asarray(seed)
    if seed_lanes.dtype.kind not in "iub":
        raise TypeError("seed lanes must be integers")
    seed_lanes = seed_lanes.astype(np.int64).astype(_I32)
    float_lanes = [np.asarray(c, dtype=_f) for c in coords]
    broadcast = np.broadcast_arrays(seed_lanes, *float_lanes)
    shape = broadcast[0].shape
    flat = [np.array(a, copy=True).reshape(-1) for a in broadcast]
    return flat[0], flat[1:], shape


def _truncate(a: np.ndarray) -> np.ndarray:
    """Truncate float lanes to int32; out-of-range lanes become the minimum int."""
    out = np.full(a.shape, _INT_MIN, dtype=_I32)
    with np.errstate(invalid="ignore"):
        ok = np.isfinite(a) & (a >= -2147483648.0) & (a < 2147483648.0)
    out[ok] = np.trunc(a[ok]).astype(_I32)
    return out


def _grad2(hash_lanes: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    h = hash_lanes & 7
    below4 = h < 4
    u = np.where(below4, x, y)
    v = np.where(below4, y, x)
    h1 = np.where((h & 1) != 0, _f(-1.0), _f(1.0))
    h2 = np.where((h & 2) != 0, _f(-2.0), _f(2.0))
    return (u * h1 + v * h2).astype(_f)


def _grad3(hash_lanes: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = hash_lanes & 15
    below8 = h < 8
    below4 = h < 4
    is12or14 = (h == 12) | (h == 14)
    u = np.where(below8, x, y)
    v = np.where(below4, y, np.where(is12or14, x, z))
    h1 = np.where((h & 1) != 0, _f(-1.0), _f(1.0))
    h2 = np.where((h & 2) != 0, _f(-1.0), _f(1.0))
    return (u * h1 + v * h2).astype(_f)


def _masked(mask: np.ndarray, values: np.ndarray) -> np.ndarray:
    return np.where(mask, values, _ZERO).astype(_f)


def sse2_simplex_get2d(seed: Any, x: Any, y: Any) -> np.ndarray:
    """2D simplex noise for every lane of ``x`` and ``y``, in 32-bit floats."""
    seeds, (x, y), shape = _prepare(seed, x, y)
    with np.errstate(over="ignore", invalid="ignore"):
        s = (x + y) * F2
        i = lane_floor(x + s)
        j = lane_floor(y + s)

        t = (i + j) * G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        i1 = (x0 > y0).astype(_f)
        j1 = (x0 <= y0).astype(_f)

        x1 = (x0 - i1) + G2
        y1 = (y0 - j1) + G2
        x2 = (x0 - _ONE) + _TWO_G2
        y2 = (y0 - _ONE) + _TWO_G2

        ii = _truncate(i)
        jj = _truncate(j)

        corners = (
            (x0, y0, ii, jj),
            (x1, y1, ii + i1.astype(_I32), jj + j1.astype(_I32)),
            (x2, y2, ii + _I32(1), jj + _I32(1)),
        )

        total = np.zeros_like(x)
        for cx, cy, ci, cj in corners:
            falloff = (_HALF - cx * cx) - cy * cy
            inside = falloff >= _ZERO
            falloff = falloff * falloff
            falloff = falloff * falloff
            hashed = lane_jenkins_hash(seeds, ci + lane_jenkins_hash(seeds, cj))
            total = total + _masked(inside, falloff * _grad2(hashed, cx, cy))

        result = (_SCALE2 * total).astype(_f)
    return result.reshape(shape)


def sse2_simplex_get3d(seed: Any, x: Any, y: Any, z: Any) -> np.ndarray:
    """3D simplex noise for every lane of ``x``, ``y`` and ``z``, in 32-bit floats."""
    seeds, (x, y, z), shape = _prepare(seed, x, y, z)
    with np.errstate(over="ignore", invalid="ignore"):
        s = ((x + y) + z) * F3
        i = lane_floor(x + s)
        j = lane_floor(y + s)
        k = lane_floor(z + s)

        t = ((i + j) + k) * G3
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)

        x_ge_y = x0 >= y0
        y_ge_z = y0 >= z0
        x_ge_z = x0 >= z0

        i1 = (x_ge_y & (y_ge_z | x_ge_z)).astype(_f)
        j1 = (~x_ge_y & y_ge_z).astype(_f)
        k1 = (~(x_ge_y | y_ge_z) | ~(y_ge_z | x_ge_z)).astype(_f)
        i2 = (x_ge_y | (y_ge_z & x_ge_z)).astype(_f)
        j2 = ((x_ge_y & y_ge_z) | ~x_ge_y).astype(_f)
        k2 = (~(x_ge_y | x_ge_z) | ~y_ge_z).astype(_f)

        ii = _truncate(i)
        jj = _truncate(j)
        kk = _truncate(k)

        one = _I32(1)
        corners = (
            (x0, y0, z0, ii, jj, kk),
            (
                (x0 - i1) + G3, (y0 - j1) + G3, (z0 - k1) + G3,
                ii + i1.astype(_I32), jj + j1.astype(_I32), kk + k1.astype(_I32),
            ),
            (
                (x0 - i2) + _TWO_G3, (y0 - j2) + _TWO_G3, (z0 - k2) + _TWO_G3,
                ii + i2.astype(_I32), jj + j2.astype(_I32), kk + k2.astype(_I32),
            ),
            (
                (x0 - _ONE) + _THREE_G3, (y0 - _ONE) + _THREE_G3, (z0 - _ONE) + _THREE_G3,
                ii + one, jj + one, kk + one,
            ),
        )

        total = np.zeros_like(x)
        for cx, cy, cz, ci, cj, ck in corners:
            falloff = ((_RADIUS3 - cx * cx) - cy * cy) - cz * cz
            inside = falloff >= _ZERO
            falloff = falloff * falloff
            falloff = falloff * falloff
            k_hash = lane_jenkins_hash(seeds, ck)
            j_hash = lane_jenkins_hash(seeds, cj + k_hash)
            hashed = lane_jenkins_hash(seeds, ci + j_hash)
            total = total + _masked(inside, falloff * _grad3(hashed, cx, cy, cz))

        result = (_SCALE3 * total).astype(_f)
    return result.reshape(shape)


class SimplexSSE2(Noise, LaneNoise):
    """Single-octave simplex noise evaluated four-wide on float32 lanes."""

    def __init__(self, seed: int, default_scale: float) -> None:
        super().__init__(seed, default_scale)

    def lanes_get2d(self, x: Any, y: Any, scale: Any = None) -> np.ndarray:
        xs, ys = np.broadcast_arrays(np.asarray(x, dtype=_f), np.asarray(y, dtype=_f))
        divisor = self._scale_lanes(scale, xs.shape)
        with np.errstate(divide="ignore", invalid="ignore"):
            return sse2_simplex_get2d(self.seed, xs / divisor, ys / divisor)

    def lanes_get3d(self, x: Any, y: Any, z: Any, scale: Any = None) -> np.ndarray:
        xs, ys, zs = np.broadcast_arrays(
            np.asarray(x, dtype=_f), np.asarray(y, dtype=_f), np.asarray(z, dtype=_f)
        )
        divisor = self._scale_lanes(scale, xs.shape)
        with np.errstate(divide="ignore", invalid="ignore"):
            return sse2_simplex_get3d(self.seed, xs / divisor, ys / divisor, zs / divisor)

    def get2d(self, x: float, y: float, scale: float | None = None) -> float:
        return float(self.lanes_get2d(_f(x), _f(y), self._resolve_scale(scale)))

    def get3d(self, x: float, y: float, z: float, scale: float | None = None) -> float:
        return float(self.lanes_get3d(_f(x), _f(y), _f(z), self._resolve_scale(scale)))

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        result = AlignedArray2D(size_x, size_y, _VECTOR_ALIGNMENT)
        if result.is_empty():
            return result
        ix, iy = np.indices((size_x, size_y)).reshape(2, -1)
        st = _f(step)
        xs = _f(offset_x) + ix.astype(_f) * st
        ys = _f(offset_y) + iy.astype(_f) * st
        result.values()[:] = self.lanes_get2d(xs, ys, self._resolve_scale(scale))
        return result

    def noise3d(
        self, offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale=None
    ) -> AlignedArray3D:
        result = AlignedArray3D(size_x, size_y, size_z, _VECTOR_ALIGNMENT)
        if result.is_empty():
            return result
        counters = np.indices((size_x, size_y, size_z)).reshape(3, -1).astype(_f)
        total = counters.shape[1]
        tail = total % self.lane_width
        if total >= self.lane_width and tail:
            # The partial last block restarts its coordinates at the grid origin.
            counters[:, -tail:] = counters[:, :tail]
        st = _f(step)
        xs = _f(offset_x) + counters[0] * st
        ys = _f(offset_y) + counters[1] * st
        zs = _f(offset_z) + counters[2] * st
        result.values()[:] = self.lanes_get3d(xs, ys, zs, self._resolve_scale(scale))
        return result