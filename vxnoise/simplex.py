"""Scalar simplex noise and its fractal (multi-octave) variant."""

from __future__ import annotations

import itertools
import math
from typing import Callable

import numpy as np

from .arrays import AlignedArray2D, AlignedArray3D
from .noise import Noise, NoiseFractal
from .simd import fast_floor, partial_jenkins_hash

_f = np.float32

F2 = _f(0.5 * (math.sqrt(3.0) - 1.0))
G2 = _f((3.0 - math.sqrt(3.0)) / 6.0)
F3 = _f(1.0 / 3.0)
G3 = _f(1.0 / 6.0)

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
_FLOAT_ALIGNMENT = 4


def _grad2(hash_value: int, x: np.float32, y: np.float32) -> np.float32:
    h = hash_value & 7
    u, v = (x, y) if h < 4 else (y, x)
    return (-u if h & 1 else u) + (-_TWO * v if h & 2 else _TWO * v)


def _grad3(hash_value: int, x: np.float32, y: np.float32, z: np.float32) -> np.float32:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def simplex_get2d(seed: int, x: float, y: float) -> float:
    """2D simplex noise at ``(x, y)``, computed in 32-bit floats."""
    x = _f(x)
    y = _f(y)
    s = (x + y) * F2
    i = fast_floor(x + s)
    j = fast_floor(y + s)

    t = _f(i + j) * G2
    x0 = x - (_f(i) - t)
    y0 = y - (_f(j) - t)

    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    corners = (
        (x0, y0, 0, 0),
        (x0 - _f(i1) + G2, y0 - _f(j1) + G2, i1, j1),
        (x0 - _ONE + _TWO_G2, y0 - _ONE + _TWO_G2, 1, 1),
    )

    total = _ZERO
    for cx, cy, di, dj in corners:
        falloff = _HALF - cx * cx - cy * cy
        if falloff < _ZERO:
            continue
        hashed = partial_jenkins_hash(seed, i + di + partial_jenkins_hash(seed, j + dj))
        falloff *= falloff
        falloff *= falloff
        total += falloff * _grad2(hashed, cx, cy)

    return float(_SCALE2 * total)


def _simplex_corner_offsets(x0, y0, z0) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    if x0 >= y0:
        if y0 >= z0:
            return (1, 0, 0), (1, 1, 0)
        if x0 >= z0:
            return (1, 0, 0), (1, 0, 1)
        return (0, 0, 1), (1, 0, 1)
    if y0 < z0:
        return (0, 0, 1), (0, 1, 1)
    if x0 < z0:
        return (0, 1, 0), (0, 1, 1)
    return (0, 1, 0), (1, 1, 0)


def simplex_get3d(seed: int, x: float, y: float, z: float) -> float:
    """3D simplex noise at ``(x, y, z)``, computed in 32-bit floats."""
    x = _f(x)
    y = _f(y)
    z = _f(z)
    s = (x + y + z) * F3
    i = fast_floor(x + s)
    j = fast_floor(y + s)
    k = fast_floor(z + s)

    t = _f(i + j + k) * G3
    x0 = x - (_f(i) - t)
    y0 = y - (_f(j) - t)
    z0 = z - (_f(k) - t)

    (i1, j1, k1), (i2, j2, k2) = _simplex_corner_offsets(x0, y0, z0)

    corners = (
        (x0, y0, z0, 0, 0, 0),
        (x0 - _f(i1) + G3, y0 - _f(j1) + G3, z0 - _f(k1) + G3, i1, j1, k1),
        (x0 - _f(i2) + _TWO_G3, y0 - _f(j2) + _TWO_G3, z0 - _f(k2) + _TWO_G3, i2, j2, k2),
        (x0 - _ONE + _THREE_G3, y0 - _ONE + _THREE_G3, z0 - _ONE + _THREE_G3, 1, 1, 1),
    )

    total = _ZERO
    for cx, cy, cz, di, dj, dk in corners:
        falloff = _RADIUS3 - cx * cx - cy * cy - cz * cz
        if falloff < _ZERO:
            continue
        hashed = partial_jenkins_hash(
            seed,
            i + di + partial_jenkins_hash(seed, j + dj + partial_jenkins_hash(seed, k + dk)),
        )
        falloff *= falloff
        total += falloff * falloff * _grad3(hashed, cx, cy, cz)

    return float(_SCALE3 * total)


def _fill2d(
    sample: Callable[[np.float32, np.float32], float],
    offset_x: float,
    offset_y: float,
    size_x: int,
    size_y: int,
    step: float,
) -> AlignedArray2D:
    result = AlignedArray2D(size_x, size_y, _FLOAT_ALIGNMENT)
    data = result.values()
    ox, oy, st = _f(offset_x), _f(offset_y), _f(step)
    points = itertools.product(range(size_x), range(size_y))
    for index, (ix, iy) in enumerate(points):
        data[index] = sample(ox + _f(ix) * st, oy + _f(iy) * st)
    return result


def _fill3d(
    sample: Callable[[np.float32, np.float32, np.float32], float],
    offset_x: float,
    offset_y: float,
    offset_z: float,
    size_x: int,
    size_y: int,
    size_z: int,
    step: float,
) -> AlignedArray3D:
    result = AlignedArray3D(size_x, size_y, size_z, _FLOAT_ALIGNMENT)
    data = result.values()
    ox, oy, oz, st = _f(offset_x), _f(offset_y), _f(offset_z), _f(step)
    points = itertools.product(range(size_x), range(size_y), range(size_z))
    for index, (ix, iy, iz) in enumerate(points):
        data[index] = sample(ox + _f(ix) * st, oy + _f(iy) * st, oz + _f(iz) * st)
    return result


class SimplexNormal(Noise):
    """Single-octave simplex noise evaluated one point at a time."""

    def __init__(self, seed: int, default_scale: float) -> None:
        super().__init__(seed, default_scale)

    def get2d(self, x: float, y: float, scale: float | None = None) -> float:
        divisor = _f(self._resolve_scale(scale))
        return simplex_get2d(self.seed, _f(x) / divisor, _f(y) / divisor)

    def get3d(self, x: float, y: float, z: float, scale: float | None = None) -> float:
        divisor = _f(self._resolve_scale(scale))
        return simplex_get3d(
            self.seed, _f(x) / divisor, _f(y) / divisor, _f(z) / divisor
        )

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        resolved = self._resolve_scale(scale)
        return _fill2d(
            lambda x, y: self.get2d(x, y, resolved),
            offset_x, offset_y, size_x, size_y, step,
        )

    def noise3d(
        self, offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale=None
    ) -> AlignedArray3D:
        resolved = self._resolve_scale(scale)
        return _fill3d(
            lambda x, y, z: self.get3d(x, y, z, resolved),
            offset_x, offset_y, offset_z, size_x, size_y, size_z, step,
        )


class SimplexFractalNormal(NoiseFractal):
    """Multi-octave simplex noise evaluated one point at a time."""

    def __init__(
        self,
        seed: int,
        default_scale: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> None:
        super().__init__(seed, default_scale, octaves, persistence, lacunarity)

    def _octaves(self):
        """Yield ``(frequency, amplitude)`` for each octave as float32 values."""
        frequency = _ONE
        amplitude = _ONE
        persistence = _f(self.persistence)
        lacunarity = _f(self.lacunarity)
        for _ in range(self.octaves):
            yield frequency, amplitude
            amplitude *= persistence
            frequency *= lacunarity

    def get2d(self, x: float, y: float, scale: float | None = None) -> float:
        divisor = _f(self._resolve_scale(scale))
        sx = _f(x) / divisor
        sy = _f(y) / divisor
        total = _ZERO
        for frequency, amplitude in self._octaves():
            value = _f(simplex_get2d(self.seed, sx * frequency, sy * frequency))
            total += value * amplitude
        return float(total)

    def get3d(self, x: float, y: float, z: float, scale: float | None = None) -> float:
        divisor = _f(self._resolve_scale(scale))
        sx = _f(x) / divisor
        sy = _f(y) / divisor
        sz = _f(z) / divisor
        total = _ZERO
        for frequency, amplitude in self._octaves():
            value = _f(
                simplex_get3d(self.seed, sx * frequency, sy * frequency, sz * frequency)
            )
            total += value * amplitude
        return float(total)

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        resolved = self._resolve_scale(scale)
        return _fill2d(
            lambda x, y: self.get2d(x, y, resolved),
            offset_x, offset_y, size_x, size_y, step,
        )

    def noise3d(
        self, offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale=None
    ) -> AlignedArray3D:
        resolved = self._resolve_scale(scale)
        return _fill3d(
            lambda x, y, z: self.get3d(x, y, z, resolved),
            offset_x, offset_y, offset_z, size_x, size_y, size_z, step,
        )