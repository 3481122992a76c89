"""Multi-octave simplex noise evaluated on float32 lanes."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .arrays import AlignedArray2D, AlignedArray3D
from .noise import LaneNoise, NoiseFractal
from .simplex_sse2 import sse2_simplex_get2d, sse2_simplex_get3d
from .simplex_sse42 import sse42_simplex_get2d, sse42_simplex_get3d

_f = np.float32
_ONE = _f(1.0)
_VECTOR_ALIGNMENT = 16


class _LaneFractal(NoiseFractal, LaneNoise):
    """Octave summation over a lane-wise simplex kernel."""

    _kernel2d: Callable[..., np.ndarray]
    _kernel3d: Callable[..., np.ndarray]
    # Whether the partial last block of a 3D grid restarts at the grid origin.
    _restart_tail_3d = False

    def __init__(
        self,
        seed: int,
        default_scale: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> None:
        super().__init__(seed, default_scale, octaves, persistence, lacunarity)

    def _accumulate(self, kernel, coords: list[np.ndarray], shape: tuple) -> np.ndarray:
        persistence = _f(self.persistence)
        lacunarity = _f(self.lacunarity)
        frequency = _ONE
        amplitude = _ONE
        total = np.zeros(shape, dtype=_f)
        with np.errstate(over="ignore", invalid="ignore"):
            for _ in range(self.octaves):
                sample = kernel(self.seed, *(c * frequency for c in coords))
                total = (total + sample * amplitude).astype(_f)
                amplitude = _f(amplitude * persistence)
                frequency = _f(frequency * lacunarity)
        return total

    def lanes_get2d(self, x: Any, y: Any, scale: Any = None) -> np.ndarray:
        xs, ys = np.broadcast_arrays(np.asarray(x, dtype=_f), np.asarray(y, dtype=_f))
        divisor = self._scale_lanes(scale, xs.shape)
        with np.errstate(divide="ignore", invalid="ignore"):
            coords = [xs / divisor, ys / divisor]
        return self._accumulate(type(self)._kernel2d, coords, xs.shape)

    def lanes_get3d(self, x: Any, y: Any, z: Any, scale: Any = None) -> np.ndarray:
        xs, ys, zs = np.broadcast_arrays(
            np.asarray(x, dtype=_f), np.asarray(y, dtype=_f), np.asarray(z, dtype=_f)
        )
        divisor = self._scale_lanes(scale, xs.shape)
        with np.errstate(divide="ignore", invalid="ignore"):
            coords = [xs / divisor, ys / divisor, zs / divisor]
        return self._accumulate(type(self)._kernel3d, coords, xs.shape)

    def get2d(self, x: float, y: float, scale: float | None = None) -> float:
        return float(self.lanes_get2d(_f(x), _f(y), self._resolve_scale(scale)))

    def get3d(self, x: float, y: float, z: float, scale: float | None = None) -> float:
        return float(self.lanes_get3d(_f(x), _f(y), _f(z), self._resolve_scale(scale)))

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        result = AlignedArray2D(size_x, size_y, _VECTOR_ALIGNMENT)
        if result.is_empty():
            return result
        ix, iy = np.indices((size_x, size_y)).reshape(2, -1).astype(_f)
        st = _f(step)
        xs = _f(offset_x) + ix * st
        ys = _f(offset_y) + iy * st
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
        if self._restart_tail_3d and total >= self.lane_width and tail:
            counters[:, -tail:] = counters[:, :tail]
        st = _f(step)
        xs = _f(offset_x) + counters[0] * st
        ys = _f(offset_y) + counters[1] * st
        zs = _f(offset_z) + counters[2] * st
        result.values()[:] = self.lanes_get3d(xs, ys, zs, self._resolve_scale(scale))
        return result


class SimplexFractalSSE2(_LaneFractal):
    """Multi-octave simplex noise on float32 lanes, following the SSE2 code path."""

    _kernel2d = staticmethod(sse2_simplex_get2d)
    _kernel3d = staticmethod(sse2_simplex_get3d)
    _restart_tail_3d = True

    def __init__(self, seed, default_scale, octaves, persistence, lacunarity) -> None:
        super().__init__(seed, default_scale, octaves, persistence, lacunarity)

    def lanes_get2d(self, x, y, scale=None) -> np.ndarray:
        return super().lanes_get2d(x, y, scale)

    def lanes_get3d(self, x, y, z, scale=None) -> np.ndarray:
        return super().lanes_get3d(x, y, z, scale)

    def get2d(self, x, y, scale=None) -> float:
        return super().get2d(x, y, scale)

    def get3d(self, x, y, z, scale=None) -> float:
        return super().get3d(x, y, z, scale)

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        return super().noise2d(offset_x, offset_y, size_x, size_y, step, scale)

    def noise3d(
        self, offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale=None
    ) -> AlignedArray3D:
        return super().noise3d(
            offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale
        )


class SimplexFractalSSE42(_LaneFractal):
    """Multi-octave simplex noise on float32 lanes, following the SSE4.2 code path."""

    _kernel2d = staticmethod(sse42_simplex_get2d)
    _kernel3d = staticmethod(sse42_simplex_get3d)
    _restart_tail_3d = False

    def __init__(self, seed, default_scale, octaves, persistence, lacunarity) -> None:
        super().__init__(seed, default_scale, octaves, persistence, lacunarity)

    def lanes_get2d(self, x, y, scale=None) -> np.ndarray:
        return super().lanes_get2d(x, y, scale)

    def lanes_get3d(self, x, y, z, scale=None) -> np.ndarray:
        return super().lanes_get3d(x, y, z, scale)

    def get2d(self, x, y, scale=None) -> float:
        return super().get2d(x, y, scale)

    def get3d(self, x, y, z, scale=None) -> float:
        return super().get3d(x, y, z, scale)

    def noise2d(self, offset_x, offset_y, size_x, size_y, step, scale=None) -> AlignedArray2D:
        return super().noise2d(offset_x, offset_y, size_x, size_y, step, scale)

    def noise3d(
        self, offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale=None
    ) -> AlignedArray3D:
        return super().noise3d(
            offset_x, offset_y, offset_z, size_x, size_y, size_z, step, scale
        )