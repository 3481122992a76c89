"""Abstract interfaces shared by every noise generator."""

from __future__ import annotations

import abc
from typing import Any

import numpy as np

from .arrays import AlignedArray2D, AlignedArray3D

_UINT32_LIMIT = 1 << 32


def _to_int32(value: int) -> int:
    """Wrap an integer seed into the signed 32-bit range."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"seed must be an integer, not {type(value).__name__}")
    return ((int(value) + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _to_f32(value: Any) -> float:
    """Round a number to the nearest 32-bit float and return it as a Python float."""
    return float(np.float32(value))


class Noise(abc.ABC):
    """A seeded noise source sampled at points or over regular grids.

    Every ``scale`` argument may be left out, in which case the generator's
    ``default_scale`` is used.
    """

    def __init__(self, seed: int, default_scale: float) -> None:
        self.seed = _to_int32(seed)
        self.default_scale = _to_f32(default_scale)

    def _resolve_scale(self, scale: float | None) -> float:
        return self.default_scale if scale is None else _to_f32(scale)

    @abc.abstractmethod
    def get2d(self, x: float, y: float, scale: float | None = None) -> float:
        """Sample the noise at a 2D point."""

    @abc.abstractmethod
    def get3d(self, x: float, y: float, z: float, scale: float | None = None) -> float:
        """Sample the noise at a 3D point."""

    @abc.abstractmethod
    def noise2d(
        self,
        offset_x: float,
        offset_y: float,
        size_x: int,
        size_y: int,
        step: float,
        scale: float | None = None,
    ) -> AlignedArray2D:
        """Sample a ``size_x`` by ``size_y`` grid starting at the offset, ``step`` apart."""

    @abc.abstractmethod
    def noise3d(
        self,
        offset_x: float,
        offset_y: float,
        offset_z: float,
        size_x: int,
        size_y: int,
        size_z: int,
        step: float,
        scale: float | None = None,
    ) -> AlignedArray3D:
        """Sample a 3D grid starting at the offset, ``step`` apart on every axis."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed}, default_scale={self.default_scale})"


class NoiseFractal(Noise):
    """A noise source that sums several octaves of a base noise."""

    def __init__(
        self,
        seed: int,
        default_scale: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> None:
        super().__init__(seed, default_scale)
        if isinstance(octaves, bool) or not isinstance(octaves, (int, np.integer)):
            raise TypeError(f"octaves must be an integer, not {type(octaves).__name__}")
        if not 0 <= int(octaves) < _UINT32_LIMIT:
            raise ValueError("octaves must fit in an unsigned 32-bit integer")
        self.octaves = int(octaves)
        self.persistence = _to_f32(persistence)
        self.lacunarity = _to_f32(lacunarity)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(seed={self.seed}, default_scale={self.default_scale}, "
            f"octaves={self.octaves}, persistence={self.persistence}, "
            f"lacunarity={self.lacunarity})"
        )


class LaneNoise(abc.ABC):
    """Mixin for generators that evaluate many points at once as float32 lanes.

    Meant to be combined with :class:`Noise`, which provides ``seed`` and
    ``default_scale``.
    """

    lane_width = 4

    seed: int
    default_scale: float

    def _seed_lanes(self, shape: Any) -> np.ndarray:
        return np.full(shape, self.seed, dtype=np.int32)

    def _scale_lanes(self, scale: Any, shape: Any) -> np.ndarray:
        value = self.default_scale if scale is None else scale
        return np.broadcast_to(np.asarray(value, dtype=np.float32), shape).copy()

    @abc.abstractmethod
    def lanes_get2d(self, x: Any, y: Any, scale: Any = None) -> np.ndarray:
        """Sample the noise at every 2D point given by the lanes of ``x`` and ``y``."""

    @abc.abstractmethod
    def lanes_get3d(self, x: Any, y: Any, z: Any, scale: Any = None) -> np.ndarray:
        """Sample the noise at every 3D point given by the lanes of ``x``, ``y`` and ``z``."""