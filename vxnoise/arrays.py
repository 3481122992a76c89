"""Fixed-size row-major float grids used as noise output buffers."""

from __future__ import annotations

from typing import Sequence

import numpy as np

_DTYPE = np.float32


def _checked_index(index: object, bound: int, owner: str) -> int:
    """Validate one axis index and return it as a plain int."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{owner} indices must be integers, not {type(index).__name__}")
    value = int(index)
    if value < 0 or value >= bound:
        raise IndexError(f"Out of range index passed to {owner}!")
    return value


class _AlignedArray:
    """Shared storage and bookkeeping for the 2D and 3D grids."""

    _name = "aligned array"

    def __init__(self, shape: Sequence[int], alignment: int) -> None:
        if any(int(extent) < 0 for extent in shape):
            raise ValueError("array sizes must not be negative")
        self._shape = tuple(int(extent) for extent in shape)
        self.alignment = int(alignment)
        count = 1
        for extent in self._shape:
            count *= extent
        self._data: np.ndarray | None = (
            np.zeros(count, dtype=_DTYPE) if count else None
        )

    def is_empty(self) -> bool:
        """Return True when the array holds no storage."""
        return self._data is None

    def size(self, axis: int = 0) -> int:
        """Return the extent of the given axis."""
        if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
            raise ValueError(f"Invalid axis passed to {self._name}.size()!")
        if 0 <= axis < len(self._shape):
            return self._shape[axis]
        raise ValueError(f"Invalid axis passed to {self._name}.size()!")

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    def values(self) -> np.ndarray:
        """Return the flat, row-major storage (writes go through to the array)."""
        if self._data is None:
            return np.zeros(0, dtype=_DTYPE)
        return self._data

    def _flat(self, indices: tuple) -> int:
        if len(indices) != len(self._shape):
            raise TypeError(
                f"{self._name} takes {len(self._shape)} indices, got {len(indices)}"
            )
        if self._data is None:
            raise IndexError(f"{self._name} is empty!")
        offset = 0
        for index, extent in zip(indices, self._shape):
            offset = offset * extent + _checked_index(index, extent, self._name)
        return offset

    def _element(self, indices: tuple) -> float:
        return float(self._data[self._flat(indices)])

    def _store(self, indices: tuple, value: float) -> None:
        self._data[self._flat(indices)] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self._shape}, alignment={self.alignment})"


class _Row:
    """View on the last axis of a grid, fixed at the leading indices."""

    def __init__(self, owner: _AlignedArray, leading: tuple) -> None:
        self._owner = owner
        self._leading = leading

    def __getitem__(self, index: int):
        axis = len(self._leading)
        bound = self._owner.shape[axis]
        checked = _checked_index(index, bound, self._owner._name)
        leading = self._leading + (checked,)
        if len(leading) < len(self._owner.shape):
            return _Row(self._owner, leading)
        return self._owner._element(leading)

    def __setitem__(self, index: int, value: float) -> None:
        axis = len(self._leading)
        if axis + 1 != len(self._owner.shape):
            raise TypeError("only the last axis can be assigned through a view")
        checked = _checked_index(index, self._owner.shape[axis], self._owner._name)
        self._owner._store(self._leading + (checked,), value)


class _GridIndexing(_AlignedArray):
    def __getitem__(self, index):
        if isinstance(index, tuple):
            return self._element(index)
        checked = _checked_index(index, self._shape[0], self._name)
        return _Row(self, (checked,))

    def __setitem__(self, index, value: float) -> None:
        if not isinstance(index, tuple):
            raise TypeError(f"{self._name} assignment needs a full index tuple")
        self._store(index, value)


class AlignedArray2D(_GridIndexing):
    """A ``size_x`` by ``size_y`` grid of 32-bit floats, stored row-major."""

    _name = "aligned_array_2d"

    def __init__(self, size_x: int, size_y: int | None = None, alignment: int = 4) -> None:
        if size_y is None:
            size_y = size_x
        super().__init__((size_x, size_y), alignment)

    def size(self, axis: int = 0) -> int:
        return super().size(axis)

    def __getitem__(self, index):
        return super().__getitem__(index)

    def __setitem__(self, index, value: float) -> None:
        super().__setitem__(index, value)

    def values(self) -> np.ndarray:
        return super().values()

    def is_empty(self) -> bool:
        return super().is_empty()


class AlignedArray3D(_GridIndexing):
    """A ``size_x`` by ``size_y`` by ``size_z`` grid of 32-bit floats, stored row-major."""

    _name = "aligned_array_3d"

    def __init__(
        self,
        size_x: int,
        size_y: int | None = None,
        size_z: int | None = None,
        alignment: int = 4,
    ) -> None:
        if size_y is None and size_z is None:
            size_y = size_z = size_x
        elif size_y is None or size_z is None:
            raise TypeError("give either one size or all three")
        super().__init__((size_x, size_y, size_z), alignment)

    def size(self, axis: int = 0) -> int:
        return super().size(axis)

    def __getitem__(self, index):
        return super().__getitem__(index)

    def __setitem__(self, index, value: float) -> None:
        super().__setitem__(index, value)

    def values(self) -> np.ndarray:
        return super().values()

    def is_empty(self) -> bool:
        return super().is_empty()