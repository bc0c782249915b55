"""Tensor shapes and broadcasting rules."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from helixml.errors import InvalidDimensionError, ShapeMismatchError


class Shape:
    """Dimensions of a tensor, outermost first."""

    def __init__(self, dims: Iterable[int] = ()) -> None:
        values = [int(d) for d in dims]
        if any(d < 0 for d in values):
            raise ValueError(f"dimensions must be non-negative: {values}")
        self._dims = values

    @classmethod
    def scalar(cls) -> Shape:
        return cls(())

    @property
    def ndim(self) -> int:
        return len(self._dims)

    @property
    def numel(self) -> int:
        return math.prod(self._dims)

    @property
    def dims(self) -> tuple[int, ...]:
        return tuple(self._dims)

    def dim(self, idx: int) -> int | None:
        """Size of dimension ``idx``, or None when it does not exist."""
        if 0 <= idx < len(self._dims):
            return self._dims[idx]
        return None

    def set_dim(self, idx: int, value: int) -> None:
        if not 0 <= idx < len(self._dims):
            raise InvalidDimensionError(idx, self._dims)
        if value < 0:
            raise ValueError(f"dimension must be non-negative: {value}")
        self._dims[idx] = value

    def reshape(self, new_dims: Iterable[int]) -> Shape:
        target = Shape(new_dims)
        if target.numel != self.numel:
            raise ShapeMismatchError([self.numel], [target.numel])
        return target

    def broadcast_to(self, target: Shape) -> Shape:
        if self.ndim > target.ndim:
            raise ShapeMismatchError(target.dims, self.dims)
        offset = target.ndim - self.ndim
        for dim, target_dim in zip(self._dims, target.dims[offset:]):
            if dim != 1 and dim != target_dim:
                raise ShapeMismatchError([target_dim], [dim])
        return Shape(target.dims)

    def is_broadcast_compatible(self, other: Shape) -> bool:
        for source, target in ((self, other), (other, self)):
            try:
                source.broadcast_to(target)
            except ShapeMismatchError:
                continue
            return True
        return False

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._dims == other._dims

    __hash__ = None  # mutable through set_dim

    def __repr__(self) -> str:
        return f"Shape({self._dims})"

    def __str__(self) -> str:
        return "(" + ", ".join(str(d) for d in self._dims) + ")"