from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import cached_property
from typing import Any

import numpy as np

from .config import config
from .errors import assert_same_ndim
from .indexing import fns
from .indexing.buffer_ownership import BufferOwnership


def _coerce_coords(coords: Any) -> tuple[int, ...]:
    if isinstance(coords, ZPoint):
        return coords.coords
    if isinstance(coords, np.ndarray):
        if coords.ndim != 1:
            raise ValueError(f"coordinates must be a vector, got shape {coords.shape}")
        if not np.issubdtype(coords.dtype, np.integer):
            raise TypeError(f"coordinates must be integers, got dtype {coords.dtype}")
        coords = coords.tolist()
    if isinstance(coords, str | bytes):
        raise TypeError(f"coordinates must be a sequence of integers, got {coords!r}")
    # bool is an int to operator.index; reject it explicitly
    res = []
    for c in coords:
        if isinstance(c, bool | np.bool_):
            raise TypeError(f"coordinates must be integers, got {c!r}")
        # coordinates are stored in intp buffers by to_array and iteration
        res.append(fns.check_intp(c))
    return tuple(res)


@dataclass(eq=True, frozen=True)
class ZPoint:
    """
    An immutable point in the integer lattice.

    Attributes:
        coords: The coordinate on each axis.
    """

    coords: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "coords", _coerce_coords(self.coords))

    @classmethod
    def of(cls, *coords) -> ZPoint:
        """
        Build a point from either separate integers or a single iterable.

            ZPoint.of(1, 2) == ZPoint.of([1, 2])
        """
        if len(coords) == 1 and not isinstance(coords[0], int | np.integer):
            (coords,) = coords
            if isinstance(coords, ZPoint):
                return coords
        return cls(coords)

    @classmethod
    def zeros(cls, ndim: int) -> ZPoint:
        return cls((0,) * ndim)

    @classmethod
    def ones(cls, ndim: int) -> ZPoint:
        return cls((1,) * ndim)

    @classmethod
    def zeros_like(cls, ref) -> ZPoint:
        return cls.zeros(len(cls.of(ref)))

    @classmethod
    def ones_like(cls, ref) -> ZPoint:
        return cls.ones(len(cls.of(ref)))

    @property
    def ndim(self) -> int:
        return len(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coords)

    def __getitem__(self, i: int) -> int:
        return self.coords[fns.resolve_index(i, self.ndim, "coordinate")]

    def __str__(self):
        return f"[{', '.join(str(c) for c in self.coords)}]"

    def __repr__(self):
        return f"ZPoint({list(self.coords)})"

    def resolve_dim(self, dim: int) -> int:
        return fns.resolve_dim(dim, self.ndim)

    @cached_property
    def _buffer(self) -> np.ndarray:
        buf = np.array(self.coords, dtype=np.intp)
        buf.flags.writeable = False
        return buf

    def to_array(self, buffer_ownership: BufferOwnership | None = None) -> np.ndarray:
        """
        The point as an ``intp`` vector.

        Args:
            buffer_ownership: ``REUSED`` returns the point's own read-only array,
                the same object on every call. ``CLONED`` returns a writable copy.
                Defaults to the ``buffer_ownership`` config option.
        """
        if buffer_ownership is None:
            buffer_ownership = config["buffer_ownership"]
        return buffer_ownership.apply(self._buffer)

    def _other(self, other) -> tuple[int, ...]:
        if isinstance(other, int | np.integer) and not isinstance(other, bool):
            return (int(other),) * self.ndim
        other = ZPoint.of(other)
        assert_same_ndim(self, other)
        return other.coords

    def _compare(self, other, op) -> bool:
        return all(op(a, b) for a, b in zip(self.coords, self._other(other), strict=True))

    def le(self, other) -> bool:
        """Dominance ordering: ``self[i] <= other[i]`` on every axis."""
        return self._compare(other, lambda a, b: a <= b)

    def lt(self, other) -> bool:
        return self._compare(other, lambda a, b: a < b)

    def ge(self, other) -> bool:
        return self._compare(other, lambda a, b: a >= b)

    def gt(self, other) -> bool:
        return self._compare(other, lambda a, b: a > b)

    def __add__(self, other) -> ZPoint:
        return ZPoint(
            tuple(a + b for a, b in zip(self.coords, self._other(other), strict=True))
        )

    def __sub__(self, other) -> ZPoint:
        return ZPoint(
            tuple(a - b for a, b in zip(self.coords, self._other(other), strict=True))
        )

    def __neg__(self) -> ZPoint:
        return ZPoint(tuple(-a for a in self.coords))

    def permute(self, *permutation: int) -> ZPoint:
        if len(permutation) == 1 and isinstance(permutation[0], Iterable):
            permutation = tuple(permutation[0])
        return ZPoint(fns.permute(self.coords, permutation))

    def add_dims(self, dim: int, count: int) -> ZPoint:
        """
        Insert ``count`` zero axes before axis ``dim``. ``dim`` may be ``ndim``
        (or ``-1``) to append.
        """
        dim = fns.resolve_index(dim, self.ndim + 1, "insertion point")
        if count < 0:
            raise ValueError(f"count must be non-negative: {count}")
        if count == 0:
            return self
        return ZPoint(self.coords[:dim] + (0,) * count + self.coords[dim:])

    def to_json_data(self) -> list[int]:
        return list(self.coords)

    @classmethod
    def from_json_data(cls, data: Any) -> ZPoint:
        if not isinstance(data, list):
            raise ValueError(f"Invalid ZPoint data: {data!r}")
        try:
            return cls(data)
        except TypeError as e:
            raise ValueError(f"Invalid ZPoint data: {data!r}") from e

    def to_json(self) -> str:
        return json.dumps(self.to_json_data())

    @classmethod
    def parse(cls, source: str) -> ZPoint:
        """
        Parse ``"[1, 2, 3]"``.
        """
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise ValueError(f'Invalid ZPoint: "{source}"') from e
        return cls.from_json_data(data)
