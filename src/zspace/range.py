from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import cached_property
from math import prod
from typing import Any

import numpy as np

from . import serialization
from .config import config
from .errors import IndexOutOfRangeError, InvalidRangeError, assert_same_ndim
from .indexing import fns
from .indexing.buffer_ownership import BufferOwnership
from .indexing.coordinates import IterableCoordinates, IterablePoints
from .point import ZPoint

logger = logging.getLogger(__name__)


@dataclass(eq=True, frozen=True)
class ZRange:
    """
    A half-open box ``[start, end)`` of points in the integer lattice.

    Empty ranges, where ``start[i] == end[i]`` on some axis, are legal values of
    size zero; they contain no points but may be contained by other ranges. A
    zero-dimensional range holds exactly one point, the empty coordinate, and
    contains every other zero-dimensional range.

    Attributes:
        start: The inclusive lower corner.
        end: The exclusive upper corner.
    """

    start: ZPoint
    end: ZPoint

    def __post_init__(self):
        start = ZPoint.of(self.start)
        end = ZPoint.of(self.end)
        assert_same_ndim(start, end)
        if not start.le(end):
            raise InvalidRangeError(f"start {start} must be <= end {end}", start, end)
        if any(e - s > fns.INTP_MAX for s, e in zip(start, end, strict=True)):
            raise InvalidRangeError(
                f"shape of {start}..{end} is outside the intp range", start, end
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def of(cls, start, end) -> ZRange:
        """
        Construct ``[start, end)``.

        Raises:
            DimensionMismatchError: If ``start`` and ``end`` differ in dimensions.
            InvalidRangeError: If ``start[i] > end[i]`` on any axis.
        """
        return cls(start, end)

    @classmethod
    def from_shape(cls, *shape) -> ZRange:
        """Construct ``[0, shape)``."""
        shape = ZPoint.of(*shape)
        return cls(ZPoint.zeros_like(shape), shape)

    @classmethod
    def bounding_range(cls, *ranges: ZRange | Iterable[ZRange]) -> ZRange:
        """
        The smallest range containing every given range.

        Raises:
            ValueError: If no ranges are given.
            DimensionMismatchError: If the ranges differ in dimensions.
        """
        if len(ranges) == 1 and not isinstance(ranges[0], ZRange):
            ranges = tuple(ranges[0])
        if not ranges:
            raise ValueError("no ranges")
        first = ranges[0]
        start, end = first.start.coords, first.end.coords
        for r in ranges[1:]:
            assert_same_ndim(first, r)
            start = tuple(map(min, start, r.start.coords))
            end = tuple(map(max, end, r.end.coords))
        return cls(start, end)

    @classmethod
    def parse(cls, text: str) -> ZRange:
        """
        Parse either the JSON form or the pretty ``zr[2:4, 3:5]`` form.
        """
        text = text.strip()
        if text.startswith("{"):
            return cls.from_json(text)
        start, end = serialization.parse_range_string(text)
        return cls(start, end)

    @property
    def ndim(self) -> int:
        return self.start.ndim

    @cached_property
    def shape(self) -> ZPoint:
        return self.end - self.start

    @cached_property
    def size(self) -> int:
        return prod(self.shape.coords)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def shape_array(self, buffer_ownership: BufferOwnership | None = None) -> np.ndarray:
        """
        The shape as an ``intp`` vector, under the given buffer ownership.
        """
        return self.shape.to_array(buffer_ownership)

    @property
    def inclusive_end(self) -> ZPoint:
        """
        The greatest point in the range.

        Raises:
            IndexOutOfRangeError: If the range is empty.
        """
        if self.is_empty:
            raise IndexOutOfRangeError(f"Empty range {self} has no inclusive end", self)
        return self.end - 1

    def resolve_dim(self, dim: int) -> int:
        return self.start.resolve_dim(dim)

    def contains(self, other) -> bool:
        """
        Does this range contain a point, or entirely contain another range?

        A point ``p`` is contained when ``start <= p < end`` on every axis, which
        is never the case for an empty range. A range is contained when
        ``start <= other.start`` and ``other.end <= end``; empty ranges may be
        contained. Operands of another dimensionality are not contained.
        """
        if isinstance(other, ZRange):
            if other.ndim != self.ndim:
                return False
            return self.ndim == 0 or (
                self.start.le(other.start) and other.end.le(self.end)
            )
        point = ZPoint.of(other)
        if point.ndim != self.ndim or self.is_empty:
            return False
        return self.start.le(point) and point.lt(self.end)

    def __contains__(self, other) -> bool:
        return self.contains(other)

    def intersect(self, other: ZRange) -> ZRange:
        """
        The overlap of two ranges. Disjoint ranges produce an empty range, placed
        at the axis-wise maximum of the starts so that the operation commutes.

        Raises:
            DimensionMismatchError: If the ranges differ in dimensions.
        """
        assert_same_ndim(self, other)
        start = tuple(map(max, self.start.coords, other.start.coords))
        end = tuple(map(min, self.end.coords, other.end.coords))
        return ZRange(start, tuple(map(max, start, end)))

    def translate(self, delta) -> ZRange:
        return ZRange(self.start + delta, self.end + delta)

    def permute(self, *permutation: int) -> ZRange:
        return ZRange(self.start.permute(*permutation), self.end.permute(*permutation))

    def split(
        self, dim: int, chunk_size: int | None = None, chunks: Sequence[int] | None = None
    ) -> tuple[ZRange, ...]:
        """
        Split the range along ``dim`` into non-overlapping ranges covering it.

        Args:
            dim: The axis to split on; negative values count from the end.
            chunk_size: Size of each chunk; the last chunk may be smaller.
            chunks: Explicit chunk sizes, which must sum to ``shape[dim]``.

        Returns:
            The sub-ranges, in axis order.
        """
        dim = self.resolve_dim(dim)
        dim_size = self.shape[dim]

        if (chunk_size is None) == (chunks is None):
            raise ValueError("exactly one of chunk_size and chunks must be given")

        if chunk_size is not None:
            if chunk_size <= 0:
                raise ValueError(f"chunk size must be > 0: {chunk_size}")
            if chunk_size >= dim_size:
                return (self,)
            num_chunks = -(-dim_size // chunk_size)
            chunks = [chunk_size] * (num_chunks - 1)
            chunks.append(dim_size - (num_chunks - 1) * chunk_size)
        else:
            chunks = list(chunks)
            if any(c <= 0 for c in chunks):
                raise ValueError(f"chunk size must be > 0: {chunks}")
            if sum(chunks) != dim_size:
                raise ValueError(
                    f"total chunk size ({sum(chunks)}) must be equal to dim size "
                    f"({dim_size}): {chunks}"
                )

        logger.debug("split %s on dim %d into %s", self, dim, chunks)
        if len(chunks) == 1:
            return (self,)

        start = list(self.start.coords)
        end = list(self.end.coords)
        end[dim] = start[dim]
        ranges = []
        for k in chunks:
            end[dim] += k
            ranges.append(ZRange(tuple(start), tuple(end)))
            start[dim] += k
        return tuple(ranges)

    def cartesian_product(self, other) -> ZRange:
        """
        Embed ``other`` after this range's axes; the result has
        ``self.ndim + other.ndim`` dimensions. ``other`` may be a range or a shape.
        """
        if not isinstance(other, ZRange):
            other = ZRange.from_shape(other)
        return ZRange(
            self.start.coords + other.start.coords, self.end.coords + other.end.coords
        )

    def by_coords(
        self, buffer_ownership: BufferOwnership | None = None
    ) -> IterableCoordinates:
        """
        The coordinates of this range as ``intp`` buffers, in row-major order.

        Args:
            buffer_ownership: ``REUSED`` updates and yields one buffer per
                iterator; ``CLONED`` yields a fresh buffer per step. Defaults to
                the ``buffer_ownership`` config option.
        """
        if buffer_ownership is None:
            buffer_ownership = config["buffer_ownership"]
        return IterableCoordinates(self.start.coords, self.end.coords, buffer_ownership)

    def iterate(self) -> IterablePoints:
        """
        The points of this range in row-major order, last axis fastest. The
        result is lazy and may be iterated any number of times.
        """
        return IterablePoints(self.start.coords, self.end.coords)

    def __iter__(self) -> Iterator[ZPoint]:
        return iter(self.iterate())

    def to_range_string(self) -> str:
        return (
            "["
            + ", ".join(f"{s}:{e}" for s, e in zip(self.start, self.end, strict=True))
            + "]"
        )

    def to_shape_string(self) -> str:
        return "‖" + ", ".join(str(k) for k in self.shape) + "‖"

    def __str__(self):
        return "zr" + self.to_range_string()

    def __repr__(self):
        return f"ZRange(start={list(self.start)}, end={list(self.end)})"

    def to_json_data(self) -> dict[str, list[int]]:
        return {"start": self.start.to_json_data(), "end": self.end.to_json_data()}

    @classmethod
    def from_json_data(cls, data: Any) -> ZRange:
        if not isinstance(data, dict) or set(data) != {"start", "end"}:
            raise ValueError(f"Invalid ZRange data: {data!r}")
        return cls(
            ZPoint.from_json_data(data["start"]), ZPoint.from_json_data(data["end"])
        )

    def to_json(self, pretty: bool = False) -> str:
        return serialization.dumps(self.to_json_data(), pretty=pretty)

    @classmethod
    def from_json(cls, text: str) -> ZRange:
        return cls.from_json_data(serialization.loads(text, "ZRange"))


def dimension(shape: Sequence[int], mode: int) -> ZRange:
    """
    The one-dimensional range ``[0, shape[mode])`` of a tensor axis.
    """
    return ZRange.from_shape(shape[fns.resolve_dim(mode, len(shape))])
