from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from ..config import config
from ..errors import DimensionMismatchError, InvalidRangeError
from .buffer_ownership import BufferOwnership
from .fns import INTP_MAX, check_intp, unravel


class IterableCoordinates(Iterable[np.ndarray]):
    """
    A restartable view over the coordinates of ``[start, end)`` in row-major order.

    Each call to ``iter()`` creates an independent cursor. When the buffer
    ownership is ``REUSED`` the cursor owns a single buffer which is updated in
    place and yielded on every step. That buffer is read-only to the caller;
    copy it to keep or modify a coordinate. When it is ``CLONED`` every step
    yields a fresh writable copy.

    Empty ranges produce no coordinates. Zero-dimensional ranges produce a single
    empty coordinate.
    """

    def __init__(
        self,
        start: Sequence[int],
        end: Sequence[int] | None = None,
        buffer_ownership: BufferOwnership | str | None = None,
    ):
        if end is None:
            start, end = (0,) * len(start), start
        if len(start) != len(end):
            raise DimensionMismatchError(
                f"start {list(start)} and end {list(end)} differ in dimensions",
                tuple(start),
                tuple(end),
            )
        if any(s > e for s, e in zip(start, end, strict=True)):
            raise InvalidRangeError(
                f"start {list(start)} must be <= end {list(end)}",
                tuple(start),
                tuple(end),
            )
        self.start = tuple(check_intp(s) for s in start)
        self.end = tuple(check_intp(e) for e in end)
        if buffer_ownership is None:
            buffer_ownership = config["buffer_ownership"]
        self.buffer_ownership = BufferOwnership.from_name(buffer_ownership)
        self.shape = tuple(e - s for s, e in zip(self.start, self.end, strict=True))
        if any(k > INTP_MAX for k in self.shape):
            raise InvalidRangeError(
                f"shape {list(self.shape)} is outside the intp range",
                self.start,
                self.end,
            )
        size = 1
        for k in self.shape:
            size *= k
        self.size = size

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return CoordIterator(self)

    def __getitem__(self, i: int) -> Any:
        """
        The ``i``-th coordinate in iteration order.

        Raises:
            IndexOutOfRangeError: If ``i`` is outside ``[-size, size)``.
        """
        offset = unravel(self.shape, i)
        coords = np.asarray(
            [s + o for s, o in zip(self.start, offset, strict=True)], dtype=np.intp
        )
        return self._emit(coords)

    def _emit(self, buf: np.ndarray) -> Any:
        return self.buffer_ownership.apply(buf)

    def stream(self):
        from ..streams import Stream

        return Stream(self)

    def __repr__(self):
        return (
            f"{type(self).__name__}(start={list(self.start)}, end={list(self.end)}, "
            f"buffer_ownership={self.buffer_ownership.name})"
        )


class CoordIterator(Iterator[Any]):
    """
    A cursor over an :class:`IterableCoordinates`. Advances the last axis first
    and carries into earlier axes on rollover.
    """

    def __init__(self, coords: IterableCoordinates):
        self._coords = coords
        self._start = coords.start
        self._end = coords.end
        self.remaining = coords.size
        self._current: np.ndarray | None = None

    @property
    def buffer_ownership(self) -> BufferOwnership:
        return self._coords.buffer_ownership

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if self.remaining <= 0:
            raise StopIteration
        self.remaining -= 1

        current = self._current
        if current is None:
            current = np.array(self._start, dtype=np.intp)
            self._current = current
        else:
            current.flags.writeable = True
            i = len(current) - 1
            current[i] += 1
            while i > 0 and current[i] == self._end[i]:
                current[i] = self._start[i]
                i -= 1
                current[i] += 1
        current.flags.writeable = False

        return self._coords._emit(current)


class IterablePoints(IterableCoordinates):
    """
    The coordinates of ``[start, end)`` as immutable :class:`ZPoint` values.
    """

    def __init__(self, start: Sequence[int], end: Sequence[int] | None = None):
        super().__init__(start, end, BufferOwnership.REUSED)

    def _emit(self, buf: np.ndarray) -> Any:
        from ..point import ZPoint

        return ZPoint(buf)
