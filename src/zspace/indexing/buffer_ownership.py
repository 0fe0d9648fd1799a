import copy
from enum import Enum
from typing import TypeVar, assert_never

import numpy as np

T = TypeVar("T")


class BufferOwnership(Enum):
    """
    Whether an operation that hands an array to the caller returns its own
    backing storage or an independent copy.

    ``REUSED`` hands back the same object; the caller must treat it as read-only,
    and an iterator may overwrite it on the next step. ``CLONED`` hands back a
    fresh copy which the caller owns.
    """

    REUSED = "reused"
    CLONED = "cloned"

    @classmethod
    def from_name(cls, name: "str | BufferOwnership") -> "BufferOwnership":
        if isinstance(name, BufferOwnership):
            return name
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown buffer ownership {name!r}, expected one of "
                f"{[m.name for m in cls]}"
            ) from None

    def apply(self, buffer: T) -> T:
        match self:
            case BufferOwnership.REUSED:
                return buffer
            case BufferOwnership.CLONED:
                return _clone(buffer)
            case _:
                assert_never(self)


def _clone(buffer):
    match buffer:
        case np.ndarray():
            return buffer.copy()
        case list():
            return list(buffer)
        case bytearray():
            return bytearray(buffer)
        case _:
            res = copy.copy(buffer)
            if res is buffer:
                # immutable sequences copy to themselves
                res = list(buffer)
            return res
