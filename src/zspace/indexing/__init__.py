from .buffer_ownership import BufferOwnership
from .coordinates import CoordIterator, IterableCoordinates, IterablePoints
from .fns import (
    INTP_MAX,
    INTP_MIN,
    check_intp,
    permute,
    ravel,
    resolve_dim,
    resolve_index,
    resolve_permutation,
    shape_to_size,
    shape_to_strides,
    unravel,
)

__all__ = [
    "INTP_MAX",
    "INTP_MIN",
    "BufferOwnership",
    "CoordIterator",
    "IterableCoordinates",
    "IterablePoints",
    "check_intp",
    "permute",
    "ravel",
    "resolve_dim",
    "resolve_index",
    "resolve_permutation",
    "shape_to_size",
    "shape_to_strides",
    "unravel",
]
