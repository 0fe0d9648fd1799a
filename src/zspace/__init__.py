from .block_index import BlockIndex
from .config import config
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidRangeError,
    ZSpaceError,
)
from .indexing import BufferOwnership, IterableCoordinates, IterablePoints
from .point import ZPoint
from .range import ZRange, dimension
from .streams import Stream, for_each, group_by, stream, to_list
from .validation import ValidationError, ValidationIssue, ValidationIssueCollector

__all__ = [
    "BlockIndex",
    "BufferOwnership",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidRangeError",
    "IterableCoordinates",
    "IterablePoints",
    "Stream",
    "ValidationError",
    "ValidationIssue",
    "ValidationIssueCollector",
    "ZPoint",
    "ZRange",
    "ZSpaceError",
    "config",
    "dimension",
    "for_each",
    "group_by",
    "stream",
    "to_list",
]
