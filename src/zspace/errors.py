"""
Error types raised by zspace. Each error carries a stable ``kind`` string and the
offending ``operands`` so that an external issue collector can report it without
parsing the message.
"""

from typing import Any


class ZSpaceError(Exception):
    kind = "zspace_error"

    def __init__(self, message: str, *operands: Any):
        super().__init__(message)
        self.message = message
        self.operands = operands

    def as_dict(self) -> dict[str, Any]:
        """
        Structured form of the error: its kind, message and offending operands.
        """
        return {
            "kind": self.kind,
            "message": self.message,
            "operands": [_operand_data(op) for op in self.operands],
        }


class DimensionMismatchError(ZSpaceError, ValueError):
    kind = "dimension_mismatch"


class InvalidRangeError(ZSpaceError, ValueError):
    kind = "invalid_range"


class IndexOutOfRangeError(ZSpaceError, IndexError):
    kind = "index_out_of_range"


def _operand_data(op: Any) -> Any:
    if hasattr(op, "to_json_data"):
        return op.to_json_data()
    if hasattr(op, "tolist"):
        return op.tolist()
    if isinstance(op, tuple):
        return list(op)
    return op


def assert_same_ndim(lhs, rhs) -> int:
    """
    Check that two dimensioned values agree on their number of dimensions.

    Args:
        lhs: Anything with an ``ndim`` attribute or a length.
        rhs: Anything with an ``ndim`` attribute or a length.

    Returns:
        The shared number of dimensions.

    Raises:
        DimensionMismatchError: If the dimensions differ.
    """
    lhs_ndim = getattr(lhs, "ndim", None)
    if lhs_ndim is None:
        lhs_ndim = len(lhs)
    rhs_ndim = getattr(rhs, "ndim", None)
    if rhs_ndim is None:
        rhs_ndim = len(rhs)
    if lhs_ndim != rhs_ndim:
        raise DimensionMismatchError(
            f"ndim mismatch: {lhs_ndim} != {rhs_ndim} for {lhs} and {rhs}", lhs, rhs
        )
    return int(lhs_ndim)
