from collections.abc import Sequence
from math import prod
from operator import index

import numpy as np

from ..errors import DimensionMismatchError, IndexOutOfRangeError

INTP_MIN = int(np.iinfo(np.intp).min)
INTP_MAX = int(np.iinfo(np.intp).max)


def check_intp(value: int, msg: str = "coordinate") -> int:
    """
    Check that ``value`` fits in an ``intp`` buffer slot.

    Raises:
        ValueError: If ``value`` is outside ``[INTP_MIN, INTP_MAX]``.
    """
    value = index(value)
    if value < INTP_MIN or value > INTP_MAX:
        raise ValueError(
            f"{msg} {value} is outside the intp range [{INTP_MIN}, {INTP_MAX}]"
        )
    return value


def resolve_index(idx: int, size: int, msg: str = "index") -> int:
    """
    Resolve a possibly negative index against a size, python style.

    Raises:
        IndexOutOfRangeError: If ``idx`` is not in ``[-size, size)``.
    """
    res = index(idx)
    if res < 0:
        res += size
    if res < 0 or res >= size:
        raise IndexOutOfRangeError(
            f"{msg}: index {idx} out of range [0, {size})", idx, size
        )
    return res


def resolve_dim(dim: int, ndim: int) -> int:
    return resolve_index(dim, ndim, "invalid dimension")


def resolve_permutation(permutation: Sequence[int], ndim: int) -> tuple[int, ...]:
    """
    Resolve each entry of a permutation and check that it is a bijection on
    ``range(ndim)``.
    """
    if len(permutation) != ndim:
        raise DimensionMismatchError(
            f"permutation {list(permutation)} does not have {ndim} dimensions",
            tuple(permutation),
            ndim,
        )
    perm = tuple(resolve_dim(d, ndim) for d in permutation)
    if sorted(perm) != list(range(ndim)):
        raise ValueError(f"invalid permutation: {list(permutation)}")
    return perm


def permute(arr: Sequence, permutation: Sequence[int]) -> tuple:
    perm = resolve_permutation(permutation, len(arr))
    return tuple(arr[p] for p in perm)


def shape_to_size(shape: Sequence[int]) -> int:
    if any(k < 0 for k in shape):
        raise ValueError(f"shape must be non-negative: {list(shape)}")
    return prod(shape)


def shape_to_strides(shape: Sequence[int]) -> np.ndarray:
    """
    Row-major strides for ``shape``, with a zero stride on unit and empty axes.

    Args:
        shape: The extent of each axis.

    Returns:
        An ``intp`` vector of strides, the last axis varying fastest.
    """
    stride = np.zeros(len(shape), dtype=np.intp)
    s = 1
    for i in reversed(range(len(shape))):
        k = shape[i]
        if k < 0:
            raise ValueError(f"shape must be non-negative: {list(shape)}")
        if k in (0, 1):
            continue
        stride[i] = s
        s *= k
    return stride


def ravel(shape: Sequence[int], coords: Sequence[int]) -> int:
    """
    Row-major flat offset of ``coords`` within ``shape``.
    """
    if len(coords) != len(shape):
        raise DimensionMismatchError(
            f"shape {list(shape)} and coords {list(coords)} differ in dimensions",
            tuple(shape),
            tuple(coords),
        )
    offset = 0
    for k, c in zip(shape, coords, strict=True):
        if c < 0 or c >= k:
            raise IndexOutOfRangeError(
                f"coords {list(coords)} are out of bounds of shape {list(shape)}",
                tuple(coords),
                tuple(shape),
            )
        offset = offset * k + c
    return offset


def unravel(shape: Sequence[int], flat: int) -> tuple[int, ...]:
    """
    Inverse of :func:`ravel`. Negative offsets count from the end.
    """
    flat = resolve_index(flat, shape_to_size(shape), "flat offset")
    coords = [0] * len(shape)
    for i in reversed(range(len(shape))):
        flat, coords[i] = divmod(flat, shape[i])
    return tuple(coords)
