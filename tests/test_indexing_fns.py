import pytest

import numpy as np
from numpy.testing import assert_equal

from zspace import DimensionMismatchError, IndexOutOfRangeError, ZRange
from zspace.indexing import (
    permute,
    ravel,
    resolve_dim,
    resolve_index,
    resolve_permutation,
    shape_to_size,
    shape_to_strides,
    unravel,
)


@pytest.mark.parametrize(
    "idx, size, expected", [(0, 3, 0), (2, 3, 2), (-1, 3, 2), (-3, 3, 0)]
)
def test_resolve_index(idx, size, expected):
    assert resolve_index(idx, size) == expected


@pytest.mark.parametrize("idx, size", [(3, 3), (-4, 3), (0, 0)])
def test_resolve_index_out_of_range(idx, size):
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        resolve_index(idx, size)
    assert excinfo.value.operands == (idx, size)


def test_resolve_dim():
    assert resolve_dim(-1, 4) == 3
    with pytest.raises(IndexOutOfRangeError, match="invalid dimension"):
        resolve_dim(4, 4)


def test_permutations():
    assert resolve_permutation([1, -1, 0], 3) == (1, 2, 0)
    assert permute("abc", [2, 0, 1]) == ("c", "a", "b")
    assert permute((), ()) == ()

    with pytest.raises(ValueError, match="invalid permutation"):
        resolve_permutation([0, 0, 2], 3)
    with pytest.raises(DimensionMismatchError):
        resolve_permutation([0, 1], 3)


def test_shape_to_size():
    assert shape_to_size([2, 3, 4]) == 24
    assert shape_to_size([]) == 1
    assert shape_to_size([3, 0]) == 0
    with pytest.raises(ValueError):
        shape_to_size([2, -1])


def test_shape_to_strides():
    assert_equal(shape_to_strides([2, 3, 4]), [12, 4, 1])
    assert_equal(shape_to_strides([2, 1, 4]), [4, 0, 1])
    assert_equal(shape_to_strides([]), np.zeros(0, dtype=np.intp))
    assert shape_to_strides([5]).dtype == np.intp
    with pytest.raises(ValueError):
        shape_to_strides([2, -1])


def test_ravel_matches_iteration_order():
    shape = (2, 3, 4)
    for flat, coords in enumerate(ZRange.from_shape(shape).iterate()):
        assert ravel(shape, coords) == flat
        assert unravel(shape, flat) == coords.coords
    assert ravel(shape, (1, 2, 3)) == np.ravel_multi_index((1, 2, 3), shape)


def test_ravel_errors():
    with pytest.raises(DimensionMismatchError):
        ravel((2, 3), (1,))
    with pytest.raises(IndexOutOfRangeError):
        ravel((2, 3), (1, 3))
    with pytest.raises(IndexOutOfRangeError):
        unravel((2, 3), 6)
    assert unravel((2, 3), -1) == (1, 2)
    assert unravel((), 0) == ()
