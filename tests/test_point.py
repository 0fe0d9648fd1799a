import pytest

import numpy as np
from numpy.testing import assert_equal

from zspace import BufferOwnership, DimensionMismatchError, IndexOutOfRangeError, ZPoint
from zspace.indexing import INTP_MAX, INTP_MIN


def test_point_attributes():
    p = ZPoint.of(3, -1, 4)

    assert p.ndim == 3
    assert len(p) == 3
    assert list(p) == [3, -1, 4]
    assert p[0] == 3
    assert p[-1] == 4
    assert str(p) == "[3, -1, 4]"
    assert repr(p) == "ZPoint([3, -1, 4])"

    with pytest.raises(IndexOutOfRangeError):
        p[3]


@pytest.mark.parametrize(
    "args",
    [
        ((1, 2),),
        ([1, 2],),
        (1, 2),
        (np.array([1, 2], dtype=np.int32),),
        (ZPoint((1, 2)),),
        ((np.int64(1), np.int64(2)),),
    ],
)
def test_of(args):
    p = ZPoint.of(*args)
    assert p == ZPoint((1, 2))
    assert hash(p) == hash(ZPoint((1, 2)))
    assert all(type(c) is int for c in p.coords)


def test_zero_dim():
    p = ZPoint.of()
    assert p.ndim == 0
    assert p == ZPoint(())
    assert p == ZPoint.zeros(0)
    assert str(p) == "[]"
    assert_equal(p.to_array(), np.zeros(0, dtype=np.intp))


@pytest.mark.parametrize(
    "bad",
    [
        [1.5, 2],
        [True, 0],
        "12",
        np.array([1.0, 2.0]),
    ],
)
def test_non_integer_coords(bad):
    with pytest.raises(TypeError):
        ZPoint(bad)


@pytest.mark.parametrize(
    "coords",
    [
        [INTP_MAX + 1],
        [0, INTP_MIN - 1],
        [2**100],
        np.array([INTP_MAX + 1], dtype=np.uint64),
    ],
)
def test_coords_outside_intp(coords):
    with pytest.raises(ValueError, match="outside the intp range"):
        ZPoint(coords)


def test_intp_bounds():
    p = ZPoint.of(INTP_MIN, INTP_MAX)
    assert_equal(p.to_array(), np.array([INTP_MIN, INTP_MAX], dtype=np.intp))
    with pytest.raises(ValueError):
        p + 1
    with pytest.raises(ValueError):
        -p


def test_constructors():
    assert ZPoint.zeros(3) == ZPoint.of(0, 0, 0)
    assert ZPoint.ones(2) == ZPoint.of(1, 1)
    assert ZPoint.zeros_like([5, 6]) == ZPoint.of(0, 0)
    assert ZPoint.ones_like(ZPoint.of(5, 6, 7)) == ZPoint.of(1, 1, 1)


def test_immutable():
    p = ZPoint.of(1, 2)
    with pytest.raises(AttributeError):
        p.coords = (3, 4)

    arr = p.to_array(BufferOwnership.REUSED)
    with pytest.raises(ValueError):
        arr[0] = 7
    assert p == ZPoint.of(1, 2)


def test_to_array_ownership():
    p = ZPoint.of(1, 2, 3)

    reused = p.to_array(BufferOwnership.REUSED)
    assert reused is p.to_array(BufferOwnership.REUSED)
    assert reused.dtype == np.intp

    cloned = p.to_array(BufferOwnership.CLONED)
    assert cloned is not reused
    assert_equal(cloned, reused)
    cloned[0] = 100
    assert p[0] == 1


def test_dominance_ordering():
    a = ZPoint.of(1, 2)
    b = ZPoint.of(2, 2)

    assert a.le(b)
    assert not a.lt(b)
    assert b.ge(a)
    assert not b.gt(a)
    assert a.lt(3)
    assert not ZPoint.of(1, 5).le(b)
    assert not b.le(ZPoint.of(1, 5))

    with pytest.raises(DimensionMismatchError):
        a.le(ZPoint.of(1, 2, 3))


def test_arithmetic():
    a = ZPoint.of(1, 2)

    assert a + ZPoint.of(10, 20) == ZPoint.of(11, 22)
    assert a + [1, 1] == ZPoint.of(2, 3)
    assert a - 1 == ZPoint.of(0, 1)
    assert -a == ZPoint.of(-1, -2)

    with pytest.raises(DimensionMismatchError) as excinfo:
        a + ZPoint.of(1)
    assert excinfo.value.operands == (a, ZPoint.of(1))


def test_permute():
    p = ZPoint.of(5, 6, 7)
    assert p.permute(1, 2, 0) == ZPoint.of(6, 7, 5)
    assert p.permute([2, 1, 0]) == ZPoint.of(7, 6, 5)
    assert p.permute(-1, 0, 1) == ZPoint.of(7, 5, 6)

    with pytest.raises(ValueError):
        p.permute(0, 0, 1)
    with pytest.raises(DimensionMismatchError):
        p.permute(0, 1)


def test_add_dims():
    p = ZPoint.of(5, 6)
    assert p.add_dims(0, 2) == ZPoint.of(0, 0, 5, 6)
    assert p.add_dims(1, 1) == ZPoint.of(5, 0, 6)
    assert p.add_dims(-1, 1) == ZPoint.of(5, 6, 0)
    assert p.add_dims(0, 0) is p

    with pytest.raises(ValueError):
        p.add_dims(0, -1)
    with pytest.raises(IndexOutOfRangeError):
        p.add_dims(4, 1)


def test_json():
    p = ZPoint.of(3, -4)
    assert p.to_json_data() == [3, -4]
    assert p.to_json() == "[3, -4]"
    assert ZPoint.from_json_data([3, -4]) == p
    assert ZPoint.parse(" [3, -4] ") == p
    assert ZPoint.parse("[]") == ZPoint.of()

    for bad in ["abc", "{}", "[1.5]", '["a"]']:
        with pytest.raises(ValueError):
            ZPoint.parse(bad)
