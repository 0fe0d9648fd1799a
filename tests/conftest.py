import pytest

from numpy.random import default_rng

from zspace import ZRange


@pytest.fixture
def rng():
    return default_rng(42)


@pytest.fixture
def random_range(rng):
    def _random_range(ndim, low=-4, high=5, max_extent=4):
        """
        Draws a range with ``ndim`` axes. Starts are uniform in ``[low, high)``
        and each axis extent is uniform in ``[0, max_extent]``, so empty ranges
        are drawn as well.
        """
        start = rng.integers(low, high, size=ndim)
        extent = rng.integers(0, max_extent + 1, size=ndim)
        return ZRange.of(start, start + extent)

    return _random_range


@pytest.fixture
def range_pairs(random_range):
    return [(random_range(ndim), random_range(ndim)) for ndim in (0, 1, 2, 3) * 8]


@pytest.fixture
def isolate_config(monkeypatch):
    for var in ("ZSPACE_BUFFER_OWNERSHIP", "ZSPACE_JSON_INDENT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
