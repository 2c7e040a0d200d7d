"""Pytest configuration and fixtures for boundingspace tests."""

import pytest

from boundingspace import bounding_space

DIMS = [1, 2, 3, 7]


@pytest.fixture(params=DIMS, ids=lambda d: 'dim%d' % d)
def space(request):
    """Region class for each tested dimension."""
    return bounding_space(request.param)


@pytest.fixture(scope='session')
def spark_context():
    pyspark = pytest.importorskip('pyspark')
    try:
        sc = pyspark.SparkContext('local[2]', 'boundingspace-tests')
    except Exception as exc:
        pytest.skip('spark runtime unavailable: %s' % exc)
    yield sc
    sc.stop()
