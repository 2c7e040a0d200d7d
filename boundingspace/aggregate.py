"""Bounding regions of whole point sets, local or distributed."""

import logging

import numpy as np

from boundingspace.errors import DimensionError
from boundingspace.geometry import bounding_space

logger = logging.getLogger(__name__)


def _fold_point(region, point):
    region.expand(point)
    return region


def _fold_region(region, other):
    # an empty partition leaves its partial NaN-seeded, which fmin/fmax drop
    region.expand_lower(other.lower)
    region.expand_upper(other.upper)
    return region


def enclose(points, dim=None, dtype=None):
    """Smallest region enclosing every point of an iterable.

    The dimension comes from the first point unless ``dim`` is given. With no
    points the result is the NaN-seeded region, so ``dim`` is then required.
    """
    region = bounding_space(dim, dtype).empty() if dim is not None else None
    count = 0
    for point in points:
        if region is None:
            region = bounding_space(np.size(point), dtype).empty()
        _fold_point(region, point)
        count += 1
    if region is None:
        raise DimensionError('cannot infer the dimension of no points')
    logger.debug('enclosed %d points in %r', count, region)
    return region


def enclose_rdd(rdd, dim, dtype=None, keyed=False):
    """Smallest region enclosing every point of a Spark RDD.

    Each partition expands its own region and the partials are merged on the
    driver. With ``keyed`` the RDD holds ``(key, point)`` pairs.
    """
    cls = bounding_space(dim, dtype)
    if keyed:
        rdd = rdd.values()
    region = rdd.aggregate(cls.empty(), _fold_point, _fold_region)
    logger.debug('enclosed rdd %s in %r', rdd.id(), region)
    return region
