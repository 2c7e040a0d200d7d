"""Axis-aligned bounding regions over real-valued numpy points.

A region class is fixed to one dimension and one floating dtype; get one with
:func:`bounding_space` or use the ready-made ``BoundingSpace1/2/3`` aliases.
Points are 1-D arrays (or anything ``numpy.asarray`` accepts) of length
``dim``; a bare scalar is accepted by one-dimensional regions.

Corners are never validated, so a region may be *inverted* (some lower
component above the upper one, or NaN).  The supported way to start an
enclosure from nothing is to seed with NaN and expand::

    box = BoundingBox.empty()
    for p in points:
        box.expand(p)

Expansion uses ``numpy.fmin``/``numpy.fmax``, which discard NaN in favour of
the other operand, so the first real point replaces the seed.
"""

import logging

import numpy as np

from boundingspace.config import settings
from boundingspace.errors import DimensionError

logger = logging.getLogger(__name__)

_classes = {}


def bounding_space(dim, dtype=None):
    """Return the region class for ``dim`` components of ``dtype``.

    Classes are cached, so the same arguments always give the same class.
    """
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) \
            or dim < 1:
        raise DimensionError(
            'dimension must be a positive integer, got %r' % (dim,))
    dtype = np.dtype(settings.default_dtype if dtype is None else dtype)
    if dtype.kind != 'f':
        raise TypeError(
            'bounding regions need a floating dtype, got %s' % dtype)
    key = (int(dim), dtype)
    cls = _classes.get(key)
    if cls is None:
        name = 'BoundingSpace%d' % key[0]
        if dtype != np.float64:
            name += '_' + dtype.name
        cls = type(name, (BoundingSpaceN,),
                   {'dim': key[0], 'dtype': dtype, '__module__': __name__})
        # first class stored wins when threads race on the same key
        cls = _classes.setdefault(key, cls)
        logger.debug('created region class %s', name)
    return cls


def _rebuild(dim, dtype, lower, upper):
    return bounding_space(dim, dtype)(lower, upper)


class BoundingSpaceN(object):
    """Closed axis-aligned hyperrectangle ``[lower, upper]``.

    Abstract over the dimension; instantiate a class from
    :func:`bounding_space` instead.
    """

    dim = None
    dtype = np.dtype(np.float64)

    def __init__(self, lower=None, upper=None):
        if self.dim is None:
            raise TypeError('use bounding_space(dim) to get a region class')
        if lower is None:
            if upper is not None:
                raise TypeError('upper given without lower')
            lower = upper = np.zeros(self.dim, dtype=self.dtype)
        self.lower = lower
        self.upper = upper if upper is not None else lower

    # corners are always owned copies in the class dtype, so expansion can
    # write into them in place
    @property
    def lower(self):
        return self._lower

    @lower.setter
    def lower(self, point):
        self._lower = self._corner(point)

    @property
    def upper(self):
        return self._upper

    @upper.setter
    def upper(self, point):
        self._upper = self._corner(point)

    @classmethod
    def _coords(cls, point):
        coords = np.atleast_1d(np.asarray(point, dtype=cls.dtype))
        if coords.shape != (cls.dim,):
            raise DimensionError('expected a point of shape (%d,), got %s' % (
                cls.dim, coords.shape))
        return coords

    @classmethod
    def _corner(cls, point):
        return cls._coords(point).copy()

    @classmethod
    def from_point(cls, point):
        """Degenerate region holding exactly ``point``."""
        return cls(point, point)

    @classmethod
    def from_value(cls, value):
        corner = np.full(cls.dim, value, dtype=cls.dtype)
        return cls(corner, corner)

    @classmethod
    def from_values(cls, lower, upper):
        """Fill every lower component with ``lower`` and every upper one with
        ``upper``. The two are not compared."""
        return cls(np.full(cls.dim, lower, dtype=cls.dtype),
                   np.full(cls.dim, upper, dtype=cls.dtype))

    @classmethod
    def default(cls):
        return cls()

    @classmethod
    def empty(cls):
        """NaN-seeded region, replaced by the first expansion."""
        return cls.from_value(np.nan)

    def diagonal(self):
        return self.upper - self.lower

    def contains(self, point):
        """True if ``point`` lies in the closed region.

        Any NaN component, in the point or in either corner, fails the test.
        """
        p = self._coords(point)
        return bool(np.all(self.lower <= p) and np.all(self.upper >= p))

    def is_inverted(self):
        return bool(np.any(~(self.lower <= self.upper)))

    def expand_lower(self, point):
        np.fmin(self._coords(point), self.lower, out=self.lower)

    def expand_upper(self, point):
        np.fmax(self._coords(point), self.upper, out=self.upper)

    def expand(self, point):
        """Grow the region just enough to enclose ``point``."""
        p = self._coords(point)
        self.expand_lower(p)
        self.expand_upper(p)

    def copy(self):
        return type(self)(self.lower, self.upper)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __reduce__(self):
        return _rebuild, (self.dim, self.dtype.str, self.lower, self.upper)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.lower, other.lower)
                    and np.array_equal(self.upper, other.upper))

    __hash__ = None

    def __repr__(self):
        return '%s(lower=%s\n\tupper=%s)' % (
            type(self).__name__, str(self.lower), str(self.upper))


BoundingSpace1 = bounding_space(1, np.float64)
BoundingSpace2 = bounding_space(2, np.float64)
BoundingSpace3 = bounding_space(3, np.float64)

BoundingRange = BoundingSpace1
BoundingSquare = BoundingSpace2
BoundingBox = BoundingSpace3
