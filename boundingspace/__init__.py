"""Axis-aligned bounding regions in any fixed dimension."""

from boundingspace.aggregate import enclose, enclose_rdd
from boundingspace.config import settings, setup_logging
from boundingspace.errors import DimensionError
from boundingspace.geometry import (BoundingBox, BoundingRange,
                                    BoundingSpace1, BoundingSpace2,
                                    BoundingSpace3, BoundingSpaceN,
                                    BoundingSquare, bounding_space)

__version__ = '0.1.0'
__all__ = [
    'BoundingSpaceN',
    'BoundingSpace1',
    'BoundingSpace2',
    'BoundingSpace3',
    'BoundingRange',
    'BoundingSquare',
    'BoundingBox',
    'DimensionError',
    'bounding_space',
    'enclose',
    'enclose_rdd',
    'settings',
    'setup_logging',
]
