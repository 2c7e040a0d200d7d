class DimensionError(ValueError):
    """Raised when a dimension is invalid or a point has the wrong shape."""
