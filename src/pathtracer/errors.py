# errors.py


class PathTracerError(Exception):
    """Base class for all errors raised by the path tracer."""


class ConfigurationError(PathTracerError, ValueError):
    """
    Raised when render options cannot produce a valid camera, e.g. a zero
    aspect ratio or a look-from point equal to the look-at point.
    """


class DegenerateVectorError(PathTracerError, ValueError):
    """Raised when a zero-length vector is normalized."""
