"""Sign tests for floating-point values with a tolerance band around zero."""

DEFAULT_TOLERANCE = 1.0e-10


def is_positive(x: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``x`` is greater than ``tol``."""
    return x > tol


def is_negative(x: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``x`` is less than ``-tol``."""
    return x < -tol


def is_nonzero(x: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``x`` lies outside the band ``[-tol, tol]``."""
    return is_positive(x, tol) or is_negative(x, tol)