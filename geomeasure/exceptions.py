"""Errors raised by geomeasure"""

__all__ = [
    'ConvergenceFailure', 'GeoMeasureError', 'InvalidDuration', 'TypeMismatch'
]


class GeoMeasureError(Exception):
    """Base class for all geomeasure errors"""


class TypeMismatch(GeoMeasureError, TypeError):
    """A required point or numeric argument is missing or wrongly shaped"""


class ConvergenceFailure(GeoMeasureError, ArithmeticError):
    """
    An iterative solver reached its iteration cap without converging.

    Typically seen with nearly antipodal points on the inverse problem. Callers
    may fall back to a spherical approximation.
    """

    def __init__(self, operation: str, iterations: int):
        super().__init__(
            f'Vincenty {operation} formula failed to converge after {iterations} iterations'
        )
        self.operation = operation
        self.iterations = iterations


class InvalidDuration(GeoMeasureError, ValueError):
    """Elapsed time is zero or negative"""
