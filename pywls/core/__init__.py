"""
Core infrastructure for PyWLS.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Working precision resolution
    tolerances: Comparison tolerances per precision
"""

from pywls.core.exceptions import (
    PyWLSError,
    ValidationError,
    DimensionError,
)

__all__ = [
    "PyWLSError",
    "ValidationError",
    "DimensionError",
]
