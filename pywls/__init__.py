"""
PyWLS: weighted least-squares line fitting for Python.

Fits the closed-form single-predictor weighted least-squares line in
float32 or float64, with input validation that raises catchable errors
and a degenerate-data outcome reported as None.

Submodules:
    regression: WLS estimator, LinearFit result, fit()
    core: Exceptions, validation, precision and tolerance utilities
"""

import logging

__version__ = "0.1.0"

from pywls.core.exceptions import PyWLSError, ValidationError, DimensionError
from pywls.regression import WLS, LinearFit, fit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "WLS",
    "LinearFit",
    "fit",
    "PyWLSError",
    "ValidationError",
    "DimensionError",
]
