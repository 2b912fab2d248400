"""
Single-predictor weighted least-squares regression.

Public API:
    WLS(x, y, weights=None, *, dtype=None) -> estimator
    WLS.fit_linear_regression() -> LinearFit | None
    fit(x, y, weights=None, *, dtype=None) -> LinearFit | None

Example:
    >>> from pywls.regression import WLS
    >>> line = WLS([1, 2, 3], [2, 4, 6]).fit_linear_regression()
    >>> float(line.get_slope())
    2.0
"""

from pywls.regression.design import WLS, MIN_SAMPLES
from pywls.regression.solution import LinearFit
from pywls.regression.solvers import fit

__all__ = [
    "fit",
    "WLS",
    "LinearFit",
    "MIN_SAMPLES",
]
