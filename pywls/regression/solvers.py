"""
Functional entry point for WLS regression.
"""

from numpy.typing import ArrayLike, DTypeLike

from pywls.regression.design import WLS
from pywls.regression.solution import LinearFit


def fit(
    x: ArrayLike,
    y: ArrayLike,
    weights: ArrayLike | None = None,
    *,
    dtype: DTypeLike | None = None,
) -> LinearFit | None:
    """
    Fit a weighted least-squares line.

    Solves the single-predictor weighted least-squares problem:
        min_{a,b} sum_i w_i (y_i - a - b x_i)²

    Validation happens in the WLS constructor; this is a one-shot
    shorthand for WLS(x, y, weights, dtype=dtype).fit_linear_regression().

    Args:
        x: Sample x coordinates
        y: Sample y coordinates
        weights: Per-sample weights, or None for uniform weights
        dtype: Working precision, or None to infer from the inputs

    Returns:
        LinearFit, or None if the data admit no unique line

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If x, y and weights have inconsistent lengths

    Example:
        >>> from pywls import fit
        >>> line = fit([0.0, 1.0], [0.0, 1.0])
        >>> float(line.slope), float(line.intercept)
        (1.0, 0.0)
    """
    return WLS(x, y, weights, dtype=dtype).fit_linear_regression()
