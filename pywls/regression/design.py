"""
WLS estimator.

WLS owns the paired samples and their weights. It validates them once at
construction and from then on is read-only: every call to
fit_linear_regression() recomputes the closed-form single-predictor
weighted least-squares line from the stored arrays.
"""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pywls.core.precision import resolve_dtype
from pywls.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_representable,
)
from pywls.regression.solution import LinearFit

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

# Two points fix a line; one point never does
MIN_SAMPLES = 2


class WLS:
    """
    Weighted least-squares fit of a single-predictor line.

    Construction:
        WLS(x, y)                         # uniform weights (plain OLS)
        WLS(x, y, weights)                # per-sample weights
        WLS(x, y, dtype=np.float32)       # force single precision
        WLS.from_dataframe(df, x='a', y='b', weights='w')

    Args:
        x_points: Sample x coordinates (1D array-like)
        y_points: Sample y coordinates, index-aligned with x_points
        weights: Per-sample weights, index-aligned with x_points, or None
            for a weight of 1 on every sample. Weight sign is not checked:
            a zero weight removes a sample's influence and negative weights
            are used as given.
        dtype: Working precision (np.float32 or np.float64). None keeps
            float32 when every input is float32, otherwise float64.

    Raises:
        ValidationError: Non-numeric or non-finite input, values too large
            for the working precision, fewer than MIN_SAMPLES samples, or
            unsupported dtype
        DimensionError: Input not 1D, or x/y/weights lengths differ
    """

    def __init__(
        self,
        x_points: ArrayLike,
        y_points: ArrayLike,
        weights: ArrayLike | None = None,
        *,
        dtype: DTypeLike | None = None,
    ):
        x_arr = check_array(x_points, 'x_points')
        y_arr = check_array(y_points, 'y_points')
        check_1d(x_arr, 'x_points')
        check_1d(y_arr, 'y_points')
        check_consistent_length(x_arr, y_arr, names=('x_points', 'y_points'))

        arrays = [x_arr, y_arr]
        if weights is not None:
            w_arr = check_array(weights, 'weights')
            check_1d(w_arr, 'weights')
            check_consistent_length(x_arr, w_arr, names=('x_points', 'weights'))
            arrays.append(w_arr)

        check_min_samples(x_arr, MIN_SAMPLES, 'x_points')

        names = ('x_points', 'y_points', 'weights')
        for arr, name in zip(arrays, names):
            check_finite(arr, name)

        self._dtype = resolve_dtype(*arrays, dtype=dtype)
        for arr, name in zip(arrays, names):
            check_representable(arr, self._dtype, name)

        self._x = _readonly_copy(x_arr, self._dtype)
        self._y = _readonly_copy(y_arr, self._dtype)

        self._is_weighted = weights is not None
        if self._is_weighted:
            self._w = _readonly_copy(arrays[2], self._dtype)
        else:
            self._w = np.ones(self._x.shape[0], dtype=self._dtype)
            self._w.flags.writeable = False

        logger.debug(
            "WLS estimator: n=%d dtype=%s weighted=%s",
            self.n, self._dtype, self._is_weighted,
        )

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        x: str,
        y: str,
        weights: str | None = None,
        dtype: DTypeLike | None = None,
    ) -> WLS:
        """
        Build an estimator from named columns of a pandas DataFrame.

        Args:
            df: Source table
            x: Column holding x coordinates
            y: Column holding y coordinates
            weights: Column holding weights, or None for uniform weights
            dtype: Working precision, as for the constructor

        Raises:
            KeyError: If a named column is missing
        """
        columns = [x, y] if weights is None else [x, y, weights]
        missing = [col for col in columns if col not in df.columns]
        if missing:
            raise KeyError(
                f"DataFrame has no column(s) {missing}. Available: {list(df.columns)}"
            )

        w_arr = None if weights is None else df[weights].to_numpy()
        return cls(df[x].to_numpy(), df[y].to_numpy(), w_arr, dtype=dtype)

    # === Properties ===

    @property
    def x_points(self) -> NDArray[np.floating[Any]]:
        """Sample x coordinates (read-only)."""
        return self._x

    @property
    def y_points(self) -> NDArray[np.floating[Any]]:
        """Sample y coordinates (read-only)."""
        return self._y

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Per-sample weights; all ones when none were supplied (read-only)."""
        return self._w

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._x.shape[0]

    @property
    def dtype(self) -> np.dtype:
        """Working precision."""
        return self._dtype

    @property
    def is_weighted(self) -> bool:
        """True if the caller supplied weights."""
        return self._is_weighted

    # === Fitting ===

    def fit_linear_regression(self) -> LinearFit | None:
        """
        Fit the weighted least-squares line.

        Accumulates five weighted sums over the samples, in the working
        precision:

            Sw   = sum(w)         Swx  = sum(x*w)
            Swy  = sum(y*w)       Swxy = sum(x*w*y)
            Swxx = sum(x*w*x)

        and solves

            slope     = (Sw*Swxy - Swx*Swy) / (Sw*Swxx - Swx*Swx)
            intercept = (Swy - slope*Swx) / Sw

        Sums or products that overflow the working precision, and a zero
        sum of weights, give a LinearFit with non-finite (inf or NaN)
        values instead of a warning.

        Returns:
            LinearFit, or None when the divisor is exactly zero (no unique
            line fits the weighted data, e.g. every x identical)
        """
        x, y, w = self._x, self._y, self._w

        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            xw = x * w
            sum_w = np.sum(w)
            sum_xw = np.sum(xw)
            sum_xwy = np.sum(xw * y)
            sum_yw = np.sum(y * w)
            sum_xwx = np.sum(xw * x)

            dividend = sum_w * sum_xwy - sum_xw * sum_yw
            divisor = sum_w * sum_xwx - sum_xw * sum_xw

        if divisor == 0:
            logger.debug(
                "Degenerate WLS fit: zero weighted variance in x (n=%d)", self.n
            )
            return None

        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            slope = dividend / divisor
            intercept = (sum_yw - slope * sum_xw) / sum_w

        if not (np.isfinite(slope) and np.isfinite(intercept)):
            logger.debug("Non-finite WLS fit (n=%d, dtype=%s)", self.n, self._dtype)

        return LinearFit(intercept=intercept, slope=slope)

    def __repr__(self) -> str:
        return (
            f"WLS(n={self.n}, dtype={self._dtype}, "
            f"weighted={self._is_weighted})"
        )


def _readonly_copy(array: NDArray[Any], dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """Private, immutable copy of array in the working precision."""
    result = array.astype(dtype, copy=True)
    result.flags.writeable = False
    return result
