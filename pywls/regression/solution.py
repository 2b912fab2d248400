"""
Regression solution types.

Contains the immutable fit value produced by a successful WLS fit.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class LinearFit:
    """
    Intercept and slope of a fitted line.

    Both values are numpy scalars in the precision the estimator worked
    in. Equality is plain value equality, so two fits compare equal only
    when both floats match exactly.
    """
    intercept: np.floating[Any]
    slope: np.floating[Any]

    def get_intercept(self) -> np.floating[Any]:
        """Value of the fitted line at x = 0."""
        return self.intercept

    def get_slope(self) -> np.floating[Any]:
        """Change in y per unit x along the fitted line."""
        return self.slope

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self.intercept, self.slope)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at x, in the fit's precision."""
        x_arr = np.asarray(x, dtype=self.dtype)
        return self.intercept + self.slope * x_arr

    def __repr__(self) -> str:
        return (
            f"LinearFit(intercept={float(self.intercept)!r}, "
            f"slope={float(self.slope)!r}, dtype={self.dtype})"
        )
