"""
Numerical precision resolution.

The estimator works in one floating-point precision for its whole
lifetime: storage, every accumulation, and the zero test on the divisor.
This module decides which precision that is.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from pywls.core.exceptions import ValidationError


# Precisions the estimator is generic over
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (np.dtype(np.float32), np.dtype(np.float64))


def check_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Normalize an explicit precision request.

    Args:
        dtype: np.float32, np.float64, or an equivalent name ('float32', 'f8')

    Returns:
        The matching numpy dtype

    Raises:
        ValidationError: If dtype is not a supported floating precision
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not understood: {dtype!r}") from e

    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: unsupported precision {resolved}, expected one of {supported}"
        )
    return resolved


def resolve_dtype(
    *arrays: NDArray[Any],
    dtype: DTypeLike | None = None,
) -> np.dtype:
    """
    Choose the working precision for a set of input arrays.

    An explicit dtype always wins. Otherwise the inputs decide: if every
    array is already float32 the fit stays in float32, anything else
    (float64, integers, mixed) runs in float64.

    Args:
        *arrays: Validated numeric input arrays
        dtype: Explicit precision, or None to infer

    Returns:
        np.dtype('float32') or np.dtype('float64')
    """
    if dtype is not None:
        return check_dtype(dtype)

    if arrays and all(arr.dtype == np.float32 for arr in arrays):
        return np.dtype(np.float32)
    return np.dtype(np.float64)

