"""
Tolerance tiers for numerical comparison of fits.

Defines precision expectations for the two supported compute paths:
- FP64: double precision, near machine precision
- FP32: relaxed for single-precision arithmetic

Used by the test suite and by callers comparing fits across precisions.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier matching a working precision."""
    if np.dtype(dtype) == np.float32:
        return FP32
    return FP64
