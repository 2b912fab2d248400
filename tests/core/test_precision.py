"""
Tests for working-precision resolution and tolerance tiers.
"""

import numpy as np
import pytest

from pywls.core.exceptions import ValidationError
from pywls.core.precision import (
    SUPPORTED_DTYPES,
    check_dtype,
    resolve_dtype,
)
from pywls.core.tolerances import FP32, FP64, select_tolerance


class TestCheckDtype:

    @pytest.mark.parametrize("dtype", [np.float32, np.float64, "float32", "f8"])
    def test_supported(self, dtype):
        assert check_dtype(dtype) in SUPPORTED_DTYPES

    @pytest.mark.parametrize("dtype", [np.float16, np.int64, "complex128"])
    def test_unsupported(self, dtype):
        with pytest.raises(ValidationError, match="unsupported precision"):
            check_dtype(dtype)

    def test_not_understood(self):
        with pytest.raises(ValidationError, match="not understood"):
            check_dtype("not-a-dtype")


class TestResolveDtype:

    def test_all_float32_stays_float32(self):
        a = np.zeros(3, dtype=np.float32)
        assert resolve_dtype(a, a) == np.float32

    def test_mixed_promotes_to_float64(self):
        a = np.zeros(3, dtype=np.float32)
        b = np.zeros(3, dtype=np.float64)
        assert resolve_dtype(a, b) == np.float64

    def test_integers_promote_to_float64(self):
        a = np.arange(3)
        assert resolve_dtype(a, a) == np.float64

    def test_explicit_dtype_wins(self):
        a = np.zeros(3, dtype=np.float64)
        assert resolve_dtype(a, dtype=np.float32) == np.float32

    def test_no_arrays_defaults_to_float64(self):
        assert resolve_dtype() == np.float64


class TestTolerances:

    def test_float32_tier(self):
        assert select_tolerance(np.float32) is FP32

    def test_float64_tier(self):
        assert select_tolerance(np.float64) is FP64

    def test_fp32_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol
