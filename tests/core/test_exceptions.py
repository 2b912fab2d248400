"""
Tests for PyWLS exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyWLSError)
    - Validation errors remain catchable as ValueError
    - Diagnostic attributes on DimensionError
"""

import pytest

from pywls.core.exceptions import DimensionError, PyWLSError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyWLSError."""

    def test_validation_error_is_pywls_error(self):
        with pytest.raises(PyWLSError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_dimension_error_is_pywls_error(self):
        with pytest.raises(PyWLSError):
            raise DimensionError("wrong shape")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ValidationError("bad input")

    def test_base_is_exception(self):
        assert issubclass(PyWLSError, Exception)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionErrorAttributes:

    def test_lengths_default_none(self):
        err = DimensionError("wrong shape")
        assert err.lengths is None

    def test_lengths_stored(self):
        err = DimensionError("mismatch", lengths={"x_points": 3, "y_points": 4})
        assert err.lengths == {"x_points": 3, "y_points": 4}

    def test_message_preserved(self):
        err = DimensionError("mismatch", lengths={"x_points": 3})
        assert str(err) == "mismatch"
