"""
Exception hierarchy for PyWLS.

All exceptions inherit from PyWLSError to allow catching any
library-specific error.

Design principles:
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - A degenerate fit is not an error; it is reported as None
"""


class PyWLSError(Exception):
    """Base exception for all PyWLS errors."""
    pass


class ValidationError(PyWLSError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    or non-finite values, too few samples, unsupported precision.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not one-dimensional or when the x, y and
    weights sequences do not have the same length.

    Attributes:
        lengths: Mapping of parameter name to observed length, if known
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths
