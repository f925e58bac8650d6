"""
Exception hierarchy for PyMardia.

All exceptions inherit from PyMardiaError so callers can catch any
library-specific failure with a single clause. The pipeline has no
partial-result or retry semantics: every error here is terminal for the
current test run.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMardiaError(Exception):
    """Base exception for all PyMardia errors."""
    pass


class ValidationError(PyMardiaError):
    """
    Input validation failed.

    Raised when the sample matrix or configuration fails validation
    checks (zero rows, zero columns, non-numeric or non-finite data).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when the input is not a 2D matrix, when rows have different
    lengths, or when a mean vector and covariance matrix disagree.
    """
    pass


class RangeError(ValidationError):
    """
    Requested row or column sub-range exceeds the matrix dimensions.

    Attributes:
        axis: 'row' or 'column'
        start: Requested start index (inclusive)
        stop: Requested stop index (exclusive)
        size: Length of the matrix along that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        start: int | None = None,
        stop: int | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.start = start
        self.stop = stop
        self.size = size


class NumericalError(PyMardiaError):
    """
    Numerical computation failed.

    Base class for errors arising from linear algebra on the covariance
    matrix.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically rank-deficient.

    Raised when a Mahalanobis quadratic form is requested but the
    covariance matrix cannot be solved against (m <= n, or collinear
    columns).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the number of variables)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when the synthetic sampler cannot Cholesky-factor the
    covariance matrix. Only the simulation path raises this.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_eigenvalue: Minimum eigenvalue, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_eigenvalue: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_eigenvalue = min_eigenvalue
