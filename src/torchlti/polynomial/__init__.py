"""Laurent polynomials in power basis."""

from ._laurent_polynomial import LaurentPolynomial, laurent_polynomial
from ._laurent_polynomial_evaluate import laurent_polynomial_evaluate
from ._laurent_polynomial_from_roots import laurent_polynomial_from_roots
from ._laurent_polynomial_index import (
    laurent_polynomial_coefficient,
    laurent_polynomial_coefficients,
    laurent_polynomial_first_index,
    laurent_polynomial_is_zero,
    laurent_polynomial_last_index,
)
from ._laurent_polynomial_multiply import laurent_polynomial_multiply
from ._laurent_polynomial_pow import laurent_polynomial_pow
from ._laurent_polynomial_roots import laurent_polynomial_roots
from ._laurent_polynomial_scale import laurent_polynomial_scale
from ._laurent_polynomial_shift import laurent_polynomial_shift
from ._polynomial_error import PolynomialError

__all__ = [
    "LaurentPolynomial",
    "PolynomialError",
    "laurent_polynomial",
    "laurent_polynomial_coefficient",
    "laurent_polynomial_coefficients",
    "laurent_polynomial_evaluate",
    "laurent_polynomial_first_index",
    "laurent_polynomial_from_roots",
    "laurent_polynomial_is_zero",
    "laurent_polynomial_last_index",
    "laurent_polynomial_multiply",
    "laurent_polynomial_pow",
    "laurent_polynomial_roots",
    "laurent_polynomial_scale",
    "laurent_polynomial_shift",
]
