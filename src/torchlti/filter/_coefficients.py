"""Coefficient vectors of a filter's transfer function."""

from torch import Tensor

from torchlti.polynomial import (
    LaurentPolynomial,
    laurent_polynomial_coefficients,
    laurent_polynomial_first_index,
    laurent_polynomial_last_index,
)

from ._domain import Domain


def coefb(f) -> Tensor:
    """Numerator coefficients, highest power first.

    In the z domain this is the `b` of the difference equation, b[k] being
    the coefficient of z^-k. In the s domain b[k] is the coefficient of
    s^(m - k).

    Parameters
    ----------
    f : filter
        Any filter representation, converted to a polynomial ratio first.

    Returns
    -------
    Tensor
        Shape (m + 1,).
    """
    from ._convert import to_polynomial_ratio

    f = to_polynomial_ratio(f)
    return _descending(f.numerator, f.domain)


def coefa(f) -> Tensor:
    """Denominator coefficients, highest power first. See coefb."""
    from ._convert import to_polynomial_ratio

    f = to_polynomial_ratio(f)
    return _descending(f.denominator, f.domain)


def _descending(p: LaurentPolynomial, domain: Domain) -> Tensor:
    if domain == Domain.S:
        return laurent_polynomial_coefficients(
            p, laurent_polynomial_last_index(p), 0
        )
    return laurent_polynomial_coefficients(
        p, 0, laurent_polynomial_first_index(p)
    )
