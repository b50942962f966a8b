"""Transfer function (polynomial ratio) filter representation."""

from typing import Optional, Union

import torch
from tensordict.tensorclass import tensorclass

from torchlti._tensor import as_tensor, common_dtype, floating_dtype
from torchlti.polynomial import (
    LaurentPolynomial,
    laurent_polynomial,
    laurent_polynomial_coefficient,
    laurent_polynomial_first_index,
    laurent_polynomial_is_zero,
    laurent_polynomial_last_index,
    laurent_polynomial_shift,
)

from ._domain import Domain, as_domain
from ._exceptions import DomainMismatchError, MalformedDenominatorError


@tensorclass
class PolynomialRatio:
    """Filter as a ratio of two polynomials in the domain variable.

    In the z domain the polynomials are stored with their highest exponent
    at 0 (powers of z^-1) and the constant term of the denominator equal to
    one. In the s domain the lowest exponent is 0 and no scaling is applied.

    Attributes
    ----------
    numerator : LaurentPolynomial
        Numerator b.
    denominator : LaurentPolynomial
        Denominator a.
    domain : Domain
        Domain of the transfer function variable.

    Operator overloading:
        f * g    # numerators and denominators multiply
        f * c    # scale numerator
        f ** e   # integer power, negative e inverts
    """

    numerator: LaurentPolynomial
    denominator: LaurentPolynomial
    domain: Domain

    def __mul__(self, other):
        from ._multiply import multiply

        return multiply(self, other)

    def __rmul__(self, other):
        from ._multiply import multiply

        return multiply(other, self)

    def __pow__(self, e: int):
        from ._power import power

        return power(self, e)


def polynomial_ratio(
    numerator,
    denominator=None,
    domain: Optional[Union[Domain, str]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
) -> PolynomialRatio:
    """Create a transfer function filter.

    Parameters
    ----------
    numerator : LaurentPolynomial, Tensor, sequence, number, or filter
        Numerator b. Coefficient sequences are ordered highest power first.
        A single filter argument is converted to polynomial ratio form.
    denominator : LaurentPolynomial, Tensor, sequence, or number
        Denominator a, same convention as the numerator.
    domain : Domain or str, optional
        "z" (default) or "s".
    dtype : torch.dtype, optional
        Coefficient dtype. Defaults to the promoted dtype of the inputs,
        made floating in the z domain.

    Returns
    -------
    PolynomialRatio

    Raises
    ------
    MalformedDenominatorError
        In the z domain, if the leading denominator coefficient is zero. In
        the s domain, if the denominator is zero.

    Notes
    -----
    z domain coefficient sequences describe

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + \\ldots + b_m z^{-m}}{a_0 + a_1 z^{-1} + \\ldots + a_n z^{-n}}

    and are divided by a_0. s domain coefficient sequences describe

    .. math::
        H(s) = \\frac{b_0 s^m + \\ldots + b_m}{a_0 s^n + \\ldots + a_n}

    and are kept as given.

    Examples
    --------
    >>> f = polynomial_ratio([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])
    >>> coefb(f), coefa(f)
    (tensor([0.5000, 1.0000, 1.5000]), tensor([1.0000, 1.5000, 2.0000]))
    >>> f = polynomial_ratio([1, 2, 3], [2, 3, 4], "s")
    >>> coefb(f), coefa(f)
    (tensor([1, 2, 3]), tensor([2, 3, 4]))
    """
    if denominator is None:
        from ._convert import to_polynomial_ratio

        f = to_polynomial_ratio(numerator)
        if domain is not None and as_domain(domain) != f.domain:
            raise DomainMismatchError(
                f"cannot reinterpret a {f.domain!s} domain filter in the "
                f"{as_domain(domain)!s} domain"
            )
        return f

    domain = as_domain(domain)

    numerator_is_polynomial = isinstance(numerator, LaurentPolynomial)
    if numerator_is_polynomial != isinstance(denominator, LaurentPolynomial):
        raise TypeError(
            "numerator and denominator must both be LaurentPolynomial or "
            "both be coefficient sequences"
        )

    if numerator_is_polynomial:
        b, a = numerator, denominator
    else:
        b = as_tensor(numerator).reshape(-1)
        a = as_tensor(denominator).reshape(-1)

        if domain == Domain.Z:
            if a.numel() == 0 or a[0] == 0:
                raise MalformedDenominatorError(
                    "filter must have non-zero leading denominator coefficient"
                )
            t = dtype or floating_dtype(common_dtype(b, a))
            b = b.to(t) / a[0].to(t)
            a = a.to(t) / a[0].to(t)

        b = _polynomial_from_descending(b, domain)
        a = _polynomial_from_descending(a, domain)

    return _normalize(b, a, domain, dtype)


def _polynomial_from_descending(
    coeffs: torch.Tensor, domain: Domain
) -> LaurentPolynomial:
    # z: b[0] + b[1] z^-1 + ... ; s: b[0] s^m + ... + b[m]
    offset = -coeffs.numel() + 1 if domain == Domain.Z else 0
    return laurent_polynomial(torch.flip(coeffs, dims=[0]), offset)


def _normalize(
    b: LaurentPolynomial,
    a: LaurentPolynomial,
    domain: Domain,
    dtype: Optional[torch.dtype] = None,
) -> PolynomialRatio:
    """Shift and scale b and a into the canonical form of `domain`."""
    t = dtype or common_dtype(b.coeffs, a.coeffs)
    if domain == Domain.Z:
        t = floating_dtype(t)

    b = laurent_polynomial(b.coeffs.to(t), b.offset)
    a = laurent_polynomial(a.coeffs.to(t), a.offset)

    if domain == Domain.Z:
        i = max(
            laurent_polynomial_last_index(a),
            laurent_polynomial_last_index(b),
        )
        b = laurent_polynomial_shift(b, -i)
        a = laurent_polynomial_shift(a, -i)

        a0 = laurent_polynomial_coefficient(a, 0)
        if a0 != 1:
            if a0 == 0:
                raise MalformedDenominatorError(
                    "filter must have non-zero leading denominator coefficient"
                )
            b = b / a0
            a = a / a0
    else:
        if laurent_polynomial_is_zero(a):
            raise MalformedDenominatorError(
                "filter must have non-zero denominator"
            )
        i = min(
            laurent_polynomial_first_index(a),
            laurent_polynomial_first_index(b),
        )
        b = laurent_polynomial_shift(b, -i)
        a = laurent_polynomial_shift(a, -i)

    return PolynomialRatio(numerator=b, denominator=a, domain=domain)
