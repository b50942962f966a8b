from ._laurent_polynomial import LaurentPolynomial


def laurent_polynomial_shift(p: LaurentPolynomial, i: int) -> LaurentPolynomial:
    """Multiply polynomial by x^i.

    Only the exponent offset changes, coefficients are shared with p.

    Parameters
    ----------
    p : LaurentPolynomial
        Input polynomial.
    i : int
        Exponent shift, may be negative.

    Returns
    -------
    LaurentPolynomial
        x^i * p.
    """
    if i == 0:
        return p

    return LaurentPolynomial(coeffs=p.coeffs, offset=p.offset + int(i))
