import torch

from ._laurent_polynomial import LaurentPolynomial, laurent_polynomial
from ._laurent_polynomial_multiply import laurent_polynomial_multiply


def laurent_polynomial_pow(p: LaurentPolynomial, n: int) -> LaurentPolynomial:
    """Raise Laurent polynomial to non-negative integer power.

    Uses binary exponentiation (repeated squaring).

    Parameters
    ----------
    p : LaurentPolynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    LaurentPolynomial
        p raised to power n. The offset of the result is n * p.offset.

    Raises
    ------
    ValueError
        If n is negative.
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")

    if n == 0:
        return laurent_polynomial(
            torch.ones(1, dtype=p.coeffs.dtype, device=p.coeffs.device)
        )

    if n == 1:
        return p

    result = None
    base = p

    while n > 0:
        if n & 1:
            if result is None:
                result = base
            else:
                result = laurent_polynomial_multiply(result, base)
        n >>= 1
        if n > 0:
            base = laurent_polynomial_multiply(base, base)

    return result
