import torch
from torch import Tensor

from ._laurent_polynomial import LaurentPolynomial


def laurent_polynomial_first_index(p: LaurentPolynomial) -> int:
    """Lowest stored exponent of p."""
    return p.offset


def laurent_polynomial_last_index(p: LaurentPolynomial) -> int:
    """Highest stored exponent of p."""
    return p.offset + p.coeffs.shape[-1] - 1


def laurent_polynomial_is_zero(p: LaurentPolynomial) -> bool:
    """Whether p is the zero polynomial."""
    return bool(torch.all(p.coeffs == 0))


def laurent_polynomial_coefficient(p: LaurentPolynomial, i: int) -> Tensor:
    """Coefficient of x^i, zero outside the stored exponent range.

    Parameters
    ----------
    p : LaurentPolynomial
        Input polynomial.
    i : int
        Exponent.

    Returns
    -------
    Tensor
        0-d tensor with p's dtype.
    """
    k = i - p.offset
    if 0 <= k < p.coeffs.shape[-1]:
        return p.coeffs[k]
    return torch.zeros((), dtype=p.coeffs.dtype, device=p.coeffs.device)


def laurent_polynomial_coefficients(
    p: LaurentPolynomial,
    start: int,
    stop: int,
) -> Tensor:
    """Coefficients of x^start, x^(start - 1), ..., x^stop.

    Exponents outside the stored range contribute zeros. Returns an empty
    tensor when start < stop.

    Examples
    --------
    >>> p = laurent_polynomial(torch.tensor([1.0, 2.0]), offset=-1)
    >>> laurent_polynomial_coefficients(p, 1, -1)
    tensor([0., 2., 1.])
    """
    n = start - stop + 1
    if n <= 0:
        return torch.zeros(0, dtype=p.coeffs.dtype, device=p.coeffs.device)

    # Window [stop, start] in ascending order, zero padded
    low = stop - p.offset
    high = start - p.offset
    size = p.coeffs.shape[-1]

    lo = max(low, 0)
    hi = min(high, size - 1) + 1

    if hi <= lo:
        window = torch.zeros(n, dtype=p.coeffs.dtype, device=p.coeffs.device)
    else:
        pad_low = lo - low
        pad_high = high + 1 - hi
        window = p.coeffs[lo:hi]
        window = torch.cat(
            [
                torch.zeros(
                    pad_low, dtype=p.coeffs.dtype, device=p.coeffs.device
                ),
                window,
                torch.zeros(
                    pad_high, dtype=p.coeffs.dtype, device=p.coeffs.device
                ),
            ]
        )

    return torch.flip(window, dims=[0])
