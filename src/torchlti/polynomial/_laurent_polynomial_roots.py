import torch
from torch import Tensor

from torchlti._tensor import complex_dtype, floating_dtype

from ._laurent_polynomial import LaurentPolynomial


def laurent_polynomial_roots(p: LaurentPolynomial) -> Tensor:
    """Find roots of the numerator of a Laurent polynomial.

    Computes the roots of x^(-min(offset, 0)) * p(x), i.e. negative
    exponents are cleared first. A positive offset contributes that many
    roots at the origin.

    Parameters
    ----------
    p : LaurentPolynomial
        Polynomial to factor.

    Returns
    -------
    Tensor
        Complex roots, shape (max(offset, 0) + N - 1,). Always complex dtype.
        Constant polynomials (including zero) have no roots besides the
        ones at the origin.

    Examples
    --------
    >>> p = laurent_polynomial(torch.tensor([2.0, -3.0, 1.0]))  # (x-1)(x-2)
    >>> laurent_polynomial_roots(p)
    tensor([1.+0.j, 2.+0.j])

    Notes
    -----
    Roots are the eigenvalues of the companion matrix. Real coefficients are
    kept in a real companion matrix so non-real roots are returned as exact
    conjugate pairs.
    """
    coeffs = p.coeffs
    if not (coeffs.dtype.is_floating_point or coeffs.dtype.is_complex):
        coeffs = coeffs.to(floating_dtype(coeffs.dtype))

    out_dtype = complex_dtype(coeffs.dtype)
    n_origin = max(p.offset, 0)

    origin = torch.zeros(n_origin, dtype=out_dtype, device=coeffs.device)

    if coeffs.shape[-1] < 2:
        return origin

    return torch.cat([origin, _companion_roots(coeffs).to(out_dtype)])


def _companion_roots(coeffs: Tensor) -> Tensor:
    """Roots of an ascending coefficient vector with non-zero ends."""
    degree = coeffs.shape[-1] - 1

    # For monic p(x) = a_0 + a_1*x + ... + a_{n-1}*x^{n-1} + x^n
    # the companion matrix is:
    # [[0, 0, ..., 0, -a_0  ],
    #  [1, 0, ..., 0, -a_1  ],
    #  [.                   ],
    #  [0, 0, ..., 1, -a_{n-1}]]
    normalized = -coeffs[:-1] / coeffs[-1]

    companion = torch.zeros(
        degree, degree, dtype=coeffs.dtype, device=coeffs.device
    )
    if degree > 1:
        eye_indices = torch.arange(degree - 1, device=coeffs.device)
        companion[eye_indices + 1, eye_indices] = 1.0
    companion[:, -1] = normalized

    return torch.linalg.eigvals(companion)
