import torch
from torch import Tensor

from torchlti._tensor import as_tensor

from ._laurent_polynomial import LaurentPolynomial, laurent_polynomial


def laurent_polynomial_from_roots(roots: Tensor) -> LaurentPolynomial:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}) with offset 0. Roots at
    the origin show up as a positive offset after zero stripping.

    Parameters
    ----------
    roots : Tensor
        Roots, shape (N,). Can be complex.

    Returns
    -------
    LaurentPolynomial
        Monic polynomial with given roots.

    Examples
    --------
    >>> roots = torch.tensor([1.0, 2.0])  # (x-1)(x-2) = x^2 - 3x + 2
    >>> p = laurent_polynomial_from_roots(roots)
    >>> p.coeffs
    tensor([ 2., -3.,  1.])
    """
    roots = as_tensor(roots).reshape(-1)
    n_roots = roots.shape[-1]

    if n_roots == 0:
        return laurent_polynomial(
            torch.ones(1, dtype=roots.dtype, device=roots.device)
        )

    one = torch.ones(1, dtype=roots.dtype, device=roots.device)
    zero = torch.zeros(1, dtype=roots.dtype, device=roots.device)

    # (x - r_0) = -r_0 + 1*x
    coeffs = torch.cat([-roots[:1], one])

    # Multiply by (x - r_i) for each remaining root:
    # new_coeffs[j] = -r_i * c_j + c_{j-1}
    for i in range(1, n_roots):
        shifted = torch.cat([zero, coeffs])
        scaled = torch.cat([coeffs, zero]) * (-roots[i])
        coeffs = shifted + scaled

    return laurent_polynomial(coeffs)
