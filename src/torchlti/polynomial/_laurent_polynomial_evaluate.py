import torch
from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype, floating_dtype

from ._laurent_polynomial import LaurentPolynomial


def laurent_polynomial_evaluate(p: LaurentPolynomial, x: Tensor) -> Tensor:
    """Evaluate Laurent polynomial at points using Horner's method.

    Parameters
    ----------
    p : LaurentPolynomial
        Polynomial to evaluate.
    x : Tensor
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Values p(x), same shape as x.

    Examples
    --------
    >>> p = laurent_polynomial(torch.tensor([1.0, 2.0]), offset=-1)  # 1/x + 2
    >>> laurent_polynomial_evaluate(p, torch.tensor([1.0, 2.0]))
    tensor([3.0000, 2.5000])
    """
    x = as_tensor(x)
    dtype = floating_dtype(common_dtype(p.coeffs, x))
    x = x.to(dtype)
    coeffs = p.coeffs.to(dtype)

    result = torch.zeros_like(x)
    for c in torch.flip(coeffs, dims=[0]):
        result = result * x + c

    if p.offset != 0:
        result = result * x**p.offset

    return result
