from typing import Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype, floating_dtype
from torchlti.polynomial._polynomial_error import PolynomialError


@tensorclass
class LaurentPolynomial:
    """Polynomial with a possibly negative lowest exponent.

    Represents p(x) = sum_i coeffs[i] * x^(offset + i).

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,). coeffs[i] is the
        coefficient of x^(offset + i). Never has zero coefficients at either
        end, except for the zero polynomial, which is stored as a single
        zero coefficient at offset 0.
    offset : int
        Exponent of coeffs[0]. May be negative.

    Examples
    --------
    2/x + 1 + 3x:
        laurent_polynomial(torch.tensor([2.0, 1.0, 3.0]), offset=-1)

    Operator overloading:
        p * q    # laurent_polynomial_multiply(p, q)
        p * c    # laurent_polynomial_scale(p, c)
        p / c    # divide every coefficient by c
        p ** n   # laurent_polynomial_pow(p, n)
        p(x)     # laurent_polynomial_evaluate(p, x)
    """

    coeffs: Tensor
    offset: int

    def __mul__(
        self, other: Union["LaurentPolynomial", Tensor, complex]
    ) -> "LaurentPolynomial":
        from ._laurent_polynomial_multiply import laurent_polynomial_multiply
        from ._laurent_polynomial_scale import laurent_polynomial_scale

        if isinstance(other, LaurentPolynomial):
            return laurent_polynomial_multiply(self, other)
        return laurent_polynomial_scale(self, other)

    def __rmul__(
        self, other: Union["LaurentPolynomial", Tensor, complex]
    ) -> "LaurentPolynomial":
        from ._laurent_polynomial_multiply import laurent_polynomial_multiply
        from ._laurent_polynomial_scale import laurent_polynomial_scale

        if isinstance(other, LaurentPolynomial):
            return laurent_polynomial_multiply(other, self)
        return laurent_polynomial_scale(self, other)

    def __truediv__(self, other: Union[Tensor, complex]) -> "LaurentPolynomial":
        other = as_tensor(other).reshape(())
        dtype = floating_dtype(common_dtype(self.coeffs, other))

        return laurent_polynomial(
            self.coeffs.to(dtype) / other.to(dtype),
            self.offset,
        )

    def __pow__(self, n: int) -> "LaurentPolynomial":
        from ._laurent_polynomial_pow import laurent_polynomial_pow

        return laurent_polynomial_pow(self, n)

    def __call__(self, x: Tensor) -> Tensor:
        from ._laurent_polynomial_evaluate import laurent_polynomial_evaluate

        return laurent_polynomial_evaluate(self, x)


def laurent_polynomial(
    coeffs,
    offset: int = 0,
    *,
    dtype: Optional[torch.dtype] = None,
) -> LaurentPolynomial:
    """Create Laurent polynomial from ascending coefficients.

    Zero coefficients at both ends are stripped and `offset` is adjusted
    accordingly, so the stored exponent range is always the tightest one.

    Parameters
    ----------
    coeffs : Tensor or sequence
        Coefficients in ascending order, shape (N,). A scalar is treated as
        a one-element sequence.
    offset : int
        Exponent of coeffs[0].
    dtype : torch.dtype, optional
        Coefficient dtype.

    Returns
    -------
    LaurentPolynomial

    Raises
    ------
    PolynomialError
        If coeffs is empty or not one-dimensional.

    Examples
    --------
    >>> p = laurent_polynomial(torch.tensor([0.0, 1.0, 2.0, 0.0]), offset=-2)
    >>> p.coeffs, p.offset
    (tensor([1., 2.]), -1)
    """
    coeffs = as_tensor(coeffs, dtype=dtype)

    if coeffs.dim() == 0:
        coeffs = coeffs.reshape(1)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Laurent polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError(
            "Laurent polynomial must have at least one coefficient"
        )

    nonzero = torch.nonzero(coeffs != 0).flatten()

    if nonzero.numel() == 0:
        return LaurentPolynomial(
            coeffs=torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device),
            offset=0,
        )

    first = int(nonzero[0])
    last = int(nonzero[-1])

    return LaurentPolynomial(
        coeffs=coeffs[first : last + 1],
        offset=int(offset) + first,
    )
