from typing import TYPE_CHECKING

from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype

if TYPE_CHECKING:
    from ._laurent_polynomial import LaurentPolynomial


def laurent_polynomial_scale(p: "LaurentPolynomial", c: Tensor) -> "LaurentPolynomial":
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : LaurentPolynomial
        Polynomial to scale.
    c : Tensor or number
        Scalar factor.

    Returns
    -------
    LaurentPolynomial
        Scaled polynomial c * p. Scaling by zero yields the zero polynomial.
    """
    from ._laurent_polynomial import laurent_polynomial

    c = as_tensor(c).reshape(())
    dtype = common_dtype(p.coeffs, c)

    return laurent_polynomial(
        p.coeffs.to(dtype) * c.to(dtype),
        p.offset,
    )
