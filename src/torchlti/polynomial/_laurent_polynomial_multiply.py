import torch

from torchlti._tensor import common_dtype

from ._laurent_polynomial import LaurentPolynomial, laurent_polynomial


def laurent_polynomial_multiply(
    p: LaurentPolynomial, q: LaurentPolynomial
) -> LaurentPolynomial:
    """Multiply two Laurent polynomials.

    Computes convolution of coefficients. Exponent offsets add.

    Parameters
    ----------
    p, q : LaurentPolynomial
        Polynomials to multiply.

    Returns
    -------
    LaurentPolynomial
        Product p * q.

    Examples
    --------
    >>> p = laurent_polynomial(torch.tensor([1.0, 1.0]), offset=-1)  # 1/x + 1
    >>> q = laurent_polynomial(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> r = laurent_polynomial_multiply(p, q)  # 1/x + 2 + x
    >>> r.coeffs, r.offset
    (tensor([1., 2., 1.]), -1)
    """
    dtype = common_dtype(p.coeffs, q.coeffs)
    p_coeffs = p.coeffs.to(dtype)
    q_coeffs = q.coeffs.to(dtype)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]
    n_out = n_p + n_q - 1

    # Sum of shifted copies of q, one per coefficient of p
    result = torch.zeros(n_out, dtype=dtype, device=p_coeffs.device)
    for i in range(n_p):
        shifted = torch.cat(
            [
                torch.zeros(i, dtype=dtype, device=p_coeffs.device),
                p_coeffs[i] * q_coeffs,
                torch.zeros(n_p - 1 - i, dtype=dtype, device=p_coeffs.device),
            ]
        )
        result = result + shifted

    return laurent_polynomial(result, p.offset + q.offset)
