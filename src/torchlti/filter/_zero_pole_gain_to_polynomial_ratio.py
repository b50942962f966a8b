"""Conversion from zeros-poles-gain to transfer function."""

import warnings

import torch
from torch import Tensor

from torchlti._tensor import real_dtype
from torchlti.polynomial import (
    LaurentPolynomial,
    laurent_polynomial,
    laurent_polynomial_from_roots,
)

from ._constants import IMAGINARY_RESIDUAL_TOLERANCE
from ._polynomial_ratio import PolynomialRatio, _normalize
from ._zero_pole_gain import ZeroPoleGain


def zero_pole_gain_to_polynomial_ratio(f: ZeroPoleGain) -> PolynomialRatio:
    """Convert zeros, poles, and gain to a transfer function.

    Parameters
    ----------
    f : ZeroPoleGain
        Filter to convert. Non-real zeros and poles should come in
        conjugate pairs.

    Returns
    -------
    PolynomialRatio
        Filter with numerator k * prod(x - z_i) and denominator
        prod(x - p_i), real parts only.

    Warns
    -----
    UserWarning
        If the discarded imaginary parts are not negligible, which means the
        zeros or poles were not conjugate symmetric.

    Notes
    -----
    The transfer function

    .. math::
        H(z) = k \\frac{(z - z_0)(z - z_1)...}{(z - p_0)(z - p_1)...}

    is stored in the z domain as

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + ...}{1 + a_1 z^{-1} + ...}
    """
    b = laurent_polynomial_from_roots(f.zeros)
    b = laurent_polynomial(f.gain * b.coeffs, b.offset)
    a = laurent_polynomial_from_roots(f.poles)

    return _normalize(_real_part(b), _real_part(a), f.domain)


def _real_part(p: LaurentPolynomial) -> LaurentPolynomial:
    coeffs: Tensor = p.coeffs
    if not coeffs.is_complex():
        return p

    residual = coeffs.imag.abs().max()
    scale = coeffs.abs().max()
    eps = torch.finfo(real_dtype(coeffs.dtype)).eps
    tolerance = IMAGINARY_RESIDUAL_TOLERANCE * eps * coeffs.shape[-1]
    if residual > tolerance * scale:
        warnings.warn(
            f"discarding imaginary part of magnitude {residual.item():.3g} "
            f"from polynomial coefficients; zeros and poles are probably "
            f"not conjugate symmetric",
            UserWarning,
            stacklevel=3,
        )

    return laurent_polynomial(coeffs.real, p.offset)
