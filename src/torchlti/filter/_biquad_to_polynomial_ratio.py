"""Conversion from a single second-order section to transfer function."""

import torch

from ._biquad import Biquad
from ._polynomial_ratio import PolynomialRatio, polynomial_ratio


def biquad_to_polynomial_ratio(f: Biquad) -> PolynomialRatio:
    """Expand a biquad to b = [b0, b1, b2], a = [1, a1, a2]."""
    coeffs = f.coefficients()
    one = torch.ones(1, dtype=coeffs.dtype, device=coeffs.device)

    return polynomial_ratio(
        coeffs[:3],
        torch.cat([one, coeffs[3:]]),
        f.domain,
    )
