"""Conversion from second-order sections to zeros-poles-gain."""

import torch

from torchlti._tensor import complex_dtype

from ._biquad_to_polynomial_ratio import biquad_to_polynomial_ratio
from ._polynomial_ratio_to_zero_pole_gain import (
    polynomial_ratio_to_zero_pole_gain,
)
from ._second_order_sections import SecondOrderSections
from ._zero_pole_gain import ZeroPoleGain


def second_order_sections_to_zero_pole_gain(
    f: SecondOrderSections,
) -> ZeroPoleGain:
    """Convert a cascade of sections to zeros, poles, and gain.

    Each section is factored separately. Zeros and poles concatenate in
    cascade order; the section gains multiply into the cascade gain.

    Parameters
    ----------
    f : SecondOrderSections
        Filter to convert.

    Returns
    -------
    ZeroPoleGain
    """
    dtype = complex_dtype(f.sections.dtype)

    zeros = [torch.zeros(0, dtype=dtype, device=f.sections.device)]
    poles = [torch.zeros(0, dtype=dtype, device=f.sections.device)]
    gain = f.gain

    for section in f.biquads:
        zpk = polynomial_ratio_to_zero_pole_gain(
            biquad_to_polynomial_ratio(section)
        )
        zeros.append(zpk.zeros.to(dtype))
        poles.append(zpk.poles.to(dtype))
        gain = gain * zpk.gain

    return ZeroPoleGain(
        zeros=torch.cat(zeros),
        poles=torch.cat(poles),
        gain=gain,
        domain=f.domain,
    )
