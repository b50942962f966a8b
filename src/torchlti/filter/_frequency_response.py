"""Evaluation of transfer functions along the frequency axis."""

import math
import numbers
from typing import Union

import torch
from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype, complex_dtype

from ._biquad import Biquad
from ._domain import Domain
from ._polynomial_ratio import PolynomialRatio
from ._second_order_sections import SecondOrderSections
from ._zero_pole_gain import ZeroPoleGain


def frequency_response(f, frequencies: Union[Tensor, int]) -> Tensor:
    """Complex frequency response of a filter.

    Parameters
    ----------
    f : ZeroPoleGain, PolynomialRatio, Biquad, or SecondOrderSections
        Filter to evaluate.
    frequencies : Tensor or int
        Angular frequencies w, in radians per sample in the z domain and
        radians per second in the s domain. In the z domain an integer n
        selects n frequencies evenly spaced over [0, pi).

    Returns
    -------
    Tensor
        H(e^{jw}) in the z domain, H(jw) in the s domain. Complex, same
        shape as the frequencies.

    Examples
    --------
    >>> f = zero_pole_gain([-1.0], [0.0], 0.5)
    >>> frequency_response(f, torch.tensor([0.0, math.pi]))
    tensor([1.0000+0.j, 0.0000+0.j])
    """
    if isinstance(frequencies, numbers.Integral):
        if f.domain == Domain.S:
            raise ValueError(
                "frequencies must be given explicitly for an s domain filter"
            )
        n = int(frequencies)
        frequencies = torch.arange(n, dtype=torch.float64) * (math.pi / n)

    w = as_tensor(frequencies)
    dtype = complex_dtype(common_dtype(w, *_parameters(f)))

    w = w.to(dtype)
    if f.domain == Domain.Z:
        x = torch.exp(1j * w)
    else:
        x = 1j * w

    return _evaluate(f, x)


def _parameters(f):
    if isinstance(f, ZeroPoleGain):
        return f.zeros, f.poles, f.gain
    if isinstance(f, PolynomialRatio):
        return f.numerator.coeffs, f.denominator.coeffs
    if isinstance(f, Biquad):
        return (f.coefficients(),)
    if isinstance(f, SecondOrderSections):
        return f.sections, f.gain

    raise TypeError(f"{type(f).__name__} is not a filter")


def _evaluate(f, x: Tensor) -> Tensor:
    dtype = x.dtype

    if isinstance(f, ZeroPoleGain):
        zeros = f.zeros.to(dtype)
        poles = f.poles.to(dtype)
        numerator = torch.prod(x[..., None] - zeros, dim=-1)
        denominator = torch.prod(x[..., None] - poles, dim=-1)
        return f.gain.to(dtype) * numerator / denominator

    if isinstance(f, PolynomialRatio):
        return f.numerator(x) / f.denominator(x)

    if isinstance(f, Biquad):
        return _biquad_response(f.coefficients().to(dtype), x, f.domain)

    response = f.gain.to(dtype) * torch.ones_like(x)
    for row in f.sections.to(dtype).unbind(0):
        response = response * _biquad_response(row, x, f.domain)
    return response


def _biquad_response(coeffs: Tensor, x: Tensor, domain: Domain) -> Tensor:
    b0, b1, b2, a1, a2 = coeffs.unbind(0)

    if domain == Domain.Z:
        # b0 + b1 z^-1 + b2 z^-2 over 1 + a1 z^-1 + a2 z^-2
        y = 1 / x
        return (b0 + (b1 + b2 * y) * y) / (1 + (a1 + a2 * y) * y)

    return ((b0 * x + b1) * x + b2) / ((x + a1) * x + a2)
