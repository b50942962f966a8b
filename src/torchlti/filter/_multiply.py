"""Cascading filters and scaling them by constants."""

import functools
import numbers

import torch
from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype

from ._biquad import Biquad, _biquad_from_tensor
from ._domain import check_domains
from ._polynomial_ratio import PolynomialRatio, _normalize
from ._second_order_sections import SecondOrderSections, _sections_from_rows
from ._zero_pole_gain import ZeroPoleGain


def multiply(f, g):
    """Multiply two filters, or a filter and a scalar.

    Filters of the same representation and domain cascade into that
    representation. Biquads and second-order sections cascade into
    second-order sections. Scalars scale the filter, from either side.

    Raises
    ------
    DomainMismatchError
        If f and g are filters of different domains.
    TypeError
        If f and g are filters of unrelated representations.
    """
    if _is_scalar(g):
        return scale(f, g)
    if _is_scalar(f):
        return scale(g, f)

    if isinstance(f, ZeroPoleGain) and isinstance(g, ZeroPoleGain):
        return zero_pole_gain_multiply(f, g)
    if isinstance(f, PolynomialRatio) and isinstance(g, PolynomialRatio):
        return polynomial_ratio_multiply(f, g)
    if isinstance(f, (Biquad, SecondOrderSections)) and isinstance(
        g, (Biquad, SecondOrderSections)
    ):
        return second_order_sections_multiply(f, g)

    raise TypeError(
        f"cannot multiply {type(f).__name__} and {type(g).__name__}, "
        f"convert them to a common representation first"
    )


def cascade(*filters):
    """Multiply any number of filters left to right.

    Examples
    --------
    >>> f = cascade(zero_pole_gain([], [0.5], 1.0), zero_pole_gain([], [0.25], 2.0))
    >>> f.poles, f.gain
    (tensor([0.5000, 0.2500]), tensor(2.))
    """
    if len(filters) == 0:
        raise TypeError("cascade requires at least one filter")
    return functools.reduce(multiply, filters)


def scale(f, c):
    """Multiply the transfer function of `f` by the scalar `c`."""
    c = as_tensor(c).reshape(())

    if isinstance(f, ZeroPoleGain):
        return ZeroPoleGain(
            zeros=f.zeros,
            poles=f.poles,
            gain=f.gain * c,
            domain=f.domain,
        )
    if isinstance(f, PolynomialRatio):
        return _normalize(f.numerator * c, f.denominator, f.domain)
    if isinstance(f, Biquad):
        return biquad_scale(f, c)
    if isinstance(f, SecondOrderSections):
        return SecondOrderSections(
            sections=f.sections,
            gain=f.gain * c,
            domain=f.domain,
        )

    raise TypeError(f"cannot scale {type(f).__name__}")


def zero_pole_gain_multiply(f: ZeroPoleGain, g: ZeroPoleGain) -> ZeroPoleGain:
    """Cascade two zero-pole-gain filters.

    Zeros and poles concatenate, gains multiply. Exact.
    """
    domain = check_domains(f, g)
    dtype = common_dtype(f.zeros, g.zeros, f.poles, g.poles)

    return ZeroPoleGain(
        zeros=torch.cat([f.zeros.to(dtype), g.zeros.to(dtype)]),
        poles=torch.cat([f.poles.to(dtype), g.poles.to(dtype)]),
        gain=f.gain * g.gain,
        domain=domain,
    )


def polynomial_ratio_multiply(
    f: PolynomialRatio, g: PolynomialRatio
) -> PolynomialRatio:
    """Cascade two transfer functions.

    Numerators multiply and denominators multiply.
    """
    domain = check_domains(f, g)

    return _normalize(
        f.numerator * g.numerator,
        f.denominator * g.denominator,
        domain,
    )


def biquad_scale(f: Biquad, c: Tensor) -> Biquad:
    """Scale the numerator of a biquad; the denominator is untouched."""
    coeffs = f.coefficients()
    c = as_tensor(c).reshape(())
    dtype = common_dtype(coeffs, c)
    coeffs = coeffs.to(dtype)

    return _biquad_from_tensor(
        torch.cat([coeffs[:3] * c.to(dtype), coeffs[3:]]),
        f.domain,
    )


def second_order_sections_multiply(f, g) -> SecondOrderSections:
    """Cascade biquads and second-order sections.

    Sections concatenate in order, gains multiply. A Biquad contributes one
    section and unit gain.
    """
    domain = check_domains(f, g)

    rows = []
    gain = None
    for h in (f, g):
        if isinstance(h, Biquad):
            rows.append(h.coefficients())
        else:
            rows.extend(h.sections.unbind(0))
            gain = h.gain if gain is None else gain * h.gain

    if gain is None:
        gain = torch.ones((), dtype=common_dtype(*rows))

    return _sections_from_rows(rows, gain, domain)


def _is_scalar(x) -> bool:
    if isinstance(x, Tensor):
        return x.numel() == 1
    return isinstance(x, numbers.Number)
