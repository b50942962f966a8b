"""Conversion between filter representations.

Zero-pole-gain and polynomial ratio are the hubs. Every other route goes
through one of them:

    Biquad -> PolynomialRatio -> ZeroPoleGain -> SecondOrderSections
    SecondOrderSections -> ZeroPoleGain -> PolynomialRatio -> Biquad

A conversion to the representation a filter already has returns it
unchanged.
"""

import torch

from ._biquad import Biquad
from ._biquad_to_polynomial_ratio import biquad_to_polynomial_ratio
from ._polynomial_ratio import PolynomialRatio
from ._polynomial_ratio_to_biquad import polynomial_ratio_to_biquad
from ._polynomial_ratio_to_zero_pole_gain import (
    polynomial_ratio_to_zero_pole_gain,
)
from ._second_order_sections import SecondOrderSections, _sections_from_rows
from ._second_order_sections_to_biquad import second_order_sections_to_biquad
from ._second_order_sections_to_zero_pole_gain import (
    second_order_sections_to_zero_pole_gain,
)
from ._zero_pole_gain import ZeroPoleGain
from ._zero_pole_gain_to_polynomial_ratio import (
    zero_pole_gain_to_polynomial_ratio,
)
from ._zero_pole_gain_to_second_order_sections import (
    zero_pole_gain_to_second_order_sections,
)

FILTER_TYPES = (ZeroPoleGain, PolynomialRatio, Biquad, SecondOrderSections)


def to_zero_pole_gain(f) -> ZeroPoleGain:
    """Convert any filter to zeros, poles, and gain."""
    if isinstance(f, ZeroPoleGain):
        return f
    if isinstance(f, PolynomialRatio):
        return polynomial_ratio_to_zero_pole_gain(f)
    if isinstance(f, Biquad):
        return polynomial_ratio_to_zero_pole_gain(biquad_to_polynomial_ratio(f))
    if isinstance(f, SecondOrderSections):
        return second_order_sections_to_zero_pole_gain(f)

    raise _not_a_filter(f)


def to_polynomial_ratio(f) -> PolynomialRatio:
    """Convert any filter to a transfer function."""
    if isinstance(f, PolynomialRatio):
        return f
    if isinstance(f, ZeroPoleGain):
        return zero_pole_gain_to_polynomial_ratio(f)
    if isinstance(f, Biquad):
        return biquad_to_polynomial_ratio(f)
    if isinstance(f, SecondOrderSections):
        return zero_pole_gain_to_polynomial_ratio(
            second_order_sections_to_zero_pole_gain(f)
        )

    raise _not_a_filter(f)


def to_biquad(f) -> Biquad:
    """Convert a filter of order at most two to a biquad.

    Raises
    ------
    FilterOrderError
        If the transfer function spans more than three powers.
    NonUnityDenominatorError
        If the transfer function's leading denominator coefficient is not
        one.
    SectionCountError
        If f is a cascade of more than one section.
    """
    if isinstance(f, Biquad):
        return f
    if isinstance(f, PolynomialRatio):
        return polynomial_ratio_to_biquad(f)
    if isinstance(f, ZeroPoleGain):
        return polynomial_ratio_to_biquad(zero_pole_gain_to_polynomial_ratio(f))
    if isinstance(f, SecondOrderSections):
        return second_order_sections_to_biquad(f)

    raise _not_a_filter(f)


def to_second_order_sections(f) -> SecondOrderSections:
    """Convert any filter to a cascade of second-order sections.

    A Biquad becomes a single section with unit gain. Other representations
    are factored and paired, see zero_pole_gain_to_second_order_sections.
    """
    if isinstance(f, SecondOrderSections):
        return f
    if isinstance(f, Biquad):
        row = f.coefficients()
        return _sections_from_rows(
            [row],
            torch.ones((), dtype=row.dtype, device=row.device),
            f.domain,
        )
    if isinstance(f, ZeroPoleGain):
        return zero_pole_gain_to_second_order_sections(f)
    if isinstance(f, PolynomialRatio):
        return zero_pole_gain_to_second_order_sections(
            polynomial_ratio_to_zero_pole_gain(f)
        )

    raise _not_a_filter(f)


_CONVERTERS = {
    ZeroPoleGain: to_zero_pole_gain,
    PolynomialRatio: to_polynomial_ratio,
    Biquad: to_biquad,
    SecondOrderSections: to_second_order_sections,
}


def convert(cls, f):
    """Convert filter `f` to representation `cls`.

    Parameters
    ----------
    cls : type
        One of ZeroPoleGain, PolynomialRatio, Biquad, SecondOrderSections.
    f : filter
        Filter to convert. Its domain is kept.

    Examples
    --------
    >>> f = convert(PolynomialRatio, zero_pole_gain([-1.0], [0.5], 0.25))
    >>> coefb(f), coefa(f)
    (tensor([0.2500, 0.2500]), tensor([ 1.0000, -0.5000]))
    """
    try:
        converter = _CONVERTERS[cls]
    except (KeyError, TypeError):
        raise TypeError(f"{cls!r} is not a filter representation") from None

    return converter(f)


def _not_a_filter(f) -> TypeError:
    return TypeError(f"{type(f).__name__} is not a filter")
