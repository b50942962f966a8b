"""Integer powers of filters."""

import numbers

import torch

from ._biquad import Biquad
from ._inverse import biquad_inverse, inverse
from ._polynomial_ratio import PolynomialRatio, _normalize
from ._second_order_sections import SecondOrderSections, _sections_from_rows
from ._zero_pole_gain import ZeroPoleGain


def power(f, e: int):
    """Raise a filter to an integer power.

    Negative powers invert the filter. Biquads are raised into
    second-order sections of |e| copies.

    Parameters
    ----------
    f : ZeroPoleGain, PolynomialRatio, Biquad, or SecondOrderSections
        Base filter.
    e : int
        Exponent.

    Returns
    -------
    Filter of the same representation, SecondOrderSections for a Biquad.

    Raises
    ------
    TypeError
        If e is not an integer.
    MalformedDenominatorError
        If e < 0 and f cannot be inverted, see inverse. For example an
        odd-order cascade whose first-order section is [0, 1, 0, -p, 0].

    Examples
    --------
    >>> f = zero_pole_gain([-1.0], [0.5], 2.0)
    >>> g = power(f, -2)
    >>> g.zeros, g.poles, g.gain
    (tensor([0.5000, 0.5000]), tensor([-1., -1.]), tensor(0.2500))
    """
    if isinstance(e, bool) or not isinstance(e, numbers.Integral):
        raise TypeError(
            f"filter exponent must be an integer, got {type(e).__name__}"
        )

    e = int(e)
    ae = abs(e)

    if isinstance(f, ZeroPoleGain):
        zeros = f.zeros.repeat(ae)
        poles = f.poles.repeat(ae)
        if e < 0:
            return ZeroPoleGain(
                zeros=poles,
                poles=zeros,
                gain=(1 / f.gain) ** ae,
                domain=f.domain,
            )
        return ZeroPoleGain(
            zeros=zeros,
            poles=poles,
            gain=f.gain**ae,
            domain=f.domain,
        )

    if isinstance(f, PolynomialRatio):
        b = f.numerator**ae
        a = f.denominator**ae
        if e < 0:
            b, a = a, b
        return _normalize(b, a, f.domain)

    if isinstance(f, Biquad):
        section = biquad_inverse(f) if e < 0 else f
        row = section.coefficients()
        return _sections_from_rows(
            [row] * ae,
            torch.ones((), dtype=row.dtype, device=row.device),
            f.domain,
        )

    if isinstance(f, SecondOrderSections):
        if e < 0:
            f = inverse(f)
        return SecondOrderSections(
            sections=f.sections.repeat(ae, 1),
            gain=f.gain**ae,
            domain=f.domain,
        )

    raise TypeError(f"cannot raise {type(f).__name__} to a power")
