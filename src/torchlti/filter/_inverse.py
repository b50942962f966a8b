"""Multiplicative inverse of a filter."""

from ._biquad import Biquad, biquad_normalized
from ._polynomial_ratio import PolynomialRatio, _normalize
from ._second_order_sections import SecondOrderSections, _sections_from_rows
from ._zero_pole_gain import ZeroPoleGain


def inverse(f):
    """Filter whose transfer function is the reciprocal of f's.

    Parameters
    ----------
    f : ZeroPoleGain, PolynomialRatio, Biquad, or SecondOrderSections
        Filter to invert.

    Returns
    -------
    Filter of the same representation and domain.

    Raises
    ------
    MalformedDenominatorError
        If the numerator of f cannot serve as a denominator, e.g. a z
        domain biquad with b0 = 0. This includes odd-order cascades from
        zero_pole_gain_to_second_order_sections, whose first-order section
        is [0, 1, 0, -p, 0] when no zero was grouped with the pole.
    """
    if isinstance(f, ZeroPoleGain):
        return ZeroPoleGain(
            zeros=f.poles,
            poles=f.zeros,
            gain=1 / f.gain,
            domain=f.domain,
        )
    if isinstance(f, PolynomialRatio):
        return _normalize(f.denominator, f.numerator, f.domain)
    if isinstance(f, Biquad):
        return biquad_inverse(f)
    if isinstance(f, SecondOrderSections):
        return _sections_from_rows(
            [biquad_inverse(section).coefficients() for section in f.biquads],
            1 / f.gain,
            f.domain,
        )

    raise TypeError(f"cannot invert {type(f).__name__}")


def biquad_inverse(f: Biquad) -> Biquad:
    """Swap numerator and denominator of a biquad, renormalizing by b0."""
    return biquad_normalized(
        1,
        f.a1,
        f.a2,
        f.b0,
        f.b1,
        f.b2,
        domain=f.domain,
        dtype=f.b0.dtype,
    )
