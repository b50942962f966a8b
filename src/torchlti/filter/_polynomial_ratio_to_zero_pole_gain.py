"""Conversion from transfer function to zeros-poles-gain."""

from torchlti.polynomial import (
    laurent_polynomial_first_index,
    laurent_polynomial_roots,
    laurent_polynomial_shift,
)

from ._polynomial_ratio import PolynomialRatio
from ._zero_pole_gain import ZeroPoleGain


def polynomial_ratio_to_zero_pole_gain(f: PolynomialRatio) -> ZeroPoleGain:
    """Convert a transfer function to zeros, poles, and gain.

    Negative exponents are cleared by shifting numerator and denominator by
    the same power, so a z domain ratio b(z^-1) / a(z^-1) is factored as
    polynomials in z.

    Parameters
    ----------
    f : PolynomialRatio
        Filter to convert.

    Returns
    -------
    ZeroPoleGain
        Zeros and poles are complex. The gain is the ratio of the highest
        order numerator and denominator coefficients.

    Examples
    --------
    >>> f = polynomial_ratio([0.25, 0.25], [1.0, -0.5])
    >>> zpk = polynomial_ratio_to_zero_pole_gain(f)
    >>> zpk.zeros, zpk.poles, zpk.gain
    (tensor([-1.+0.j]), tensor([0.5000+0.j]), tensor(0.2500))
    """
    b, a = f.numerator, f.denominator

    i = -min(
        laurent_polynomial_first_index(a),
        laurent_polynomial_first_index(b),
        0,
    )
    b = laurent_polynomial_shift(b, i)
    a = laurent_polynomial_shift(a, i)

    return ZeroPoleGain(
        zeros=laurent_polynomial_roots(b),
        poles=laurent_polynomial_roots(a),
        gain=b.coeffs[-1] / a.coeffs[-1],
        domain=f.domain,
    )
