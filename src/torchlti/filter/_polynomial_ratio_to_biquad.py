"""Conversion from transfer function to a single second-order section."""

import torch

from torchlti.polynomial import (
    laurent_polynomial_coefficient,
    laurent_polynomial_first_index,
    laurent_polynomial_last_index,
)

from ._biquad import Biquad, _biquad_from_tensor
from ._exceptions import FilterOrderError, NonUnityDenominatorError
from ._polynomial_ratio import PolynomialRatio


def polynomial_ratio_to_biquad(f: PolynomialRatio) -> Biquad:
    """Narrow a transfer function of order at most two to a biquad.

    Parameters
    ----------
    f : PolynomialRatio
        Filter to convert.

    Returns
    -------
    Biquad

    Raises
    ------
    FilterOrderError
        If numerator and denominator together span more than three powers.
    NonUnityDenominatorError
        If the highest power denominator coefficient is not one.
    """
    b, a = f.numerator, f.denominator

    last = max(
        laurent_polynomial_last_index(b),
        laurent_polynomial_last_index(a),
    )
    first = min(
        laurent_polynomial_first_index(b),
        laurent_polynomial_first_index(a),
    )

    if last - first >= 3:
        raise FilterOrderError("cannot convert a filter of length > 3 to Biquad")

    if laurent_polynomial_coefficient(a, last) != 1:
        raise NonUnityDenominatorError(
            "leading denominator coefficient of a Biquad must be one"
        )

    coeffs = torch.stack(
        [
            laurent_polynomial_coefficient(b, last),
            laurent_polynomial_coefficient(b, last - 1),
            laurent_polynomial_coefficient(b, last - 2),
            laurent_polynomial_coefficient(a, last - 1),
            laurent_polynomial_coefficient(a, last - 2),
        ]
    )

    return _biquad_from_tensor(coeffs, f.domain)
