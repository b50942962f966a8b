"""Linear time-invariant filter representations and conversions."""

from ._biquad import Biquad, biquad, biquad_normalized
from ._coefficients import coefa, coefb
from ._constants import IMAGINARY_RESIDUAL_TOLERANCE
from ._convert import (
    convert,
    to_biquad,
    to_polynomial_ratio,
    to_second_order_sections,
    to_zero_pole_gain,
)
from ._domain import Domain
from ._exceptions import (
    ConjugateMismatchError,
    DomainMismatchError,
    ExcessZerosError,
    FilterCoefficientsError,
    FilterOrderError,
    MalformedDenominatorError,
    NonUnityDenominatorError,
    SectionCountError,
)
from ._frequency_response import frequency_response
from ._group_zeros_poles import group_zeros_poles
from ._inverse import inverse
from ._multiply import cascade, multiply, scale
from ._polynomial_ratio import PolynomialRatio, polynomial_ratio
from ._power import power
from ._second_order_sections import (
    SecondOrderSections,
    second_order_sections,
)
from ._split_real_complex import split_real_complex
from ._zero_pole_gain import ZeroPoleGain, zero_pole_gain

__all__ = [
    # Representations
    "Biquad",
    "Domain",
    "PolynomialRatio",
    "SecondOrderSections",
    "ZeroPoleGain",
    "biquad",
    "biquad_normalized",
    "polynomial_ratio",
    "second_order_sections",
    "zero_pole_gain",
    # Conversion
    "convert",
    "to_biquad",
    "to_polynomial_ratio",
    "to_second_order_sections",
    "to_zero_pole_gain",
    "coefa",
    "coefb",
    # Arithmetic
    "cascade",
    "inverse",
    "multiply",
    "power",
    "scale",
    # Analysis
    "frequency_response",
    # Pairing
    "group_zeros_poles",
    "split_real_complex",
    # Constants
    "IMAGINARY_RESIDUAL_TOLERANCE",
    # Exceptions
    "ConjugateMismatchError",
    "DomainMismatchError",
    "ExcessZerosError",
    "FilterCoefficientsError",
    "FilterOrderError",
    "MalformedDenominatorError",
    "NonUnityDenominatorError",
    "SectionCountError",
]
