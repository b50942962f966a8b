"""Exceptions for filter coefficient representations."""


class FilterCoefficientsError(ValueError):
    """Base exception for filter coefficient errors."""

    pass


class MalformedDenominatorError(FilterCoefficientsError):
    """Raised when a denominator cannot be normalized.

    This occurs when:
    - The leading (z domain) denominator coefficient is zero
    - The s domain denominator is the zero polynomial
    - A biquad is built with a0 = 0
    """

    pass


class ConjugateMismatchError(FilterCoefficientsError):
    """Raised when a non-real zero or pole has no matching conjugate.

    Splitting a filter into second-order sections requires every non-real
    zero and pole to appear with its conjugate, with equal multiplicity.
    """

    pass


class ExcessZerosError(FilterCoefficientsError):
    """Raised when a zero-pole-gain filter has more zeros than poles.

    Such filters cannot be split into second-order sections.
    """

    pass


class FilterOrderError(FilterCoefficientsError):
    """Raised when a transfer function is too long for a biquad.

    The numerator and denominator together may reference at most three
    consecutive powers of the domain variable.
    """

    pass


class NonUnityDenominatorError(FilterCoefficientsError):
    """Raised when a biquad's leading denominator coefficient is not one."""

    pass


class SectionCountError(FilterCoefficientsError):
    """Raised when a cascade of several sections is narrowed to one biquad."""

    pass


class DomainMismatchError(FilterCoefficientsError, TypeError):
    """Raised when filters of different domains are combined.

    Filters in the z (discrete time) and s (continuous time) domains are
    different algebraic objects. Mixing them is a programming error.
    """

    pass
