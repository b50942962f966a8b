"""Single second-order section."""

from typing import Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlti._tensor import as_tensor, common_dtype, floating_dtype

from ._domain import Domain, as_domain
from ._exceptions import DomainMismatchError, MalformedDenominatorError


@tensorclass
class Biquad:
    """Filter given by the transfer function of one second-order section.

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + b_2 z^{-2}}{1 + a_1 z^{-1} + a_2 z^{-2}}

    or, in the s domain,

    .. math::
        H(s) = \\frac{b_0 s^2 + b_1 s + b_2}{s^2 + a_1 s + a_2}

    First-order sections are stored with zero coefficients in the unused
    slots.

    Attributes
    ----------
    b0, b1, b2 : Tensor
        Numerator coefficients, shape ().
    a1, a2 : Tensor
        Denominator coefficients, shape (). The leading denominator
        coefficient is implicitly one.
    domain : Domain
        Domain of the transfer function variable.

    Operator overloading:
        f * g    # cascade, returns SecondOrderSections
        f * c    # scale numerator
        f ** e   # SecondOrderSections of |e| copies, inverted if e < 0
    """

    b0: Tensor
    b1: Tensor
    b2: Tensor
    a1: Tensor
    a2: Tensor
    domain: Domain

    def __mul__(self, other):
        from ._multiply import multiply

        return multiply(self, other)

    def __rmul__(self, other):
        from ._multiply import multiply

        return multiply(other, self)

    def __pow__(self, e: int):
        from ._power import power

        return power(self, e)

    def coefficients(self) -> Tensor:
        """Coefficients [b0, b1, b2, a1, a2] as one tensor of shape (5,)."""
        return torch.stack([self.b0, self.b1, self.b2, self.a1, self.a2])


def biquad(
    b0,
    b1=None,
    b2=None,
    a1=None,
    a2=None,
    domain: Optional[Union[Domain, str]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Biquad:
    """Create a biquad from normalized coefficients.

    Called with a single filter argument, converts that filter to a biquad.

    Parameters
    ----------
    b0, b1, b2 : Tensor or number
        Numerator coefficients. `b0` may instead be a filter to convert.
    a1, a2 : Tensor or number
        Denominator coefficients after the implicit leading one.
    domain : Domain or str, optional
        "z" (default) or "s".
    dtype : torch.dtype, optional
        Coefficient dtype. Defaults to the promoted dtype of the inputs.

    Returns
    -------
    Biquad

    Raises
    ------
    FilterOrderError
        When converting a transfer function of order greater than two.
    NonUnityDenominatorError
        When converting a transfer function whose leading denominator
        coefficient is not one.
    SectionCountError
        When converting a cascade of more than one section.

    Examples
    --------
    >>> f = biquad(1.0, 2.0, 1.0, -0.5, 0.1)
    >>> f.coefficients()
    tensor([ 1.0000,  2.0000,  1.0000, -0.5000,  0.1000])
    """
    if b1 is None and b2 is None and a1 is None and a2 is None:
        from ._convert import to_biquad

        f = to_biquad(b0)
        if domain is not None and as_domain(domain) != f.domain:
            raise DomainMismatchError(
                f"cannot reinterpret a {f.domain!s} domain filter in the "
                f"{as_domain(domain)!s} domain"
            )
        return f

    coeffs = as_tensor([b0, b1, b2, a1, a2], dtype=dtype)

    return _biquad_from_tensor(coeffs, as_domain(domain))


def biquad_normalized(
    b0,
    b1,
    b2,
    a0,
    a1,
    a2,
    gain=1,
    domain: Optional[Union[Domain, str]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Biquad:
    """Create a biquad from unnormalized coefficients.

    Every coefficient is divided by `a0` and the numerator is multiplied by
    `gain`.

    Parameters
    ----------
    b0, b1, b2 : Tensor or number
        Numerator coefficients.
    a0, a1, a2 : Tensor or number
        Denominator coefficients.
    gain : Tensor or number
        Extra factor applied to the numerator.
    domain : Domain or str, optional
        "z" (default) or "s".
    dtype : torch.dtype, optional
        Coefficient dtype. Defaults to the promoted floating dtype.

    Returns
    -------
    Biquad

    Raises
    ------
    MalformedDenominatorError
        If a0 is zero.
    """
    coeffs = as_tensor([b0, b1, b2, a0, a1, a2])
    gain = as_tensor(gain).reshape(())

    t = dtype or floating_dtype(common_dtype(coeffs, gain))
    coeffs = coeffs.to(t)
    gain = gain.to(t)

    a0 = coeffs[3]
    if a0 == 0:
        raise MalformedDenominatorError(
            "biquad must have non-zero leading denominator coefficient"
        )

    numerator = gain * coeffs[:3] / a0
    denominator = coeffs[4:] / a0

    return _biquad_from_tensor(
        torch.cat([numerator, denominator]),
        as_domain(domain),
    )


def _biquad_from_tensor(coeffs: Tensor, domain: Domain) -> Biquad:
    """Biquad from a (5,) tensor [b0, b1, b2, a1, a2]."""
    b0, b1, b2, a1, a2 = coeffs.unbind(0)
    return Biquad(b0=b0, b1=b1, b2=b2, a1=a1, a2=a2, domain=domain)
