"""Zero-pole-gain filter representation."""

from typing import Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlti._tensor import (
    as_tensor,
    common_dtype,
    complex_dtype,
    floating_dtype,
    real_dtype,
)

from ._domain import Domain, as_domain
from ._exceptions import DomainMismatchError


@tensorclass
class ZeroPoleGain:
    """Filter in terms of its zeros, poles, and gain.

    Represents

    .. math::
        H(x) = k \\frac{(x - z_0) \\ldots (x - z_{m-1})}{(x - p_0) \\ldots (x - p_{n-1})}

    where x is z (discrete time) or s (continuous time).

    Attributes
    ----------
    zeros : Tensor
        Zeros, shape (m,). Repeated entries encode multiplicity.
    poles : Tensor
        Poles, shape (n,).
    gain : Tensor
        Scalar gain k, shape ().
    domain : Domain
        Domain of the transfer function variable.

    Operator overloading:
        f * g    # cascade, zeros and poles concatenate
        f * c    # scale gain
        f ** e   # integer power, negative e inverts
    """

    zeros: Tensor
    poles: Tensor
    gain: Tensor
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


def zero_pole_gain(
    zeros,
    poles=None,
    gain=None,
    domain: Optional[Union[Domain, str]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
) -> ZeroPoleGain:
    """Create a zero-pole-gain filter.

    Called with a single filter argument, converts that filter to
    zero-pole-gain form, keeping its domain.

    Parameters
    ----------
    zeros : Tensor, sequence, or filter
        Zeros, or a filter of any representation to convert.
    poles : Tensor or sequence
        Poles.
    gain : Tensor or number
        Gain. A Python number takes the precision of zeros and poles.
    domain : Domain or str, optional
        "z" (default) or "s".
    dtype : torch.dtype, optional
        Dtype of zeros and poles.

    Returns
    -------
    ZeroPoleGain

    Examples
    --------
    >>> f = zero_pole_gain([-1.0], [0.5], 0.25)
    >>> f.domain
    <Domain.Z: 'z'>
    """
    if poles is None and gain is None:
        from ._convert import to_zero_pole_gain

        f = to_zero_pole_gain(zeros)
        if domain is not None and as_domain(domain) != f.domain:
            raise DomainMismatchError(
                f"cannot reinterpret a {f.domain!s} domain filter in the "
                f"{as_domain(domain)!s} domain"
            )
        return f

    zeros = as_tensor(zeros, dtype=dtype).reshape(-1)
    poles = as_tensor(poles, dtype=dtype).reshape(-1)

    if gain is None:
        gain = 1.0

    if not isinstance(gain, Tensor):
        roots_dtype = common_dtype(zeros, poles)
        if isinstance(gain, complex):
            gain = torch.as_tensor(gain, dtype=complex_dtype(roots_dtype))
        else:
            gain = torch.as_tensor(
                gain, dtype=real_dtype(floating_dtype(roots_dtype))
            )

    return ZeroPoleGain(
        zeros=zeros,
        poles=poles,
        gain=gain.reshape(()),
        domain=as_domain(domain),
    )
