"""Cascade of second-order sections."""

from typing import Optional, Sequence, Tuple, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchlti._tensor import (
    as_tensor,
    common_dtype,
    floating_dtype,
    real_dtype,
)

from ._biquad import Biquad, _biquad_from_tensor
from ._domain import Domain, as_domain, check_domains
from ._exceptions import DomainMismatchError


@tensorclass
class SecondOrderSections:
    """Filter as a cascade of biquads and one overall gain.

    .. math::
        H(x) = g \\prod_{k} H_k(x)

    Section order does not change the transfer function, only the numerical
    conditioning of the cascade.

    Attributes
    ----------
    sections : Tensor
        Biquad coefficients, shape (n_sections, 5). Each row is
        [b0, b1, b2, a1, a2].
    gain : Tensor
        Overall gain g, shape ().
    domain : Domain
        Domain of the transfer function variable.

    Operator overloading:
        f * g    # concatenate sections, multiply gains
        f * c    # scale gain
        f ** e   # repeat sections, negative e inverts every section
    """

    sections: Tensor
    gain: Tensor
    domain: Domain

    @property
    def biquads(self) -> Tuple[Biquad, ...]:
        """Sections as Biquad filters, in cascade order."""
        return tuple(
            _biquad_from_tensor(row, self.domain)
            for row in self.sections.unbind(0)
        )

    def __mul__(self, other):
        from ._multiply import multiply

        return multiply(self, other)

    def __rmul__(self, other):
        from ._multiply import multiply

        return multiply(other, self)

    def __pow__(self, e: int):
        from ._power import power

        return power(self, e)


def second_order_sections(
    biquads,
    gain=None,
    domain: Optional[Union[Domain, str]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
) -> SecondOrderSections:
    """Create a second-order sections cascade.

    Called with a single filter argument, converts that filter to
    second-order sections.

    Parameters
    ----------
    biquads : sequence of Biquad, Tensor, or filter
        Sections as Biquads (their domain is used), or a tensor of shape
        (n_sections, 5) with rows [b0, b1, b2, a1, a2].
    gain : Tensor or number
        Overall gain. A Python number takes the sections' dtype.
    domain : Domain or str, optional
        "z" (default) or "s".
    dtype : torch.dtype, optional
        Section coefficient dtype.

    Returns
    -------
    SecondOrderSections

    Raises
    ------
    ExcessZerosError
        When converting a zero-pole-gain filter with more zeros than poles.
    ConjugateMismatchError
        When converting a filter whose non-real zeros or poles are not
        conjugate paired.
    DomainMismatchError
        If the biquads do not share one domain.
    """
    if gain is None and not isinstance(biquads, (Tensor, list, tuple)):
        from ._convert import to_second_order_sections

        f = to_second_order_sections(biquads)
        if domain is not None and as_domain(domain) != f.domain:
            raise DomainMismatchError(
                f"cannot reinterpret a {f.domain!s} domain filter in the "
                f"{as_domain(domain)!s} domain"
            )
        return f

    if isinstance(biquads, Tensor):
        sections = biquads.to(dtype) if dtype is not None else biquads
        domain = as_domain(domain)
    else:
        sections, domain = _stack_biquads(biquads, domain, dtype)

    if sections.dim() != 2 or sections.shape[-1] != 5:
        raise ValueError(
            f"sections must have shape (n_sections, 5), got "
            f"{tuple(sections.shape)}"
        )

    if gain is None:
        gain = 1
    if not isinstance(gain, Tensor):
        if isinstance(gain, complex):
            gain = torch.as_tensor(gain)
        else:
            gain = torch.as_tensor(gain, dtype=floating_dtype(sections.dtype))

    return SecondOrderSections(
        sections=sections,
        gain=gain.reshape(()),
        domain=domain,
    )


def _stack_biquads(
    biquads: Sequence[Biquad],
    domain: Optional[Union[Domain, str]],
    dtype: Optional[torch.dtype],
) -> Tuple[Tensor, Domain]:
    if len(biquads) == 0:
        return (
            torch.zeros(0, 5, dtype=dtype or torch.get_default_dtype()),
            as_domain(domain),
        )

    common = check_domains(*biquads)
    if domain is not None and as_domain(domain) != common:
        raise DomainMismatchError(
            f"cannot place {common!s} domain biquads in a "
            f"{as_domain(domain)!s} domain cascade"
        )

    rows = [f.coefficients() for f in biquads]
    t = dtype or common_dtype(*rows)

    return torch.stack([row.to(t) for row in rows]), common


def _sections_from_rows(
    rows: Sequence[Tensor], gain: Tensor, domain: Domain
) -> SecondOrderSections:
    """Cascade from (5,) rows without further validation."""
    if len(rows) == 0:
        sections = torch.zeros(
            0,
            5,
            dtype=real_dtype(floating_dtype(gain.dtype)),
            device=gain.device,
        )
    else:
        t = common_dtype(*rows)
        sections = torch.stack([row.to(t) for row in rows])

    return SecondOrderSections(
        sections=sections,
        gain=as_tensor(gain).reshape(()),
        domain=domain,
    )
