"""Domain tag shared by all filter representations."""

import enum
from typing import Optional, Union

from ._exceptions import DomainMismatchError


class Domain(str, enum.Enum):
    """Variable a filter's transfer function is a rational function of.

    Z is the discrete-time unit-delay variable, S the continuous-time
    Laplace variable.
    """

    Z = "z"
    S = "s"

    def __str__(self) -> str:
        return self.value


def as_domain(domain: Optional[Union[Domain, str]]) -> Domain:
    """Coerce a domain tag, defaulting to Z."""
    if domain is None:
        return Domain.Z
    return Domain(domain)


def check_domains(*filters) -> Domain:
    """Return the common domain of `filters`.

    Raises
    ------
    DomainMismatchError
        If the filters do not all share one domain.
    """
    domain = filters[0].domain
    for f in filters[1:]:
        if f.domain != domain:
            raise DomainMismatchError(
                f"cannot combine filters of domain {domain!s} and "
                f"{f.domain!s}"
            )
    return domain
