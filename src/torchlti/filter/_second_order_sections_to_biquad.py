"""Conversion from a one-section cascade to a biquad."""

from ._biquad import Biquad
from ._exceptions import SectionCountError
from ._multiply import biquad_scale
from ._second_order_sections import SecondOrderSections


def second_order_sections_to_biquad(f: SecondOrderSections) -> Biquad:
    """Fold the cascade gain into its only section.

    Raises
    ------
    SectionCountError
        If the cascade does not have exactly one section.
    """
    if f.sections.shape[0] != 1:
        raise SectionCountError(
            "only a single second order section may be converted to a biquad"
        )

    return biquad_scale(f.biquads[0], f.gain)
