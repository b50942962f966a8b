"""Hypothesis strategies for filter testing."""

from ._conjugate_symmetric_roots import conjugate_symmetric_roots
from ._domains import domains
from ._polynomial_ratio_filters import polynomial_ratio_filters
from ._zero_pole_gain_filters import zero_pole_gain_filters

__all__ = [
    # Root strategies
    "conjugate_symmetric_roots",
    # Filter strategies
    "domains",
    "polynomial_ratio_filters",
    "zero_pole_gain_filters",
]
