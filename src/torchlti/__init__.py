"""torchlti: linear time-invariant filter coefficients in PyTorch."""

from . import filter, polynomial

__all__ = [
    "filter",
    "polynomial",
]

__version__ = "0.1.0"
