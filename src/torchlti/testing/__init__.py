"""Testing helpers for torchlti."""

from . import strategies

__all__ = [
    "strategies",
]
