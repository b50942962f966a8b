"""Benchmarks for filter representation conversions.

This module provides benchmarking utilities and benchmark classes for
comparing torchlti conversions against scipy baselines.
"""

from .bench_conversions import BenchConversions

__all__ = [
    "BenchConversions",
]
