"""Benchmarks for filter representation conversions.

Each conversion (zero-pole-gain to transfer function, transfer function to
zero-pole-gain, zero-pole-gain to second-order sections) is timed against
its scipy.signal counterpart on Butterworth designs.
"""

from __future__ import annotations

import statistics
import time
from typing import Callable

import torch
from scipy import signal as scipy_signal

from torchlti.filter import (
    polynomial_ratio,
    to_polynomial_ratio,
    to_second_order_sections,
    to_zero_pole_gain,
    zero_pole_gain,
)


def _median_time(func: Callable[[], object], warmup: int, repeat: int) -> float:
    for _ in range(warmup):
        func()

    times = []
    for _ in range(repeat):
        start = time.perf_counter()
        func()
        times.append(time.perf_counter() - start)

    return statistics.median(times)


def _row(name: str, lti: float, reference: float) -> str:
    return (
        f"{name:<48} {lti * 1e6:>10.1f}us {reference * 1e6:>10.1f}us "
        f"{reference / lti:>7.2f}"
    )


def _butterworth(order: int):
    z, p, k = scipy_signal.butter(order, 0.3, output="zpk")
    f = zero_pole_gain(torch.from_numpy(z), torch.from_numpy(p), float(k))
    return f, (z, p, k)


class BenchConversions:
    """Conversions between filter representations against scipy.signal.

    Each bench_* method returns one formatted row: median torchlti time,
    median scipy time and their ratio (above 1 means torchlti is faster).
    """

    def __init__(self, warmup: int = 3, repeat: int = 10):
        self.warmup = warmup
        self.repeat = repeat

    def _compare(
        self,
        name: str,
        lti: Callable[[], object],
        reference: Callable[[], object],
    ) -> str:
        return _row(
            name,
            _median_time(lti, self.warmup, self.repeat),
            _median_time(reference, self.warmup, self.repeat),
        )

    def bench_zero_pole_gain_to_polynomial_ratio(self, order: int = 8) -> str:
        f, zpk = _butterworth(order)
        return self._compare(
            f"zero_pole_gain -> polynomial_ratio ({order})",
            lambda: to_polynomial_ratio(f),
            lambda: scipy_signal.zpk2tf(*zpk),
        )

    def bench_polynomial_ratio_to_zero_pole_gain(self, order: int = 8) -> str:
        b, a = scipy_signal.butter(order, 0.3, output="ba")
        f = polynomial_ratio(torch.from_numpy(b), torch.from_numpy(a))
        return self._compare(
            f"polynomial_ratio -> zero_pole_gain ({order})",
            lambda: to_zero_pole_gain(f),
            lambda: scipy_signal.tf2zpk(b, a),
        )

    def bench_zero_pole_gain_to_second_order_sections(
        self, order: int = 8
    ) -> str:
        f, zpk = _butterworth(order)
        return self._compare(
            f"zero_pole_gain -> second_order_sections ({order})",
            lambda: to_second_order_sections(f),
            lambda: scipy_signal.zpk2sos(*zpk),
        )

    def run_all(self) -> None:
        """Print every conversion at order 8, then pairing over the order."""
        header = ("conversion (order)", "torchlti", "scipy")
        print("{:<48} {:>12} {:>12} ratio".format(*header))
        print(self.bench_zero_pole_gain_to_polynomial_ratio())
        print(self.bench_polynomial_ratio_to_zero_pole_gain())
        for order in [2, 8, 16, 32]:
            print(self.bench_zero_pole_gain_to_second_order_sections(order))


if __name__ == "__main__":
    BenchConversions(warmup=5, repeat=20).run_all()
