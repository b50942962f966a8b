"""Tests for frequency_response."""

import math

import hypothesis
import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchlti.filter import (
    biquad,
    frequency_response,
    polynomial_ratio,
    to_biquad,
    zero_pole_gain,
)
from torchlti.testing.strategies import zero_pole_gain_filters


class TestFrequencyResponse:
    """Tests for frequency_response."""

    def test_zero_pole_gain(self):
        f = zero_pole_gain([-1.0], [0.0], 0.5)
        h = frequency_response(f, torch.tensor([0.0, math.pi]))
        torch.testing.assert_close(
            h, torch.tensor([1.0 + 0.0j, 0.0 + 0.0j]), atol=1e-6, rtol=0
        )

    def test_polynomial_ratio_matches_scipy(self):
        b = np.array([0.2, 0.3, 0.1])
        a = np.array([1.0, -0.4, 0.2])
        w = np.linspace(0.0, 3.0, 32)
        _, expected = scipy_signal.freqz(b, a, worN=w)

        f = polynomial_ratio(torch.from_numpy(b), torch.from_numpy(a))
        torch.testing.assert_close(
            frequency_response(f, torch.from_numpy(w)),
            torch.from_numpy(expected),
        )

    def test_s_domain_matches_scipy(self):
        b = np.array([1.0, 0.5])
        a = np.array([1.0, 2.0, 5.0])
        w = np.linspace(0.0, 10.0, 32)
        _, expected = scipy_signal.freqs(b, a, worN=w)

        f = polynomial_ratio(torch.from_numpy(b), torch.from_numpy(a), "s")
        torch.testing.assert_close(
            frequency_response(f, torch.from_numpy(w)),
            torch.from_numpy(expected),
        )
        torch.testing.assert_close(
            frequency_response(to_biquad(f), torch.from_numpy(w)),
            torch.from_numpy(expected),
        )

    def test_biquad(self):
        f = biquad(1.0, 2.0, 1.0, -0.5, 0.1, dtype=torch.float64)
        w = np.linspace(0.0, 3.0, 32)
        _, expected = scipy_signal.freqz([1.0, 2.0, 1.0], [1.0, -0.5, 0.1], worN=w)
        torch.testing.assert_close(
            frequency_response(f, torch.from_numpy(w)),
            torch.from_numpy(expected),
        )

    def test_number_of_points(self):
        f = zero_pole_gain(
            torch.tensor([-1.0], dtype=torch.float64),
            torch.tensor([0.5], dtype=torch.float64),
            0.25,
        )
        h = frequency_response(f, 8)
        assert h.shape == (8,)
        assert h.dtype == torch.complex128
        # unit DC gain
        torch.testing.assert_close(h[0], torch.tensor(1.0 + 0.0j, dtype=torch.complex128))

    def test_number_of_points_in_s_domain_raises(self):
        f = zero_pole_gain([], [-1.0], 1.0, "s")
        with pytest.raises(ValueError):
            frequency_response(f, 8)

    @hypothesis.given(zero_pole_gain_filters())
    @hypothesis.settings(max_examples=25, deadline=None)
    def test_shape_follows_frequencies(self, f):
        w = torch.linspace(0.1, 3.0, 12, dtype=torch.float64).reshape(3, 4)
        assert frequency_response(f, w).shape == (3, 4)
