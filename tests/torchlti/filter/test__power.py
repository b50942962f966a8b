"""Tests for integer powers of filters."""

import pytest
import torch

from torchlti.filter import (
    MalformedDenominatorError,
    SecondOrderSections,
    biquad,
    coefa,
    coefb,
    frequency_response,
    polynomial_ratio,
    power,
    second_order_sections,
    to_second_order_sections,
    zero_pole_gain,
)


class TestPower:
    """Tests for power and the ** operator."""

    def test_zero_pole_gain(self):
        f = zero_pole_gain([-1.0], [0.5], 2.0) ** 2
        torch.testing.assert_close(f.zeros, torch.tensor([-1.0, -1.0]))
        torch.testing.assert_close(f.poles, torch.tensor([0.5, 0.5]))
        torch.testing.assert_close(f.gain, torch.tensor(4.0))

    def test_zero_pole_gain_negative(self):
        f = zero_pole_gain([-1.0], [0.5], 2.0) ** -2
        torch.testing.assert_close(f.zeros, torch.tensor([0.5, 0.5]))
        torch.testing.assert_close(f.poles, torch.tensor([-1.0, -1.0]))
        torch.testing.assert_close(f.gain, torch.tensor(0.25))

    def test_zero_pole_gain_zero(self):
        f = zero_pole_gain([-1.0], [0.5], 2.0) ** 0
        assert f.zeros.numel() == 0
        assert f.poles.numel() == 0
        torch.testing.assert_close(f.gain, torch.tensor(1.0))

    def test_polynomial_ratio(self):
        f = polynomial_ratio([1.0, 0.5], [1.0, -0.5]) ** 2
        torch.testing.assert_close(coefb(f), torch.tensor([1.0, 1.0, 0.25]))
        torch.testing.assert_close(coefa(f), torch.tensor([1.0, -1.0, 0.25]))

    def test_polynomial_ratio_negative(self):
        f = polynomial_ratio([1.0, 0.5], [1.0, -0.5]) ** -2
        torch.testing.assert_close(coefb(f), torch.tensor([1.0, -1.0, 0.25]))
        torch.testing.assert_close(coefa(f), torch.tensor([1.0, 1.0, 0.25]))

    def test_biquad(self):
        f = biquad(1.0, 2.0, 1.0, -0.5, 0.1)
        g = f**3
        assert isinstance(g, SecondOrderSections)
        assert g.sections.shape == (3, 5)
        torch.testing.assert_close(g.sections[2], f.coefficients())
        torch.testing.assert_close(g.gain, torch.tensor(1.0))

    def test_biquad_negative(self):
        g = biquad(2.0, 1.0, 0.5, -0.5, 0.25) ** -1
        torch.testing.assert_close(
            g.sections, torch.tensor([[0.5, -0.25, 0.125, 0.5, 0.25]])
        )

    def test_second_order_sections(self):
        f = second_order_sections(
            torch.tensor([[1.0, 0.0, 0.0, 0.5, 0.0], [1.0, 1.0, 0.0, 0.0, 0.0]]),
            2.0,
        )
        g = f**2
        assert g.sections.shape == (4, 5)
        torch.testing.assert_close(g.sections[2:], f.sections)
        torch.testing.assert_close(g.gain, torch.tensor(4.0))

    def test_second_order_sections_negative(self):
        f = second_order_sections(
            torch.tensor([[1.0, 0.0, 0.0, 0.5, 0.0]], dtype=torch.float64),
            2.0,
        )
        w = torch.linspace(0.1, 3.0, 16, dtype=torch.float64)
        torch.testing.assert_close(
            frequency_response(f**-3, w),
            frequency_response(f, w) ** -3,
        )

    def test_negative_power_of_odd_order_sections_raises(self):
        f = to_second_order_sections(zero_pole_gain([], [0.3], 1.0))
        with pytest.raises(MalformedDenominatorError):
            power(f, -2)

    def test_non_integer_exponent_raises(self):
        f = zero_pole_gain([-1.0], [0.5], 2.0)
        with pytest.raises(TypeError):
            power(f, 0.5)
