"""Tests for filter inversion."""

import pytest
import torch

from torchlti.filter import (
    MalformedDenominatorError,
    biquad,
    coefa,
    coefb,
    frequency_response,
    inverse,
    polynomial_ratio,
    second_order_sections,
    to_second_order_sections,
    zero_pole_gain,
)


class TestInverse:
    """Tests for inverse."""

    def test_zero_pole_gain(self):
        f = inverse(zero_pole_gain([-1.0], [0.5, 0.25], 4.0))
        torch.testing.assert_close(f.zeros, torch.tensor([0.5, 0.25]))
        torch.testing.assert_close(f.poles, torch.tensor([-1.0]))
        torch.testing.assert_close(f.gain, torch.tensor(0.25))

    def test_polynomial_ratio(self):
        f = inverse(polynomial_ratio([1.0, 0.5], [1.0, -0.5]))
        torch.testing.assert_close(coefb(f), torch.tensor([1.0, -0.5]))
        torch.testing.assert_close(coefa(f), torch.tensor([1.0, 0.5]))

    def test_polynomial_ratio_renormalizes(self):
        f = inverse(polynomial_ratio([2.0, 1.0], [1.0]))
        torch.testing.assert_close(coefb(f), torch.tensor([0.5]))
        torch.testing.assert_close(coefa(f), torch.tensor([1.0, 0.5]))

    def test_biquad(self):
        f = inverse(biquad(2.0, 1.0, 0.5, -0.5, 0.25))
        torch.testing.assert_close(
            f.coefficients(), torch.tensor([0.5, -0.25, 0.125, 0.5, 0.25])
        )

    def test_biquad_with_zero_b0_raises(self):
        with pytest.raises(MalformedDenominatorError):
            inverse(biquad(0.0, 1.0, 0.0, -0.5, 0.0))

    def test_odd_order_sections_from_zero_pole_gain_raise(self):
        f = to_second_order_sections(
            zero_pole_gain([], [0.5 + 0.5j, 0.5 - 0.5j, 0.3], 1.0)
        )
        torch.testing.assert_close(
            f.sections[0], torch.tensor([0.0, 1.0, 0.0, -0.3, 0.0])
        )
        with pytest.raises(MalformedDenominatorError):
            inverse(f)

    def test_second_order_sections(self):
        f = second_order_sections(
            torch.tensor(
                [[2.0, 1.0, 0.5, -0.5, 0.25], [1.0, 0.0, 0.0, 0.5, 0.0]]
            ),
            4.0,
        )
        g = inverse(f)
        torch.testing.assert_close(
            g.sections,
            torch.tensor(
                [[0.5, -0.25, 0.125, 0.5, 0.25], [1.0, 0.5, 0.0, 0.0, 0.0]]
            ),
        )
        torch.testing.assert_close(g.gain, torch.tensor(0.25))

    def test_response_is_reciprocal(self):
        f = zero_pole_gain(
            torch.tensor([0.3 + 0.4j, 0.3 - 0.4j], dtype=torch.complex128),
            torch.tensor([0.5, -0.5], dtype=torch.float64),
            2.0,
        )
        w = torch.linspace(0.1, 3.0, 16, dtype=torch.float64)
        torch.testing.assert_close(
            frequency_response(inverse(f), w),
            1 / frequency_response(f, w),
        )

    def test_non_filter_raises(self):
        with pytest.raises(TypeError):
            inverse(2.0)
