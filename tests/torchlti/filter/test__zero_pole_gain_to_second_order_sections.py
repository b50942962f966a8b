"""Tests for splitting zero-pole-gain filters into second-order sections."""

import hypothesis
import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchlti.filter import (
    ConjugateMismatchError,
    Domain,
    ExcessZerosError,
    frequency_response,
    second_order_sections,
    to_second_order_sections,
    to_zero_pole_gain,
    zero_pole_gain,
)
from torchlti.testing.strategies import (
    polynomial_ratio_filters,
    zero_pole_gain_filters,
)


def _sorted(roots):
    return roots[(roots.real * 1000 + roots.imag).argsort()]


class TestZeroPoleGainToSecondOrderSections:
    """Tests for zero-pole-gain to second-order sections conversion."""

    def test_single_section(self):
        f = zero_pole_gain([-1.0, -1.0], [0.5 + 0.5j, 0.5 - 0.5j], 0.25)
        sos = to_second_order_sections(f)
        torch.testing.assert_close(
            sos.sections, torch.tensor([[1.0, 2.0, 1.0, -1.0, 0.5]])
        )
        torch.testing.assert_close(sos.gain, torch.tensor(0.25))

    def test_gain_is_attached_to_cascade(self):
        f = zero_pole_gain(
            torch.tensor([0.5, -0.5], dtype=torch.float64),
            torch.tensor([0.1, 0.2, 0.3, 0.4], dtype=torch.float64),
            -3.0,
        )
        sos = second_order_sections(f)
        torch.testing.assert_close(
            sos.gain, torch.tensor(-3.0, dtype=torch.float64)
        )
        # Sections are emitted in reverse, the zeros sit in the last one
        torch.testing.assert_close(
            sos.sections[:, 0],
            torch.tensor([0.0, 1.0], dtype=torch.float64),
        )

    @pytest.mark.parametrize("n_poles", [1, 2, 3, 4, 5, 6, 7])
    def test_section_count(self, n_poles: int):
        poles = torch.linspace(-0.8, 0.8, n_poles, dtype=torch.float64)
        sos = to_second_order_sections(zero_pole_gain([], poles, 1.0))
        assert sos.sections.shape == ((n_poles + 1) // 2, 5)

    def test_odd_order_first_section_is_first_order(self):
        f = zero_pole_gain(
            torch.tensor([-1.0, -1.0, -1.0], dtype=torch.float64),
            torch.tensor([0.5 + 0.5j, 0.5 - 0.5j, 0.3], dtype=torch.complex128),
            1.0,
        )
        sos = to_second_order_sections(f)
        assert sos.sections.shape == (2, 5)
        first = sos.sections[0]
        torch.testing.assert_close(
            first,
            torch.tensor([1.0, 1.0, 0.0, -0.3, 0.0], dtype=torch.float64),
        )

    def test_poles_closest_to_unit_circle_come_last(self):
        f = zero_pole_gain(
            torch.zeros(0, dtype=torch.complex128),
            torch.tensor(
                [0.2 + 0.2j, 0.2 - 0.2j, 0.9 + 0.1j, 0.9 - 0.1j],
                dtype=torch.complex128,
            ),
            1.0,
        )
        sos = to_second_order_sections(f)
        torch.testing.assert_close(
            sos.sections[:, 3:],
            torch.tensor([[-0.4, 0.08], [-1.8, 0.82]], dtype=torch.float64),
        )

    def test_complex_zeros_pair_with_closest_complex_poles(self):
        zeros = torch.tensor(
            [1j, -1j, 0.95j, -0.95j],
            dtype=torch.complex128,
        )
        poles = torch.tensor(
            [0.9j, -0.9j, 0.1j, -0.1j],
            dtype=torch.complex128,
        )
        sos = to_second_order_sections(zero_pole_gain(zeros, poles, 1.0))
        # The pole pair at 0.9j is nearest the unit circle and is grouped
        # with the zeros at 0.95j, in the last section.
        torch.testing.assert_close(
            sos.sections,
            torch.tensor(
                [
                    [1.0, 0.0, 1.0, 0.0, 0.01],
                    [1.0, 0.0, 0.9025, 0.0, 0.81],
                ],
                dtype=torch.float64,
            ),
        )

    def test_matches_scipy_response(self):
        z, p, k = scipy_signal.butter(5, 0.3, output="zpk")
        f = zero_pole_gain(torch.from_numpy(z), torch.from_numpy(p), float(k))
        sos = to_second_order_sections(f)

        assert sos.sections.shape == (3, 5)

        w = np.linspace(0.0, 3.0, 64)
        _, h = scipy_signal.freqz_zpk(z, p, k, worN=w)
        torch.testing.assert_close(
            frequency_response(sos, torch.from_numpy(w)),
            torch.from_numpy(h),
            rtol=1e-6,
            atol=1e-9,
        )

    def test_s_domain(self):
        f = zero_pole_gain(
            torch.zeros(0, dtype=torch.float64),
            torch.tensor([-1.0 + 2.0j, -1.0 - 2.0j, -3.0], dtype=torch.complex128),
            10.0,
            "s",
        )
        sos = to_second_order_sections(f)
        assert sos.domain is Domain.S
        # 1 / (s + 3), then 1 / (s^2 + 2s + 5)
        torch.testing.assert_close(
            sos.sections,
            torch.tensor(
                [[0.0, 1.0, 0.0, 3.0, 0.0], [0.0, 0.0, 1.0, 2.0, 5.0]],
                dtype=torch.float64,
            ),
        )

    def test_no_poles(self):
        sos = to_second_order_sections(zero_pole_gain([], [], 2.0))
        assert sos.sections.shape == (0, 5)
        torch.testing.assert_close(sos.gain, torch.tensor(2.0))

    def test_unmatched_complex_zero_raises(self):
        f = zero_pole_gain([1 + 2j], [0.5, -0.5], 1.0)
        with pytest.raises(ConjugateMismatchError, match="zeros"):
            to_second_order_sections(f)

    def test_unmatched_complex_pole_raises(self):
        f = zero_pole_gain([], [0.5 + 0.5j, 0.5 - 0.4j], 1.0)
        with pytest.raises(ConjugateMismatchError, match="poles"):
            to_second_order_sections(f)

    def test_excess_zeros_raises(self):
        f = zero_pole_gain([0.1, 0.2], [0.5], 1.0)
        with pytest.raises(ExcessZerosError):
            to_second_order_sections(f)

    def test_gradient_flows_to_poles(self):
        poles = torch.tensor(
            [0.5 + 0.5j, 0.5 - 0.5j], dtype=torch.complex128, requires_grad=True
        )
        sos = to_second_order_sections(zero_pole_gain([-1.0, -1.0], poles, 1.0))
        assert sos.sections.requires_grad

        # a1 = -(p0 + p1)
        sos.sections[0, 3].backward()

        torch.testing.assert_close(
            poles.grad.real, torch.tensor([-1.0, -1.0], dtype=torch.float64)
        )

    def test_gradient_flows_to_zeros_of_every_section(self):
        zeros = torch.tensor(
            [-1.0, -0.5, 0.25], dtype=torch.float64, requires_grad=True
        )
        f = zero_pole_gain(zeros, [0.5 + 0.5j, 0.5 - 0.5j, 0.3], 1.0)
        to_second_order_sections(f).sections.sum().backward()

        assert zeros.grad is not None
        assert torch.all(zeros.grad != 0)

    @pytest.mark.skipif(
        not torch.cuda.is_available(), reason="CUDA not available"
    )
    def test_sections_stay_on_input_device(self):
        f = zero_pole_gain(
            torch.tensor([-1.0], device="cuda"),
            torch.tensor([0.5 + 0.5j, 0.5 - 0.5j, 0.3], device="cuda"),
            torch.tensor(2.0, device="cuda"),
        )
        sos = to_second_order_sections(f)

        assert sos.sections.device.type == "cuda"
        assert sos.gain.device.type == "cuda"

    @hypothesis.given(zero_pole_gain_filters())
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_roundtrip(self, f):
        sos = to_second_order_sections(f)
        g = to_zero_pole_gain(sos)

        assert sos.sections.shape[0] == (f.poles.numel() + 1) // 2
        torch.testing.assert_close(g.gain, f.gain)
        torch.testing.assert_close(
            _sorted(g.zeros), _sorted(f.zeros.to(g.zeros.dtype)), atol=1e-6, rtol=0
        )
        torch.testing.assert_close(
            _sorted(g.poles), _sorted(f.poles.to(g.poles.dtype)), atol=1e-6, rtol=0
        )

    @hypothesis.given(polynomial_ratio_filters())
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_polynomial_ratio_preserves_response(self, f):
        sos = to_second_order_sections(f)

        w = torch.linspace(0.1, 3.0, 32, dtype=torch.float64)
        torch.testing.assert_close(
            frequency_response(sos, w),
            frequency_response(f, w),
            rtol=1e-6,
            atol=1e-8,
        )
