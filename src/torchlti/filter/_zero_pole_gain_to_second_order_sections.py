"""Conversion from zeros-poles-gain to second-order sections."""

from typing import Dict, List

import torch
from torch import Tensor

from torchlti._tensor import common_dtype, complex_dtype, real_dtype

from ._exceptions import ExcessZerosError
from ._group_zeros_poles import group_zeros_poles
from ._polynomial_ratio_to_biquad import polynomial_ratio_to_biquad
from ._second_order_sections import SecondOrderSections, _sections_from_rows
from ._split_real_complex import split_real_complex
from ._zero_pole_gain import ZeroPoleGain
from ._zero_pole_gain_to_polynomial_ratio import (
    zero_pole_gain_to_polynomial_ratio,
)


def zero_pole_gain_to_second_order_sections(
    f: ZeroPoleGain,
) -> SecondOrderSections:
    """Split a zero-pole-gain filter into second-order sections.

    Poles are sorted by distance from the unit circle and each one is
    grouped with its nearest zero, complex with complex first:

    1. complex poles with complex zeros
    2. real poles with the remaining complex zeros
    3. the remaining complex poles with real zeros
    4. the remaining real poles with real zeros

    Leftover poles follow without zeros. Consecutive pairs of grouped poles
    form the sections, emitted in reverse, so the poles closest to the unit
    circle end up in the last section. For an odd number of poles the first
    section holds the single remaining pole and any zero grouped with it.

    Every section has unit gain. The gain of f becomes the cascade gain.

    Parameters
    ----------
    f : ZeroPoleGain
        Filter to convert. Non-real zeros and poles must come in conjugate
        pairs of equal multiplicity.

    Returns
    -------
    SecondOrderSections
        ceil(len(poles) / 2) sections with real coefficients.

    Raises
    ------
    ExcessZerosError
        If f has more zeros than poles.
    ConjugateMismatchError
        If a non-real zero or pole has no conjugate of equal multiplicity.

    Examples
    --------
    >>> f = zero_pole_gain([-1.0, -1.0], [0.5 + 0.5j, 0.5 - 0.5j], 0.25)
    >>> sos = zero_pole_gain_to_second_order_sections(f)
    >>> sos.sections
    tensor([[ 1.0000,  2.0000,  1.0000, -1.0000,  0.5000]])
    """
    n_zeros = f.zeros.shape[-1]
    n = f.poles.shape[-1]
    if n_zeros > n:
        raise ExcessZerosError(
            "ZeroPoleGain must not have more zeros than poles"
        )

    complex_zeros, real_zeros = split_real_complex(
        f.zeros.tolist(), name="zeros"
    )
    complex_poles, real_poles = split_real_complex(
        f.poles.tolist(), key=lambda x: abs(abs(x) - 1), name="poles"
    )

    z1, p1 = group_zeros_poles(complex_zeros, complex_poles)
    z2, p2 = group_zeros_poles(complex_zeros, real_poles)
    z3, p3 = group_zeros_poles(real_zeros, complex_poles)
    z4, p4 = group_zeros_poles(real_zeros, real_poles)

    grouped_zeros = _indices(f.zeros, z1 + z2 + z3 + z4)
    grouped_poles = _indices(
        f.poles, p1 + p2 + p3 + p4 + complex_poles + real_poles
    )

    dtype = complex_dtype(common_dtype(f.zeros, f.poles))
    zeros = f.zeros.to(dtype)
    poles = f.poles.to(dtype)

    def section(zero_indices: List[int], pole_indices: List[int]) -> Tensor:
        zpk = ZeroPoleGain(
            zeros=_select(zeros, zero_indices),
            poles=_select(poles, pole_indices),
            gain=torch.ones((), dtype=real_dtype(dtype), device=zeros.device),
            domain=f.domain,
        )
        return polynomial_ratio_to_biquad(
            zero_pole_gain_to_polynomial_ratio(zpk)
        ).coefficients()

    rows = []
    if n % 2 == 1:
        rows.append(section(grouped_zeros[n - 1 :], grouped_poles[n - 1 :]))

    n_pairs = n // 2
    for i in reversed(range(n_pairs)):
        rows.append(
            section(
                grouped_zeros[2 * i : 2 * i + 2],
                grouped_poles[2 * i : 2 * i + 2],
            )
        )

    return _sections_from_rows(rows, f.gain, f.domain)


def _indices(roots: Tensor, values: List[complex]) -> List[int]:
    # positions of grouped values in roots, each position used once
    positions: Dict[complex, List[int]] = {}
    for i, v in enumerate(roots.tolist()):
        v = complex(v)
        key = complex(v.real or 0.0, v.imag or 0.0)
        positions.setdefault(key, []).append(i)

    return [positions[complex(v)].pop(0) for v in values]


def _select(roots: Tensor, indices: List[int]) -> Tensor:
    index = torch.tensor(indices, dtype=torch.long, device=roots.device)
    return torch.index_select(roots, -1, index)
