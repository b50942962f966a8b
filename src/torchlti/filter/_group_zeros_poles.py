from typing import List, Tuple


def group_zeros_poles(
    zeros: List[complex],
    poles: List[complex],
) -> Tuple[List[complex], List[complex]]:
    """Group each pole with its closest remaining zero.

    Walks the first min(len(zeros), len(poles)) poles in order and, for
    each, takes the zero nearest to it in the complex plane (first minimum
    wins). A non-real zero also takes the entry after it, its conjugate, and
    covers the next pole as well.

    Grouped entries are removed from `zeros` and `poles` in place.

    Parameters
    ----------
    zeros : list of complex
        Zeros, conjugate pairs adjacent as produced by split_real_complex.
    poles : list of complex
        Poles to pair.

    Returns
    -------
    grouped_zeros : list of complex
        Zeros, index-aligned with grouped_poles.
    grouped_poles : list of complex
        The first min(len(zeros), len(poles)) poles.
    """
    n = min(len(zeros), len(poles))
    grouped_zeros: List[complex] = []

    while len(grouped_zeros) < n:
        pole = poles[len(grouped_zeros)]
        closest = min(range(len(zeros)), key=lambda j: abs(zeros[j] - pole))
        zero = zeros.pop(closest)
        grouped_zeros.append(zero)
        if zero.imag != 0:
            grouped_zeros.append(zeros.pop(closest))

    grouped_poles = poles[:n]
    del poles[:n]

    return grouped_zeros, grouped_poles
