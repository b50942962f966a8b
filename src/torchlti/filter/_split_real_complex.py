from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ._exceptions import ConjugateMismatchError


def split_real_complex(
    values: Sequence[complex],
    key: Optional[Callable[[complex], float]] = None,
    name: str = "values",
) -> Tuple[List[complex], List[float]]:
    """Split roots into conjugate pairs and real values.

    Repeated values are counted, so conjugate pairs stay adjacent even with
    multiplicity.

    Parameters
    ----------
    values : sequence of complex
        Zeros or poles.
    key : callable, optional
        Sort key applied to the distinct values before they are emitted.
        Without a key, values keep their first-occurrence order.
    name : str
        What `values` are, used in the error message.

    Returns
    -------
    complex_values : list of complex
        Non-real values as adjacent (v, conj(v)) pairs, imag(v) > 0 first.
    real_values : list of float
        Real values.

    Raises
    ------
    ConjugateMismatchError
        If a non-real value's conjugate is missing or has a different
        multiplicity.
    """
    counts: Dict[complex, int] = {}
    for v in values:
        v = complex(v)
        # 0.0 and -0.0 must count as the same value
        v = complex(_normal(v.real), _normal(v.imag))
        counts[v] = counts.get(v, 0) + 1

    distinct = list(counts)
    if key is not None:
        distinct = sorted(distinct, key=key)

    complex_values: List[complex] = []
    real_values: List[float] = []

    for v in distinct:
        if v.imag != 0:
            conjugate = v.conjugate()
            if counts.get(conjugate) != counts[v]:
                raise ConjugateMismatchError(
                    f"complex {name} could not be matched to their conjugates"
                )
            if v.imag > 0:
                for _ in range(counts[v]):
                    complex_values.extend([v, conjugate])
        else:
            real_values.extend([v.real] * counts[v])

    return complex_values, real_values


def _normal(x: float) -> float:
    return 0.0 if x == 0 else x
