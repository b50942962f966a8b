"""Tensor coercion and dtype resolution shared by polynomial and filter code."""

from typing import Optional

import torch
from torch import Tensor


def as_tensor(
    x,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Convert a scalar, sequence, or tensor to a tensor.

    Sequences containing tensors are stacked instead of copied through
    Python scalars, so autograd history is preserved.

    Parameters
    ----------
    x : Tensor, number, or sequence
        Input values.
    dtype : torch.dtype, optional
        Target dtype. If None, the inferred (or promoted) dtype is kept.

    Returns
    -------
    Tensor
    """
    if isinstance(x, Tensor):
        return x if dtype is None else x.to(dtype=dtype)

    if isinstance(x, (list, tuple)) and any(isinstance(v, Tensor) for v in x):
        values = [torch.as_tensor(v).reshape(()) for v in x]
        stacked = torch.stack([v.to(common_dtype(*values)) for v in values])
        return stacked if dtype is None else stacked.to(dtype=dtype)

    return torch.as_tensor(x, dtype=dtype)


def common_dtype(*tensors: Tensor) -> torch.dtype:
    """Promote the dtypes of all arguments to one common dtype."""
    dtype = tensors[0].dtype
    for t in tensors[1:]:
        dtype = torch.promote_types(dtype, t.dtype)
    return dtype


def floating_dtype(dtype: torch.dtype) -> torch.dtype:
    """Smallest dtype able to hold the quotient of two values of `dtype`."""
    if dtype.is_floating_point or dtype.is_complex:
        return dtype
    return torch.get_default_dtype()


def complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Complex dtype matching the precision of `dtype`."""
    if dtype.is_complex:
        return dtype
    if floating_dtype(dtype) == torch.float64:
        return torch.complex128
    return torch.complex64


def real_dtype(dtype: torch.dtype) -> torch.dtype:
    """Real dtype matching the precision of `dtype`."""
    if dtype == torch.complex128:
        return torch.float64
    if dtype == torch.complex64:
        return torch.float32
    if dtype == torch.complex32:
        return torch.float16
    return dtype
