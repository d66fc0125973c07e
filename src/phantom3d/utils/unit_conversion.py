"""Conversion between angle units."""

from typing import TypeVar

import numpy as np
import torch

__all__ = ['deg_to_rad']

T = TypeVar('T', float, torch.Tensor, list[float], tuple[float, ...])


def deg_to_rad(deg: T) -> T:
    """Convert degree to radians.

    Tensors are converted with `torch.deg2rad`, python numbers as ``deg / 180 * pi``.
    Lists and tuples are converted element-wise.
    """
    if isinstance(deg, torch.Tensor):
        return torch.deg2rad(deg)
    if isinstance(deg, tuple):
        return tuple([deg_to_rad(x) for x in deg])
    if isinstance(deg, list):
        return [deg_to_rad(x) for x in deg]
    return deg / 180.0 * np.pi
