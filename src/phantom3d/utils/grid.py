"""Normalized voxel grid of the 3D phantoms."""

import numpy as np
import torch


class InvalidGridSizeError(ValueError):
    """The grid size is not a positive integer."""


def check_grid_size(grid_size: int) -> int:
    """Check that the grid size is a positive integer.

    Parameters
    ----------
    grid_size
        number of voxels along each axis of the cubic grid

    Returns
    -------
        the grid size as python int

    Raises
    ------
    InvalidGridSizeError
        if the grid size is not an integer or not positive
    """
    if isinstance(grid_size, bool) or not isinstance(grid_size, int | np.integer):
        raise InvalidGridSizeError(f'grid size must be an integer, got {grid_size!r}')
    if grid_size <= 0:
        raise InvalidGridSizeError(f'grid size must be positive, got {grid_size}')
    return int(grid_size)


def normalized_axis(grid_size: int, device: torch.device | str | None = None) -> torch.Tensor:
    """Get voxel positions along one axis, normalized to [-1, 1].

    The i-th position is ``(i - (n-1)/2) / ((n-1)/2)``.
    A grid with a single voxel has its voxel at the origin.

    Parameters
    ----------
    grid_size
        number of voxels n along the axis
    device
        device of the returned tensor
    """
    grid_size = check_grid_size(grid_size)
    if grid_size == 1:
        return torch.zeros(1, dtype=torch.float64, device=device)
    half_width = (grid_size - 1) / 2
    return (torch.arange(grid_size, dtype=torch.float64, device=device) - half_width) / half_width


def voxel_coordinates(
    grid_size: int,
    start: int = 0,
    stop: int | None = None,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    """Get the normalized (x, y, z) coordinates of voxels of the cubic grid.

    The voxels are enumerated in row-major order of a volume indexed as ``volume[y, x, z]``,
    i.e. the ``meshgrid(axis, axis, axis, indexing='xy')`` layout.
    `start` and `stop` select a contiguous range of this enumeration, which allows processing
    the grid in chunks without creating all coordinates at once.

    Parameters
    ----------
    grid_size
        number of voxels along each axis
    start
        first flat voxel index
    stop
        flat voxel index after the last one. `None` means all voxels up to the end of the grid.
    device
        device of the returned tensor

    Returns
    -------
        coordinates with shape `(3, stop - start)`, rows are x, y and z
    """
    grid_size = check_grid_size(grid_size)
    n_voxels = grid_size**3
    if stop is None:
        stop = n_voxels
    if not 0 <= start <= stop <= n_voxels:
        raise ValueError(f'invalid voxel range [{start}, {stop}) for a grid with {n_voxels} voxels')

    axis = normalized_axis(grid_size, device=device)
    flat_index = torch.arange(start, stop, device=device)
    iy = flat_index // grid_size**2
    ix = (flat_index // grid_size) % grid_size
    iz = flat_index % grid_size
    return torch.stack((axis[ix], axis[iy], axis[iz]))


def grid_axis_mm(grid_size: int, voxel_size: float) -> torch.Tensor:
    """Get the physical voxel positions along one axis in mm.

    Used to label phantom slices in real units. The i-th position (starting at 1) is
    ``(i - n/2) * voxel_size``.

    Parameters
    ----------
    grid_size
        number of voxels n along the axis
    voxel_size
        edge length of a voxel in mm/voxel
    """
    grid_size = check_grid_size(grid_size)
    if not voxel_size > 0:
        raise ValueError(f'voxel size must be positive, got {voxel_size}')
    return (torch.arange(1, grid_size + 1, dtype=torch.float64) - grid_size / 2) * voxel_size
