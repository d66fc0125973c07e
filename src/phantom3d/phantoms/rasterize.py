"""Rasterization of ellipsoid phantoms on a cubic voxel grid."""

import logging
import warnings
from collections.abc import Sequence

import numpy as np
import torch
from einops import rearrange

from phantom3d.phantoms.phantom_elements import (
    EllipsoidParameters,
    InvalidEllipsoidParameterError,
    ellipsoids_from_table,
)
from phantom3d.phantoms.presets import preset_ellipsoids
from phantom3d.utils.grid import check_grid_size, voxel_coordinates
from phantom3d.utils.rotation import euler_rotation_matrix
from phantom3d.utils.unit_conversion import deg_to_rad

logger = logging.getLogger(__name__)

PhantomModel = str | Sequence[EllipsoidParameters] | Sequence[Sequence[float]] | np.ndarray | torch.Tensor


class EmptyModelWarning(UserWarning):
    """A phantom without any ellipsoid was rasterized."""


def _inside_ellipsoid(coordinates: torch.Tensor, ellipsoid: EllipsoidParameters) -> torch.Tensor:
    """Get the mask of world coordinates (3, n) inside the ellipsoid, surface included."""
    rotation = euler_rotation_matrix(
        *deg_to_rad(ellipsoid.rotation),
        device=coordinates.device,
    )
    local = rotation @ coordinates
    center = torch.tensor(ellipsoid.center, dtype=torch.float64, device=coordinates.device)
    semi_axes = torch.tensor(ellipsoid.semi_axes, dtype=torch.float64, device=coordinates.device)
    dx, dy, dz = (local - center[:, None]) ** 2 / semi_axes[:, None] ** 2
    return dx + dy + dz <= 1


def _rasterize(
    ellipsoids: Sequence[EllipsoidParameters],
    grid_size: int,
    chunk_size: int | None,
    device: torch.device | str | None,
    stacklevel: int,
) -> torch.Tensor:
    """Validate the inputs and rasterize, `stacklevel` locates the caller for the empty model warning."""
    grid_size = check_grid_size(grid_size)
    n_voxels = grid_size**3
    if chunk_size is None:
        chunk_size = n_voxels
    elif isinstance(chunk_size, bool) or not isinstance(chunk_size, int | np.integer) or chunk_size <= 0:
        raise ValueError(f'chunk size must be a positive integer, got {chunk_size!r}')
    chunk_size = int(chunk_size)

    if isinstance(ellipsoids, str):
        raise InvalidEllipsoidParameterError(f'expected EllipsoidParameters, got the string {ellipsoids!r}')
    ellipsoids = list(ellipsoids)
    for index, ellipsoid in enumerate(ellipsoids):
        if not isinstance(ellipsoid, EllipsoidParameters):
            raise InvalidEllipsoidParameterError(
                f'ellipsoid {index} must be EllipsoidParameters, got {type(ellipsoid).__name__}'
            )
    if not ellipsoids:
        warnings.warn(
            'The phantom has no ellipsoids, the volume is all zeros.', EmptyModelWarning, stacklevel=stacklevel + 1
        )
    logger.debug('Rasterizing %d ellipsoids on a %d^3 grid', len(ellipsoids), grid_size)

    volume = torch.zeros(n_voxels, dtype=torch.float64, device=device)
    for start in range(0, n_voxels, chunk_size):
        stop = min(start + chunk_size, n_voxels)
        coordinates = voxel_coordinates(grid_size, start, stop, device=device)
        # view into the volume, in-place updates reach the volume
        volume_chunk = volume[start:stop]
        for ellipsoid in ellipsoids:
            volume_chunk[_inside_ellipsoid(coordinates, ellipsoid)] += ellipsoid.amplitude

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('%d of %d voxels are non-zero', int(torch.count_nonzero(volume)), n_voxels)
    return rearrange(volume, '(y x z) -> y x z', y=grid_size, x=grid_size)


def rasterize_ellipsoids(
    ellipsoids: Sequence[EllipsoidParameters],
    grid_size: int,
    chunk_size: int | None = None,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    """Rasterize the sum of ellipsoids on a cubic grid.

    The grid spans [-1, 1] along each axis. Every voxel inside an ellipsoid, including voxels exactly on its
    surface, gains the amplitude of this ellipsoid. Overlapping ellipsoids add up.
    An empty sequence of ellipsoids results in an all-zero volume and an `EmptyModelWarning`.

    Parameters
    ----------
    ellipsoids
        ellipsoids in the order in which they are accumulated
    grid_size
        number of voxels along each axis
    chunk_size
        maximum number of voxels processed at once. `None` processes the whole grid at once.
        Smaller chunks reduce the peak memory, the result does not change.
    device
        device of the computation and of the returned volume

    Returns
    -------
        volume with shape `(grid_size, grid_size, grid_size)` and dtype float64, indexed as ``volume[y, x, z]``

    Raises
    ------
    InvalidGridSizeError
        if the grid size is not a positive integer
    InvalidEllipsoidParameterError
        if an element of `ellipsoids` is not `EllipsoidParameters`
    ValueError
        if the chunk size is not a positive integer
    """
    return _rasterize(ellipsoids, grid_size, chunk_size, device, stacklevel=2)


def resolve_model(model: PhantomModel) -> tuple[EllipsoidParameters, ...]:
    """Get the ellipsoids of a phantom model.

    Parameters
    ----------
    model
        name of a preset phantom, a sequence of `EllipsoidParameters`, or a table with one ellipsoid per row

    Raises
    ------
    ValueError
        if the preset name is unknown
    InvalidEllipsoidParameterError
        if a row of the table is not a valid ellipsoid
        or an element of the sequence is neither `EllipsoidParameters` nor a row of ten values
    """
    if isinstance(model, str):
        return preset_ellipsoids(model)
    if isinstance(model, np.ndarray | torch.Tensor):
        return ellipsoids_from_table(model)
    return tuple(
        item if isinstance(item, EllipsoidParameters) else EllipsoidParameters.from_row(item) for item in model
    )


def create_phantom(
    model: PhantomModel,
    grid_size: int,
    chunk_size: int | None = None,
    device: torch.device | str | None = None,
) -> tuple[torch.Tensor, tuple[EllipsoidParameters, ...]]:
    """Create a 3D ellipsoid phantom.

    All inputs are validated before the first voxel is computed.
    A model without ellipsoids results in an all-zero volume and an `EmptyModelWarning`.

    Parameters
    ----------
    model
        ``'Shepp-Logan'``, ``'Modified Shepp-Logan'``, ``'Yu-Ye-Wang'``, a sequence of `EllipsoidParameters`
        or a table with shape `(n_ellipsoids, 10)` and rows ``amplitude, a, b, c, x0, y0, z0, phi, theta, psi``
    grid_size
        number of voxels along each axis
    chunk_size
        maximum number of voxels processed at once, see `rasterize_ellipsoids`
    device
        device of the returned volume

    Returns
    -------
        the phantom volume with shape `(grid_size, grid_size, grid_size)`, and the ellipsoids used to create it
    """
    grid_size = check_grid_size(grid_size)
    ellipsoids = resolve_model(model)
    volume = _rasterize(ellipsoids, grid_size, chunk_size, device, stacklevel=2)
    return volume, ellipsoids
