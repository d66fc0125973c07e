"""Numerical phantom with ellipsoids."""

from collections.abc import Sequence

import numpy as np
import torch

from phantom3d.phantoms.phantom_elements import ellipsoids_from_table
from phantom3d.phantoms.presets import preset_ellipsoids
from phantom3d.phantoms.rasterize import PhantomModel, _rasterize, resolve_model


class EllipsoidPhantom:
    """Numerical 3D phantom as the sum of different ellipsoids.

    Parameters
    ----------
        ellipsoids
            ellipsoids defined by their amplitude, semi-axes, center and rotation, or a table of them.
            if None, defaults to the Modified Shepp-Logan head phantom
    """

    def __init__(self, ellipsoids: PhantomModel | None = None):
        """Initialize ellipsoid phantom.

        Parameters
        ----------
        ellipsoids
            Sequence of EllipsoidParameters defining the ellipsoids, accumulated in this order.
            Rows of ten values, a table or the name of a preset phantom are converted to EllipsoidParameters.
            if None, defaults to the ten ellipsoids of the Modified Shepp-Logan phantom.
        """
        if ellipsoids is None:
            self.ellipsoids = preset_ellipsoids('modified-shepp-logan')
        else:
            self.ellipsoids = resolve_model(ellipsoids)

    @classmethod
    def from_preset(cls, name: str) -> 'EllipsoidPhantom':
        """Create one of the named head phantoms.

        Parameters
        ----------
        name
            ``'Shepp-Logan'``, ``'Modified Shepp-Logan'`` or ``'Yu-Ye-Wang'``
        """
        return cls(preset_ellipsoids(name))

    @classmethod
    def from_table(cls, table: Sequence[Sequence[float]] | np.ndarray | torch.Tensor) -> 'EllipsoidPhantom':
        """Create a phantom from a table with rows ``amplitude, a, b, c, x0, y0, z0, phi, theta, psi``."""
        return cls(ellipsoids_from_table(table))

    def __len__(self) -> int:
        """Get the number of ellipsoids."""
        return len(self.ellipsoids)

    def image_space(
        self,
        grid_size: int,
        chunk_size: int | None = None,
        device: torch.device | str | None = None,
    ) -> torch.Tensor:
        """Create image representation of phantom.

        Parameters
        ----------
        grid_size
            number of voxels along each axis of the cubic grid spanning [-1, 1]
        chunk_size
            maximum number of voxels processed at once, `None` processes all voxels at once
        device
            device of the returned volume

        Returns
        -------
            volume with shape `(grid_size, grid_size, grid_size)`, indexed as ``volume[y, x, z]``
        """
        return _rasterize(self.ellipsoids, grid_size, chunk_size, device, stacklevel=2)
