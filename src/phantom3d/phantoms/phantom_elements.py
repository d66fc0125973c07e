"""Building blocks for numerical phantoms."""

import dataclasses
import math
from collections.abc import Sequence

import numpy as np
import torch


class InvalidEllipsoidParameterError(ValueError):
    """An ellipsoid has a non-positive semi-axis, a non-finite value or a malformed row."""


@dataclasses.dataclass(slots=True, frozen=True)
class EllipsoidParameters:
    """Parameters of an ellipsoid.

    The row order of the classic phantom tables is
    ``amplitude, radius_x, radius_y, radius_z, center_x, center_y, center_z, phi, theta, psi``.
    """

    amplitude: float
    """Additive intensity of the ellipsoid."""

    radius_x: float
    """Semi-axis along the local x-axis, in normalized units."""

    radius_y: float
    """Semi-axis along the local y-axis, in normalized units."""

    radius_z: float
    """Semi-axis along the local z-axis, in normalized units."""

    center_x: float = 0.0
    center_y: float = 0.0
    center_z: float = 0.0

    phi: float = 0.0
    """First Euler angle in degree."""

    theta: float = 0.0
    """Second Euler angle in degree."""

    psi: float = 0.0
    """Third Euler angle in degree."""

    def __post_init__(self) -> None:
        """Check that all values are finite and all semi-axes are positive."""
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not math.isfinite(value):
                raise InvalidEllipsoidParameterError(f'{field.name} must be finite, got {value}')
        for name, radius in zip(('radius_x', 'radius_y', 'radius_z'), self.semi_axes, strict=True):
            if radius <= 0:
                raise InvalidEllipsoidParameterError(f'{name} must be positive, got {radius}')
            # the containment test divides by the squared semi-axis
            if not radius * radius > 0:
                raise InvalidEllipsoidParameterError(f'{name} is too small, its square underflows to zero: {radius}')

    @property
    def semi_axes(self) -> tuple[float, float, float]:
        """Semi-axes (a, b, c)."""
        return (self.radius_x, self.radius_y, self.radius_z)

    @property
    def center(self) -> tuple[float, float, float]:
        """Center (x0, y0, z0)."""
        return (self.center_x, self.center_y, self.center_z)

    @property
    def rotation(self) -> tuple[float, float, float]:
        """Euler angles (phi, theta, psi) in degree."""
        return (self.phi, self.theta, self.psi)

    def as_row(self) -> tuple[float, ...]:
        """Get the parameters as a row of a phantom table."""
        return (self.amplitude, *self.semi_axes, *self.center, *self.rotation)

    @classmethod
    def from_row(cls, row: Sequence[float] | np.ndarray | torch.Tensor) -> 'EllipsoidParameters':
        """Create ellipsoid parameters from a row of a phantom table.

        Parameters
        ----------
        row
            ten values ``amplitude, a, b, c, x0, y0, z0, phi, theta, psi``, angles in degree
        """
        try:
            values = [float(value) for value in row]
        except (TypeError, ValueError) as err:
            raise InvalidEllipsoidParameterError(f'an ellipsoid row needs 10 numbers, got {row!r}') from err
        if len(values) != 10:
            raise InvalidEllipsoidParameterError(f'an ellipsoid row needs 10 values, got {len(values)}')
        return cls(*values)


def ellipsoids_from_table(
    table: Sequence[Sequence[float]] | np.ndarray | torch.Tensor,
) -> tuple[EllipsoidParameters, ...]:
    """Convert a phantom table with one ellipsoid per row to ellipsoid parameters.

    Parameters
    ----------
    table
        table with shape `(n_ellipsoids, 10)`
    """
    if isinstance(table, np.ndarray | torch.Tensor) and table.ndim != 2:
        raise InvalidEllipsoidParameterError(f'a phantom table must be two dimensional, got shape {tuple(table.shape)}')
    return tuple(EllipsoidParameters.from_row(row) for row in table)
