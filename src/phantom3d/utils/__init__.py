"""Rotation matrices, voxel grids and unit conversion."""

from phantom3d.utils import unit_conversion
from phantom3d.utils.grid import check_grid_size, grid_axis_mm, normalized_axis, voxel_coordinates, InvalidGridSizeError
from phantom3d.utils.rotation import euler_rotation_matrix

__all__ = [
    "InvalidGridSizeError",
    "check_grid_size",
    "euler_rotation_matrix",
    "grid_axis_mm",
    "normalized_axis",
    "unit_conversion",
    "voxel_coordinates"
]
