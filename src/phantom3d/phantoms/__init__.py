"""Numerical 3D Ellipsoid Phantoms"""

from phantom3d.phantoms.phantom_elements import EllipsoidParameters, InvalidEllipsoidParameterError, ellipsoids_from_table
from phantom3d.phantoms.rasterize import EmptyModelWarning, create_phantom, rasterize_ellipsoids
from phantom3d.phantoms.EllipsoidPhantom import EllipsoidPhantom
from phantom3d.phantoms import presets

__all__ = [
    "EllipsoidParameters",
    "EllipsoidPhantom",
    "EmptyModelWarning",
    "InvalidEllipsoidParameterError",
    "create_phantom",
    "ellipsoids_from_table",
    "presets",
    "rasterize_ellipsoids"
]
