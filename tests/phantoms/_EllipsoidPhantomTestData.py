"""Ellipsoid phantom for testing."""

from phantom3d.phantoms import EllipsoidParameters, EllipsoidPhantom


class EllipsoidPhantomTestData:
    """Create ellipsoid phantom for testing.

    Parameters
    ----------
    grid_size
        number of voxels along each axis
    """

    def __init__(self, grid_size: int = 33):
        self.grid_size: int = grid_size

        # a large background ellipsoid with three smaller, partially overlapping ones
        self.test_ellipsoids = [
            EllipsoidParameters(amplitude=1, radius_x=0.8, radius_y=0.9, radius_z=0.7),
            EllipsoidParameters(
                amplitude=-0.5, radius_x=0.2, radius_y=0.4, radius_z=0.3, center_x=0.3, phi=30, theta=10
            ),
            EllipsoidParameters(amplitude=2, radius_x=0.3, radius_y=0.3, radius_z=0.3, center_x=-0.3, center_y=0.2),
            EllipsoidParameters(
                amplitude=0.25, radius_x=0.1, radius_y=0.5, radius_z=0.2, center_z=-0.4, phi=-45, psi=60
            ),
        ]
        self.phantom = EllipsoidPhantom(self.test_ellipsoids)
