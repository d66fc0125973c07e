"""Ellipsoid tables of the Shepp-Logan family of 3D head phantoms.

Each row is ``amplitude, a, b, c, x0, y0, z0, phi, theta, psi`` with Euler angles in degree.
Lengths are normalized to the grid, which spans [-1, 1] along each axis.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from phantom3d.phantoms.phantom_elements import EllipsoidParameters, ellipsoids_from_table

PhantomTable = tuple[tuple[float, ...], ...]

MODIFIED_SHEPP_LOGAN: PhantomTable = (
    # A     a       b      c      x0     y0      z0    phi theta psi
    (1.0, 0.6900, 0.920, 0.810, 0.00, 0.0000, 0.00, 0.0, 0.0, 0.0),
    (-0.8, 0.6624, 0.874, 0.780, 0.00, -0.0184, 0.00, 0.0, 0.0, 0.0),
    (-0.2, 0.1100, 0.310, 0.220, 0.22, 0.0000, 0.00, -18.0, 0.0, 10.0),
    (-0.2, 0.1600, 0.410, 0.280, -0.22, 0.0000, 0.00, 18.0, 0.0, 10.0),
    (0.1, 0.2100, 0.250, 0.410, 0.00, 0.3500, -0.15, 0.0, 0.0, 0.0),
    (0.1, 0.0460, 0.046, 0.050, 0.00, 0.1000, 0.25, 0.0, 0.0, 0.0),
    (0.1, 0.0460, 0.046, 0.050, 0.00, -0.1000, 0.25, 0.0, 0.0, 0.0),
    (0.1, 0.0460, 0.023, 0.050, -0.08, -0.6050, 0.00, 0.0, 0.0, 0.0),
    (0.1, 0.0230, 0.023, 0.020, 0.00, -0.6060, 0.00, 0.0, 0.0, 0.0),
    (0.1, 0.0230, 0.046, 0.020, 0.06, -0.6050, 0.00, 0.0, 0.0, 0.0),
)
"""Shepp-Logan geometry with intensities raised for better contrast (Toft, pp. 199-200)."""

SHEPP_LOGAN: PhantomTable = tuple(
    (amplitude, *row[1:])
    for amplitude, row in zip(
        (1.0, -0.98, -0.02, -0.02, 0.01, 0.01, 0.01, 0.01, 0.01, 0.01), MODIFIED_SHEPP_LOGAN, strict=True
    )
)
"""Original Shepp-Logan intensities on the Modified Shepp-Logan geometry."""

YU_YE_WANG: PhantomTable = (
    # A     a       b      c      x0     y0      z0     phi  theta psi
    (1.0, 0.6900, 0.920, 0.900, 0.00, 0.000, 0.000, 0.0, 0.0, 0.0),
    (-0.8, 0.6624, 0.874, 0.880, 0.00, 0.000, 0.000, 0.0, 0.0, 0.0),
    (-0.2, 0.4100, 0.160, 0.210, -0.22, 0.000, -0.250, 108.0, 0.0, 0.0),
    (-0.2, 0.3100, 0.110, 0.220, 0.22, 0.000, -0.250, 72.0, 0.0, 0.0),
    (0.2, 0.2100, 0.250, 0.500, 0.00, 0.350, -0.250, 0.0, 0.0, 0.0),
    (0.2, 0.0460, 0.046, 0.046, 0.00, 0.100, -0.250, 0.0, 0.0, 0.0),
    (0.1, 0.0460, 0.023, 0.020, -0.08, -0.650, -0.250, 0.0, 0.0, 0.0),
    (0.1, 0.0460, 0.023, 0.020, 0.06, -0.650, -0.250, 90.0, 0.0, 0.0),
    (0.2, 0.0560, 0.040, 0.100, 0.06, -0.105, 0.625, 90.0, 0.0, 0.0),
    (-0.2, 0.0560, 0.056, 0.100, 0.00, 0.100, 0.625, 0.0, 0.0, 0.0),
)
"""Yu H, Ye Y, Wang G (2005) Katsevich-type algorithms for variable radius spiral cone-beam CT."""

PRESETS: Mapping[str, PhantomTable] = MappingProxyType(
    {
        'shepp-logan': SHEPP_LOGAN,
        'modified-shepp-logan': MODIFIED_SHEPP_LOGAN,
        'yu-ye-wang': YU_YE_WANG,
    }
)


def _canonical_name(name: str) -> str:
    return re.sub(r'[\s_-]+', '-', name.strip().lower())


def preset_ellipsoids(name: str) -> tuple[EllipsoidParameters, ...]:
    """Get the ellipsoids of a named phantom.

    Parameters
    ----------
    name
        ``'Shepp-Logan'``, ``'Modified Shepp-Logan'`` or ``'Yu-Ye-Wang'``.
        Case is ignored, words may be separated by ``-``, ``_`` or spaces.

    Raises
    ------
    ValueError
        if there is no phantom with this name
    """
    try:
        table = PRESETS[_canonical_name(name)]
    except KeyError:
        raise ValueError(f'unknown phantom {name!r}, valid names are {", ".join(PRESETS)}') from None
    return ellipsoids_from_table(table)
