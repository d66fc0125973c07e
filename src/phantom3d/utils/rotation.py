"""Euler rotation matrix of the 3D ellipsoid phantoms."""

import torch


def euler_rotation_matrix(
    phi: float | torch.Tensor,
    theta: float | torch.Tensor,
    psi: float | torch.Tensor,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    r"""Get the rotation matrix mapping world coordinates into the local frame of an ellipsoid.

    The matrix is the composite used by the classic 3D Shepp-Logan phantom tables [SCH2006]_.
    It does not match the textbook intrinsic ZYX or extrinsic XYZ matrices, so the elements are
    written out explicitly:

    .. math::

        R = \begin{pmatrix}
        c_\psi c_\phi - c_\theta s_\phi s_\psi & c_\psi s_\phi + c_\theta c_\phi s_\psi & s_\psi s_\theta \\
        -s_\psi c_\phi - c_\theta s_\phi c_\psi & -s_\psi s_\phi + c_\theta c_\phi c_\psi & c_\psi s_\theta \\
        s_\theta s_\phi & -s_\theta c_\phi & c_\theta
        \end{pmatrix}

    Parameters
    ----------
    phi
        first Euler angle in radians
    theta
        second Euler angle in radians
    psi
        third Euler angle in radians
    device
        device of the returned matrix

    Returns
    -------
        rotation matrix with shape `(3, 3)` and dtype float64.
        Applied to a column vector of world coordinates it returns local ellipsoid coordinates.

    References
    ----------
    .. [SCH2006] Schabel M (2006) 3D Shepp-Logan phantom. MATLAB Central File Exchange 9416
    """
    phi, theta, psi = (torch.as_tensor(angle, dtype=torch.float64, device=device) for angle in (phi, theta, psi))
    cphi, sphi = torch.cos(phi), torch.sin(phi)
    ctheta, stheta = torch.cos(theta), torch.sin(theta)
    cpsi, spsi = torch.cos(psi), torch.sin(psi)

    rows = (
        (cpsi * cphi - ctheta * sphi * spsi, cpsi * sphi + ctheta * cphi * spsi, spsi * stheta),
        (-spsi * cphi - ctheta * sphi * cpsi, -spsi * sphi + ctheta * cphi * cpsi, cpsi * stheta),
        (stheta * sphi, -stheta * cphi, ctheta),
    )
    return torch.stack([torch.stack(row) for row in rows])
