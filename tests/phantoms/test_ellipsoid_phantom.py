"""Tests for ellipsoid phantom."""

import numpy as np
import pytest
import torch
from phantom3d.phantoms import (
    EllipsoidParameters,
    EllipsoidPhantom,
    EmptyModelWarning,
    InvalidEllipsoidParameterError,
    create_phantom,
    presets,
)


def test_image_space(ellipsoid_phantom):
    """Check if image space has correct shape."""
    img = ellipsoid_phantom.phantom.image_space(ellipsoid_phantom.grid_size)
    assert img.shape == (ellipsoid_phantom.grid_size,) * 3


def test_image_space_values(ellipsoid_phantom):
    """Check the voxel values at the centers of the inner ellipsoids."""
    img = ellipsoid_phantom.phantom.image_space(ellipsoid_phantom.grid_size)
    center = ellipsoid_phantom.grid_size // 2
    step = 1 / center
    # background ellipsoid at the origin
    assert img[center, center, center] == 1
    # x = 0.3: background and the negative ellipsoid
    ix = center + round(0.3 / step)
    assert img[center, ix, center] == pytest.approx(0.5)
    # x = -0.3, y = 0.2: background and the bright sphere
    ix, iy = center - round(0.3 / step), center + round(0.2 / step)
    assert img[iy, ix, center] == 3


def test_image_space_chunked(ellipsoid_phantom):
    """Chunked image space matches the full evaluation."""
    phantom = ellipsoid_phantom.phantom
    torch.testing.assert_close(phantom.image_space(16, chunk_size=500), phantom.image_space(16))


def test_image_space_matches_create_phantom(ellipsoid_phantom):
    """The phantom object and the functional interface agree."""
    volume, ellipsoids = create_phantom(ellipsoid_phantom.test_ellipsoids, 10)
    assert ellipsoids == ellipsoid_phantom.phantom.ellipsoids
    torch.testing.assert_close(ellipsoid_phantom.phantom.image_space(10), volume)


def test_default_phantom_is_modified_shepp_logan():
    """Without ellipsoids the Modified Shepp-Logan phantom is used."""
    phantom = EllipsoidPhantom()
    assert len(phantom) == 10
    assert tuple(ellipsoid.as_row() for ellipsoid in phantom.ellipsoids) == presets.MODIFIED_SHEPP_LOGAN


def test_from_preset():
    """Presets are selected by name."""
    phantom = EllipsoidPhantom.from_preset('Yu-Ye-Wang')
    assert tuple(ellipsoid.as_row() for ellipsoid in phantom.ellipsoids) == presets.YU_YE_WANG


def test_from_table():
    """Phantoms can be created from a table."""
    phantom = EllipsoidPhantom.from_table(np.array([[1.0, 0.5, 0.5, 0.5, 0, 0, 0, 0, 0, 0]]))
    assert len(phantom) == 1
    assert phantom.image_space(5).sum() == 7


def test_ellipsoids_are_copied():
    """Changing the list used to create a phantom does not change the phantom."""
    ellipsoids = list(presets.preset_ellipsoids('shepp-logan'))
    phantom = EllipsoidPhantom(ellipsoids)
    ellipsoids.pop()
    assert len(phantom) == 10


def test_numpy_table_is_converted():
    """A table given to the constructor is converted to ellipsoid parameters."""
    phantom = EllipsoidPhantom(np.array([[1.0, 0.5, 0.5, 0.5, 0, 0, 0, 0, 0, 0]]))
    assert phantom.ellipsoids == (EllipsoidParameters(1.0, 0.5, 0.5, 0.5),)
    assert phantom.image_space(5).sum() == 7


def test_invalid_rows_raise_at_construction():
    """Invalid rows are rejected by the constructor, not later by image_space."""
    with pytest.raises(InvalidEllipsoidParameterError):
        EllipsoidPhantom([[1.0, 0.0, 0.5, 0.5, 0, 0, 0, 0, 0, 0]])
    with pytest.raises(InvalidEllipsoidParameterError):
        EllipsoidPhantom([object()])


def test_empty_phantom_warning_points_at_caller():
    """The empty model warning of image_space is attributed to the calling code."""
    phantom = EllipsoidPhantom([])
    with pytest.warns(EmptyModelWarning) as record:
        volume = phantom.image_space(3)
    assert record[0].filename == __file__
    assert not volume.any()
