"""PyTest fixtures for the phantom3d package."""

import pytest

from tests import RandomGenerator
from tests.phantoms import EllipsoidPhantomTestData


@pytest.fixture(scope='session')
def ellipsoid_phantom():
    return EllipsoidPhantomTestData()


@pytest.fixture(params=(0, 1, 2), ids=('seed0', 'seed1', 'seed2'))
def random_ellipsoids(request):
    return RandomGenerator(request.param).ellipsoids(5)
