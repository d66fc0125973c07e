from tests.phantoms._EllipsoidPhantomTestData import EllipsoidPhantomTestData
