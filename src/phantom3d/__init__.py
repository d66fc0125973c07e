from phantom3d._version import __version__
from phantom3d import phantoms, utils
from phantom3d.phantoms import EllipsoidParameters, EllipsoidPhantom, create_phantom

__all__ = [
    "EllipsoidParameters",
    "EllipsoidPhantom",
    "__version__",
    "create_phantom",
    "phantoms",
    "utils"
]
