# The version is taken from the installed metadata, or from the VERSION file in a source checkout
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

try:
    __version__ = version('phantom3d')
except PackageNotFoundError:
    __version__ = Path(__file__).parent.joinpath('VERSION').read_text().strip()
