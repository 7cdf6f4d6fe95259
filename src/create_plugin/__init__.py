"""create-plugin: scaffold plugin projects from verified templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-plugin")
except PackageNotFoundError:
    __version__ = "0.0.0"
