"""caat - render markdown documents as styled terminal text."""

from importlib.metadata import PackageNotFoundError, version as pkg_version

try:
    __version__ = pkg_version("caat")
except PackageNotFoundError:
    __version__ = "0.0.0"
