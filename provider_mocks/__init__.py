"""Stateless mocks of the Fink (payments) and Pearl (identity) provider APIs."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("provider-mocks")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
