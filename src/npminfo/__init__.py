"""query package metadata served by an npm-compatible registry."""

from .domain.errors import (
    NpmInfoError,
    PackageFetchError,
    PackageNotFoundError,
    DistTagNotFoundError,
    VersionNotFoundError,
)
from .domain.package import PackageInfo, DEFAULT_REGISTRY, SOURCE_FIELDS
from .registry import RegistryClient, NpmRegistry

__version__ = "0.1.0"
