from .client import RegistryClient
from .npm import NpmRegistry

__all__ = ["RegistryClient", "NpmRegistry"]
