from abc import ABC, abstractmethod

class RegistryClient(ABC):
    @abstractmethod
    async def fetch_document(self, package_name: str) -> dict:
        """Fetch the full metadata document of a package."""
        pass
