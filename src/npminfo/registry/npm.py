import logging
from typing import Optional
from urllib.parse import urljoin

import httpx

from .client import RegistryClient
from ..domain.errors import PackageFetchError, PackageNotFoundError

logger = logging.getLogger(__name__)

class NpmRegistry(RegistryClient):
    """reads package documents from an npm-compatible registry."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        self.client = client

    def package_url(self, package_name: str) -> str:
        # plain url resolution: without a trailing slash the last path segment of base_url is replaced
        return urljoin(self.base_url, package_name)

    async def fetch_document(self, package_name: str) -> dict:
        url = self.package_url(package_name)
        logger.debug(f"fetching {url}")

        if self.client is not None:
            response = await self._get(self.client, package_name, url)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._get(client, package_name, url)

        logger.debug(f"{url} responded with {response.status_code}")
        if response.status_code != 200:
            raise PackageNotFoundError(package_name, response.status_code)

        try:
            document = response.json()
        except ValueError as e:
            raise PackageFetchError(package_name, f"invalid JSON body: {e}") from e

        if not isinstance(document, dict):
            raise PackageFetchError(package_name, "registry document is not a JSON object")
        return document

    async def _get(self, client: httpx.AsyncClient, package_name: str, url: str) -> httpx.Response:
        try:
            return await client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise PackageFetchError(package_name, str(e) or type(e).__name__) from e
