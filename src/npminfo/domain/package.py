from functools import cmp_to_key
from typing import Any, ClassVar, Dict, List, Mapping, Optional

import httpx
import nodesemver
from pydantic import BaseModel

from .errors import DistTagNotFoundError, VersionNotFoundError
from ..registry.npm import NpmRegistry

DEFAULT_REGISTRY = "http://registry.npmjs.org/"

# registry document key -> PackageInfo field
SOURCE_FIELDS: Dict[str, str] = {
    "name": "name",
    "description": "description",
    "dist-tags": "dist_tags",
    "versions": "versions",
    "readme": "readme",
    "homepage": "homepage",
    "maintainers": "maintainers",
    "time": "time",
    "author": "author",
    "repository": "repository",
    "license": "license",
    "keywords": "keywords",
}

_semver_key = cmp_to_key(lambda a, b: nodesemver.compare(a, b, loose=False))


def _major(version: str) -> int:
    return nodesemver.make_semver(version, loose=False).major


class PackageInfo(BaseModel):
    """
    metadata of a single package as served by an npm-compatible registry.

    build it with `from_document` when the registry document is already at hand,
    or await `from_remote` to fetch it first.
    """
    default_registry: ClassVar[str] = DEFAULT_REGISTRY

    registry: str
    name: Optional[str] = None
    # everything below is copied from the registry document as is
    description: Any = None
    readme: Any = None
    homepage: Any = None
    author: Any = None
    repository: Any = None
    license: Any = None
    keywords: Any = None
    maintainers: Any = None
    time: Any = None
    dist_tags: Any = None
    versions: Any = None
    latest: Any = None

    def model_post_init(self, __context: Any) -> None:
        # resolved on every construction path, missing or dangling "latest" leaves None
        self.latest = self.find_by_dist_tag("latest")

    @classmethod
    def from_document(cls, info: Mapping[str, Any], registry: str) -> "PackageInfo":
        """
        build a PackageInfo from a registry document.

        only the keys in SOURCE_FIELDS are read; `latest` is resolved from the
        "latest" dist-tag and left as None when that tag is missing or dangling.
        """
        fields = {field: info.get(key) for key, field in SOURCE_FIELDS.items()}
        return cls(registry=registry, **fields)

    @classmethod
    async def from_remote(
        cls,
        package_name: str,
        registry: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "PackageInfo":
        """
        fetch a package document from the registry and build a PackageInfo from it.

        args:
            package_name: name of the package, resolved against the registry url
            registry: registry origin, defaults to `PackageInfo.default_registry`
            client: optional httpx client to issue the request with

        raises:
            PackageNotFoundError: the registry did not answer with 200
            PackageFetchError: transport failure, undecodable body or a body that is not a JSON object
        """
        if registry is None:
            registry = cls.default_registry
        document = await NpmRegistry(registry, client=client).fetch_document(package_name)
        return cls.from_document(document, registry)

    def get_info_by_dist_tag(self, dist_tag: str) -> Dict[str, Any]:
        if self.dist_tags and self.dist_tags.get(dist_tag):
            return self.get_info_by_version(self.dist_tags[dist_tag])

        raise DistTagNotFoundError(self.name, dist_tag)

    def get_info_by_version(self, version: str) -> Dict[str, Any]:
        if self.versions and version in self.versions:
            return self.versions[version]

        raise VersionNotFoundError(self.name, version)

    def find_by_dist_tag(self, dist_tag: str) -> Optional[Dict[str, Any]]:
        """like get_info_by_dist_tag, but returns None instead of raising."""
        if not self.dist_tags:
            return None
        version = self.dist_tags.get(dist_tag)
        if not version or not self.versions:
            return None
        return self.versions.get(version)

    def sorted_versions(self) -> List[str]:
        """all known versions in ascending semver precedence."""
        return sorted(self.versions or {}, key=_semver_key)

    def get_latest_info_by_major_ver(self, major: int) -> Optional[str]:
        """highest version with the given major number, or None if there is none."""
        matching = [v for v in self.sorted_versions() if _major(v) == major]
        return matching[-1] if matching else None

    def get_latest_versions_by_major(self) -> Dict[int, str]:
        latest: Dict[int, str] = {}
        # ascending order, so the last version seen for a major wins
        for version in self.sorted_versions():
            latest[_major(version)] = version
        return latest
