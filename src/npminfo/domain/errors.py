from typing import Optional

class NpmInfoError(Exception):
    """base class for exceptions in npminfo."""
    pass

class PackageFetchError(NpmInfoError):
    """raised when package metadata could not be fetched from the registry."""
    def __init__(self, package_name: str, reason: str, message: Optional[str] = None):
        self.package_name = package_name
        self.reason = reason
        super().__init__(message or f"Failed to fetch package '{package_name}': {reason}")

class PackageNotFoundError(PackageFetchError):
    """raised when the registry answers with anything but 200."""
    def __init__(self, package_name: str, status_code: int = 404):
        self.status_code = status_code
        super().__init__(
            package_name,
            f"registry responded with status {status_code}",
            message=f"Package '{package_name}' not found",
        )

class DistTagNotFoundError(NpmInfoError):
    def __init__(self, package_name: str, dist_tag: str):
        self.package_name = package_name
        self.dist_tag = dist_tag
        super().__init__(f"Package '{package_name}' does not have dist-tag {dist_tag}")

class VersionNotFoundError(NpmInfoError):
    def __init__(self, package_name: str, version: str):
        self.package_name = package_name
        self.version = version
        super().__init__(f"Package '{package_name}' does not have version {version}")
