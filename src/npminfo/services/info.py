from typing import Any, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape

from ..domain.package import PackageInfo
from ..ui.progress import ProgressManager

def _person(value: Any) -> Optional[str]:
    """format an npm person field, which is either a string or {name, email, url}."""
    if not value:
        return None
    if isinstance(value, dict):
        name = value.get("name", "")
        email = value.get("email")
        return f"{name} <{email}>" if email else name or None
    return str(value)

def _text(value: Any) -> Optional[str]:
    # repository and license may be objects like {"type": "git", "url": ...}
    if not value:
        return None
    if isinstance(value, dict):
        return value.get("url") or value.get("type")
    return str(value)

def _keywords(value: Any) -> Optional[str]:
    # older documents carry a single string, some lists hold nulls
    if not value:
        return None
    if isinstance(value, str):
        return value
    return ", ".join(str(k) for k in value if k) or None

class InfoService:
    """handles fetching and displaying package information."""

    def __init__(self, registry: str, console: Optional[Console] = None, progress_manager: Optional[ProgressManager] = None):
        self.registry = registry
        self.console = console or Console()
        self.progress_manager = progress_manager or ProgressManager(self.console)

    async def load(self, package_name: str) -> PackageInfo:
        with self.progress_manager.spinner(f"fetching {package_name}"):
            return await PackageInfo.from_remote(package_name, self.registry)

    async def show_info(self, package_name: str, version: Optional[str] = None):
        """
        fetch and display information about a package.

        args:
            package_name: name of the package
            version: optional specific version, defaults to the "latest" dist-tag
        """
        package = await self.load(package_name)
        self.render_info(package, version)

    async def show_majors(self, package_name: str):
        self.render_majors(await self.load(package_name))

    async def show_tags(self, package_name: str):
        self.render_tags(await self.load(package_name))

    def render_info(self, package: PackageInfo, version: Optional[str] = None):
        """
        print a summary panel for a package.

        raises:
            VersionNotFoundError: `version` is not published
            DistTagNotFoundError: no version given and the package has no "latest" tag
        """
        if version:
            manifest = package.get_info_by_version(version)
        else:
            manifest = package.get_info_by_dist_tag("latest")
            version = package.dist_tags["latest"]

        grid = Table.grid(expand=True, padding=(0, 1))
        grid.add_column(style="bold cyan", justify="right")
        grid.add_column(style="white")

        def row(label: str, value: str):
            grid.add_row(label, escape(value))

        row("Name:", package.name or "")
        row("Version:", version)
        row("Description:", _text(package.description) or "No description provided.")

        # package level fields, only shown when present
        for label, value in (
            ("Author:", _person(package.author)),
            ("License:", _text(package.license)),
            ("Homepage:", _text(package.homepage)),
            ("Repository:", _text(package.repository)),
        ):
            if value:
                row(label, value)

        keywords = _keywords(package.keywords)
        if keywords:
            row("Keywords:", keywords)

        # dependencies come from the version manifest
        dependencies = manifest.get("dependencies") or {}
        if dependencies:
            row("Dependencies:", ", ".join(f"{name}@{spec}" for name, spec in dependencies.items()))
        else:
            row("Dependencies:", "None")

        if package.dist_tags:
            row("Dist-tags:", ", ".join(f"{tag}: {ver}" for tag, ver in package.dist_tags.items()))

        majors = package.get_latest_versions_by_major()
        if majors:
            row("Latest by major:", ", ".join(majors[major] for major in sorted(majors, reverse=True)))

        self.console.print(Panel(grid, title=f"📦 Package Info: {package.name}", border_style="cyan"))

    def render_majors(self, package: PackageInfo):
        majors = package.get_latest_versions_by_major()
        if not majors:
            self.console.print(f"[yellow]Package '{package.name}' has no published versions.[/yellow]")
            return

        table = Table(title=f"{package.name}: latest version per major")
        table.add_column("Major", justify="right", style="cyan")
        table.add_column("Version", style="green")
        table.add_column("Published", style="dim")
        for major in sorted(majors):
            ver = majors[major]
            table.add_row(str(major), ver, str((package.time or {}).get(ver, "")))
        self.console.print(table)

    def render_tags(self, package: PackageInfo):
        if not package.dist_tags:
            self.console.print(f"[yellow]Package '{package.name}' has no dist-tags.[/yellow]")
            return

        table = Table(title=f"{package.name}: dist-tags")
        table.add_column("Tag", style="cyan")
        table.add_column("Version", style="green")
        for tag, ver in package.dist_tags.items():
            table.add_row(tag, ver)
        self.console.print(table)
