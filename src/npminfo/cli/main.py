import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from ..config import resolve_registry, get_registry_url, set_registry_url, clear_registry_url
from ..domain.errors import NpmInfoError
from ..domain.package import DEFAULT_REGISTRY
from ..services.info import InfoService
from ..ui.progress import ProgressManager

app = typer.Typer(help="Query package metadata from an npm-compatible registry.")
console = Console()

RegistryOption = typer.Option(None, "--registry", "-r", help="Registry URL (defaults to the configured one)")

def get_info_service(registry: Optional[str]) -> InfoService:
    return InfoService(resolve_registry(registry), console, ProgressManager(console))

def _run(coro):
    try:
        asyncio.run(coro)
    except NpmInfoError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

@app.callback()
def main_callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log registry requests")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

@app.command()
def info(
    package_name: str,
    version: str = typer.Argument(None, help="Optional specific version"),
    registry: Optional[str] = RegistryOption,
):
    """
    show information about a package.
    """
    _run(get_info_service(registry).show_info(package_name, version))

@app.command()
def majors(package_name: str, registry: Optional[str] = RegistryOption):
    """show the latest version of every major release line."""
    _run(get_info_service(registry).show_majors(package_name))

@app.command()
def tags(package_name: str, registry: Optional[str] = RegistryOption):
    """show the dist-tags of a package."""
    _run(get_info_service(registry).show_tags(package_name))

@app.command("registry")
def registry_command(
    url: str = typer.Argument(None, help="Registry URL to use by default"),
    reset: bool = typer.Option(False, "--reset", help="Go back to the public npm registry"),
):
    """
    show or change the default registry.
    """
    try:
        if reset:
            clear_registry_url()
            console.print(f"[green]✓ Registry reset to {DEFAULT_REGISTRY}[/green]")
        elif url:
            set_registry_url(url)
            console.print(f"[green]✓ Registry set to {url}[/green]")
        else:
            configured = get_registry_url()
            console.print(configured or f"{DEFAULT_REGISTRY} [dim](default)[/dim]")
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
