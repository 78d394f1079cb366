"""Version information for pr-title-check."""

import importlib.metadata
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

DISTRIBUTION_NAME = "pr-title-check"

console = Console()


def get_current_version() -> str:
    """Get the current version of pr-title-check."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Optional[Path]:
    """Get the directory the package is imported from."""
    import prtitlecheck
    return Path(prtitlecheck.__file__).parent


def display_version_info(output: Optional[Console] = None) -> None:
    """Display version information in a panel."""
    output = output or console
    current_version = get_current_version()
    installed_version = get_installed_version()
    installation_path = get_installation_path()

    version_text = Text()
    version_text.append("pr-title-check\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")

    if installation_path:
        version_text.append(f"Installation path: {installation_path}\n", style="yellow")

    if current_version != installed_version:
        version_text.append("\nVersion mismatch detected!\n", style="red")
        version_text.append("Consider reinstalling: pip install -e .\n", style="yellow")

    panel = Panel(
        version_text,
        title="Version Information",
        border_style="blue"
    )
    output.print(panel)
