# flutter_deploy/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...constants import (
    EMOJI_SUCCESS,
    EMOJI_ERROR,
    EMOJI_WARNING,
    MSG_BUILD_SUCCESS,
    MSG_KEYSTORE_EXISTS,
    MSG_KEYSTORE_GENERATED,
    MSG_EDIT_PROPERTIES,
    MSG_CONFIG_VALID,
    DEPLOY_NEXT_STEPS,
    PropertiesSource,
)
from ...models import ConfigPresenceReport, BuildResult, SetupResult
from ...utils.file_utils import format_size

console = Console()


def format_report(report: ConfigPresenceReport) -> None:
    """Format and display a signing configuration report"""
    table = Table(title="Signing Configuration", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for check in report.checks:
        status = "[green]✓ FOUND[/green]" if check.present else "[red]✗ MISSING[/red]"
        table.add_row(check.kind.value, status, escape(check.diagnostic))

    console.print(table)

    if report.valid:
        console.print(f"[green]{MSG_CONFIG_VALID}[/green]")
    else:
        for check in report.missing:
            console.print(f"[red]{EMOJI_ERROR} {escape(check.diagnostic)}[/red]")


def format_setup_result(result: SetupResult) -> None:
    """Format and display keystore setup result"""
    keystore_path = escape(str(result.keystore_path))
    if result.keystore_generated:
        console.print(f"[green]{MSG_KEYSTORE_GENERATED.format(path=keystore_path)}[/green]")
    else:
        console.print(f"[yellow]{MSG_KEYSTORE_EXISTS.format(path=keystore_path)}[/yellow]")
        console.print("[yellow]   Skipping keystore generation.[/yellow]")

    if result.properties_source is PropertiesSource.DEFAULT:
        console.print(f"[yellow]{EMOJI_WARNING} Created keystore.properties template[/yellow]")

    if result.properties_created:
        properties_path = escape(str(result.properties_path))
        console.print(f"[yellow]{MSG_EDIT_PROPERTIES.format(path=properties_path)}[/yellow]")


def format_build_result(result: BuildResult) -> None:
    """Format and display build result"""
    lines = [
        f"[green]{MSG_BUILD_SUCCESS}[/green]",
        "",
        f"[bold]{result.kind.label} file:[/bold] {escape(str(result.artifact_path))}",
        f"[bold]Size:[/bold] {format_size(result.artifact_size)}",
        f"[bold]Duration:[/bold] {result.duration:.1f}s",
    ]

    if result.version:
        lines.append(f"[bold]Version:[/bold] {escape(result.version)}")

    panel = Panel(
        "\n".join(lines),
        title="Build Result",
        border_style="green"
    )
    console.print(panel)


def format_next_steps(artifact: Path) -> None:
    """Display Play Console steps after a deploy build"""
    console.print(f"\n[green]{EMOJI_SUCCESS} Deployment package ready![/green]\n")
    console.print("[blue]Next steps:[/blue]")
    for number, step in enumerate(DEPLOY_NEXT_STEPS, start=1):
        console.print(f"  {number}. {escape(step.format(artifact=artifact))}")


def format_paths(paths: Dict[str, Path], title: str = "Project Information") -> None:
    """Display a table of named paths"""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Item", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Exists", justify="center")

    for name, path in paths.items():
        table.add_row(name, escape(str(path)), "✓" if path.exists() else "✗")

    console.print(table)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]{EMOJI_ERROR} {escape(message)}: {escape(str(error))}[/red]")
    else:
        console.print(f"[red]{EMOJI_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]{EMOJI_WARNING} {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{EMOJI_SUCCESS} {escape(message)}[/green]")
