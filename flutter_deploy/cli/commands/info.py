"""Project information and environment commands"""

import click
from rich.markup import escape

from ..decorators import handle_errors, pass_service
from ..utils.output import console, format_paths, print_success, print_warning
from ...api.exceptions import NotFoundError, MalformedVersionError


@click.command()
@handle_errors
@pass_service
def info(service):
    """Show project information

    Lists the project, keystore and build output locations together
    with the current app version.
    """
    format_paths(service.project_info())

    try:
        current = service.read_version()
    except (NotFoundError, MalformedVersionError) as e:
        print_warning(str(e))
        return

    console.print(f"\n[bold]Current version:[/bold] {escape(str(current))}")


@click.command(name='check-env')
@handle_errors
@pass_service
def check_env(service):
    """Check if Flutter and required tools are installed"""
    console.print("[blue]Checking environment...[/blue]")
    found = service.check_environment()

    for name, location in found.items():
        console.print(f"  {name}: {escape(location)}")

    print_success("Environment check passed")
