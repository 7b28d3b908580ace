"""Version commands"""

import click
from rich.markup import escape
from rich.prompt import Prompt

from ..decorators import handle_errors, pass_service
from ..utils.output import console, print_warning
from ...constants import MSG_VERSION_UPDATED
from ...utils.version_utils import is_downgrade


@click.command()
@click.option('--output', type=click.Choice(['plain', 'json']),
              default='plain', help='Output format')
@handle_errors
@pass_service
def version(service, output):
    """Show current app version

    Prints the <name>+<build> value of the version line in pubspec.yaml.
    """
    current = service.read_version()

    if output == 'json':
        console.print_json(data=current.to_dict())
        return

    console.print("[blue]Current version:[/blue]")
    click.echo(str(current))


@click.command(name='version-bump')
@click.option('--name', '-n', 'new_name',
              help='New version name (prompted for when omitted)')
@handle_errors
@pass_service
def version_bump(service, new_name):
    """Bump version number

    Sets the version name and increments the build number by one.
    Only the first version line of pubspec.yaml is rewritten; every
    other line is kept as-is.

    Examples:

        flutter-deploy version-bump --name 1.0.1

        flutter-deploy version-bump          # asks for the new name
    """
    console.print("[blue]Bumping version...[/blue]")

    current = service.read_version()
    console.print(f"[yellow]Current version: {escape(str(current))}[/yellow]")

    if new_name is None:
        new_name = Prompt.ask("New version name (e.g., 1.0.1)", default=current.name)

    if is_downgrade(current.name, new_name):
        print_warning(f"New version name {new_name} is lower than {current.name}")

    updated = service.bump_version(new_name)
    console.print(f"[green]{escape(MSG_VERSION_UPDATED.format(version=updated))}[/green]")
