"""Keystore setup command"""

import click

from ..decorators import handle_errors, pass_service
from ..utils.output import console, format_setup_result


@click.command()
@handle_errors
@pass_service
def setup(service):
    """Initial setup - generate the release keystore

    Runs keytool (interactive: it asks for passwords and certificate
    details) unless android/keystore/app-release.jks already exists, then
    creates android/keystore.properties from the template when missing.

    Examples:

        flutter-deploy setup

        flutter-deploy --project-dir ../my_app setup
    """
    console.print("[blue]Setting up keystore for Play Store deployment...[/blue]")
    result = service.setup()
    format_setup_result(result)
