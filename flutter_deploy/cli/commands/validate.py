"""Signing configuration validation command"""

import sys

import click

from ..decorators import handle_errors, pass_service
from ..utils.output import console, format_report
from ...constants import EXIT_FAILURE


@click.command()
@click.option('--output', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@handle_errors
@pass_service
def validate(service, output):
    """Validate keystore configuration

    Checks that android/keystore.properties and
    android/keystore/app-release.jks exist. File contents are not
    inspected. Exits with status 1 when anything is missing.

    Examples:

        flutter-deploy validate

        flutter-deploy validate --output json
    """
    report = service.validate()

    if output == 'json':
        console.print_json(data=report.to_dict())
    else:
        console.print("[blue]Validating keystore configuration...[/blue]")
        format_report(report)

    if not report.valid:
        sys.exit(EXIT_FAILURE)
