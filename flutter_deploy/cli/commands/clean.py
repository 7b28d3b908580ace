"""Clean command"""

import click

from ..decorators import handle_errors, pass_service
from ..utils.output import print_info, print_success


@click.command()
@handle_errors
@pass_service
def clean(service):
    """Clean build artifacts (flutter clean)"""
    print_info("Cleaning build artifacts...")
    service.clean()
    print_success("Clean complete")
