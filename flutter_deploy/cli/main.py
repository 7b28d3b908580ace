# flutter_deploy/cli/main.py
"""Main CLI entry point for flutter-deploy"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_PROJECT_DIR, EXIT_FAILURE, EXIT_INTERRUPTED
from ..core import ProcessRunner
from ..services import ReleaseService
from .utils.output import console

# Import all commands
from .commands import (
    keystore,
    validate,
    build,
    version,
    clean,
    info,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )


class Context:
    """CLI context object with lazy service initialization

    The release service (and with it the project configuration file) is
    only loaded when a command asks for it.
    """

    def __init__(self, project_dir: Optional[Path] = None,
                 runner: Optional[ProcessRunner] = None):
        """Initialize CLI context

        Args:
            project_dir: Flutter project directory (None: FLUTTER_PROJECT_DIR or cwd)
            runner: Process runner handed to the service
        """
        self.project_dir = project_dir
        self.runner = runner
        self.verbose: bool = False
        self.debug: bool = False
        self._service: Optional[ReleaseService] = None

    @property
    def service(self) -> ReleaseService:
        """Get the release service (lazy loading)"""
        if self._service is None:
            self._service = ReleaseService.for_project(self.project_dir, runner=self.runner)
            if self.debug:
                console.print(f"[dim]Project root: {self._service.project_root}[/dim]")
        return self._service


@click.group(name=APP_NAME, chain=True, invoke_without_command=True)
@click.option('-C', '--project-dir', type=click.Path(file_okay=False, path_type=Path),
              envvar=ENV_PROJECT_DIR, show_envvar=True,
              help='Flutter project directory (default: current directory)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress log messages')
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, project_dir, verbose, debug, quiet):
    """Flutter Play Store Deployment

    Generates the release keystore, validates signing configuration,
    builds release app bundles and APKs, and manages the version in
    pubspec.yaml.

    Commands can be chained and run in order; the first failure stops
    the chain:

        flutter-deploy validate build
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.ensure_object(Context)
    if project_dir is not None:
        ctx.obj.project_dir = project_dir
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name='help')
@click.pass_context
def help_command(ctx):
    """Show this help message"""
    click.echo(ctx.parent.get_help())


# Register commands
cli.add_command(keystore.setup)
cli.add_command(validate.validate)
cli.add_command(build.build)
cli.add_command(build.build_apk)
cli.add_command(build.deploy)
cli.add_command(version.version)
cli.add_command(version.version_bump)
cli.add_command(clean.clean)
cli.add_command(info.info)
cli.add_command(info.check_env)


def main():
    """Main entry point for the CLI application

    Runs click outside standalone mode. Interrupts exit with status 130,
    usage errors with click's own status.
    """
    try:
        cli.main(prog_name=APP_NAME, standalone_mode=False)

    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
