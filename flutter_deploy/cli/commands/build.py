"""Release build commands"""

import click

from ..decorators import handle_errors, pass_service
from ..utils.output import console, format_build_result, format_next_steps
from ...constants import BuildKind


def _run_build(service, kind: BuildKind):
    label = "app bundle" if kind is BuildKind.APPBUNDLE else "APK"
    console.print(f"[blue]Building release {label}...[/blue]")
    result = service.build(kind)
    format_build_result(result)
    return result


@click.command()
@handle_errors
@pass_service
def build(service):
    """Build release app bundle (AAB) for Play Store

    Checks the toolchain and signing configuration, then runs
    flutter clean, flutter pub get and flutter build appbundle --release.
    """
    _run_build(service, BuildKind.APPBUNDLE)


@click.command(name='build-apk')
@handle_errors
@pass_service
def build_apk(service):
    """Build release APK for testing"""
    _run_build(service, BuildKind.APK)


@click.command()
@handle_errors
@pass_service
def deploy(service):
    """Full deployment workflow (validate + build)

    Builds the release app bundle and lists the remaining
    Play Console steps.
    """
    result = _run_build(service, BuildKind.APPBUNDLE)
    format_next_steps(result.artifact_path)
