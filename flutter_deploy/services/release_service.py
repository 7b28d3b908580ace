# flutter_deploy/services/release_service.py
"""Release workflow service"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..api.exceptions import ValidationError, FlutterDeployError
from ..constants import BuildKind
from ..core import (
    PathResolver,
    ProcessRunner,
    VersionManager,
    ConfigValidator,
    KeystoreManager,
    FlutterBuilder,
    check_environment,
)
from ..models import (
    DeployConfig,
    VersionString,
    ConfigPresenceReport,
    SetupResult,
    BuildResult,
    CommandResult,
)
from .config_service import ConfigService


class ReleaseService:
    """Sequences the Play Store release workflow for one Flutter project

    The project root is fixed at construction and passed down to every
    component; nothing reads it from the environment afterwards.
    """

    def __init__(self,
                 path_resolver: PathResolver,
                 config: Optional[DeployConfig] = None,
                 runner: Optional[ProcessRunner] = None):
        """
        Initialize release service

        Args:
            path_resolver: Path resolver bound to the project root
            config: Tool configuration (defaults when omitted)
            runner: Process runner for external tools
        """
        self.config = config or DeployConfig()
        self.path_resolver = path_resolver
        self.path_resolver.manifest_file = self.config.manifest
        self.runner = runner or ProcessRunner()

        self.version_manager = VersionManager()
        self.config_validator = ConfigValidator()
        self.keystore_manager = KeystoreManager(
            self.path_resolver,
            runner=self.runner,
            keystore_config=self.config.keystore,
            tools=self.config.tools,
        )
        self.builder = FlutterBuilder(
            self.path_resolver,
            runner=self.runner,
            tools=self.config.tools,
        )
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def for_project(cls,
                    project_dir: Optional[Union[str, Path]] = None,
                    runner: Optional[ProcessRunner] = None) -> 'ReleaseService':
        """Create a service for a project, loading its configuration file"""
        path_resolver = PathResolver.from_environment(project_dir)
        config = ConfigService(path_resolver.get_config_file()).load_config()
        return cls(path_resolver, config=config, runner=runner)

    @property
    def project_root(self) -> Path:
        return self.path_resolver.project_root

    @property
    def manifest_path(self) -> Path:
        return self.path_resolver.get_manifest_file()

    def check_environment(self) -> Dict[str, str]:
        """Verify flutter and keytool are available"""
        return check_environment(self.config.tools, self.runner)

    def setup(self) -> SetupResult:
        """Check the toolchain, then generate keystore and properties"""
        self.check_environment()
        return self.keystore_manager.setup()

    def validate(self) -> ConfigPresenceReport:
        """Report presence of the signing configuration"""
        return self.config_validator.validate(self.project_root)

    def require_valid_config(self) -> ConfigPresenceReport:
        """Validate and raise ValidationError when anything is missing"""
        report = self.validate()
        if not report.valid:
            details = "; ".join(check.diagnostic for check in report.missing)
            raise ValidationError(f"Signing configuration invalid: {details}", report)
        return report

    def read_version(self) -> VersionString:
        return self.version_manager.read_version(self.manifest_path)

    def bump_version(self, new_name: str) -> VersionString:
        return self.version_manager.bump_version(self.manifest_path, new_name)

    def build(self, kind: BuildKind = BuildKind.APPBUNDLE) -> BuildResult:
        """
        Build a signed release artifact

        Args:
            kind: appbundle (Play Store) or apk (testing)

        Returns:
            BuildResult

        Raises:
            ToolNotFoundError: If flutter or keytool is missing
            ValidationError: If the signing configuration is incomplete
            CommandError: If a flutter step fails
            BuildError: If the artifact is missing afterwards
        """
        self.check_environment()
        self.require_valid_config()

        result = self.builder.build(kind)

        try:
            result.version = str(self.read_version())
        except FlutterDeployError as e:
            self.logger.debug(f"Version unavailable for build result: {e}")

        return result

    def clean(self) -> CommandResult:
        """Remove build artifacts with flutter clean"""
        return self.builder.clean()

    def project_info(self) -> Dict[str, Path]:
        """Paths relevant to the release workflow"""
        return {
            "Project Directory": self.project_root,
            "Android Directory": self.path_resolver.get_android_dir(),
            "Keystore": self.path_resolver.get_keystore_file(),
            "Keystore Properties": self.path_resolver.get_properties_file(),
            "Manifest": self.manifest_path,
            "Build Output (AAB)": self.path_resolver.get_build_output(BuildKind.APPBUNDLE),
            "Build Output (APK)": self.path_resolver.get_build_output(BuildKind.APK),
        }
