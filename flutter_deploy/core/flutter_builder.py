# flutter_deploy/core/flutter_builder.py
"""Release builds through the Flutter toolchain"""

import logging
import time
from typing import List, Optional

from ..api.exceptions import BuildError
from ..constants import BuildKind
from ..models.config import ToolsConfig
from ..models.result import BuildResult, CommandResult
from ..utils.file_utils import get_file_size
from .path_resolver import PathResolver
from .process_runner import ProcessRunner


class FlutterBuilder:
    """Sequence flutter clean / pub get / build and verify the artifact"""

    def __init__(self,
                 path_resolver: PathResolver,
                 runner: Optional[ProcessRunner] = None,
                 tools: Optional[ToolsConfig] = None):
        self.path_resolver = path_resolver
        self.runner = runner or ProcessRunner()
        self.tools = tools or ToolsConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_commands(self, kind: BuildKind) -> List[List[str]]:
        """Commands run, in order, for a release build"""
        flutter = self.tools.flutter
        return [
            [flutter, "clean"],
            [flutter, "pub", "get"],
            [flutter, "build", kind.value, "--release"],
        ]

    def build(self, kind: BuildKind) -> BuildResult:
        """
        Build a release artifact

        Args:
            kind: appbundle or apk

        Returns:
            BuildResult with the artifact path and size

        Raises:
            CommandError: If any flutter step fails
            BuildError: If the build succeeds but the artifact is missing
        """
        start_time = time.time()
        commands: List[CommandResult] = []

        for args in self.build_commands(kind):
            self.logger.info(f"Running {' '.join(args)}")
            commands.append(
                self.runner.check(args, cwd=self.path_resolver.project_root, interactive=True)
            )

        artifact = self.path_resolver.get_build_output(kind)
        if not artifact.is_file():
            raise BuildError(
                f"Build failed - {kind.label} file not found: {artifact}",
                artifact
            )

        return BuildResult(
            kind=kind,
            artifact_path=artifact,
            artifact_size=get_file_size(artifact),
            duration=time.time() - start_time,
            commands=commands,
        )

    def clean(self) -> CommandResult:
        """Run flutter clean in the project root"""
        return self.runner.check(
            [self.tools.flutter, "clean"],
            cwd=self.path_resolver.project_root,
            interactive=True
        )
