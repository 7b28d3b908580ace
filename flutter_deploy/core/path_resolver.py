"""Path resolution module for flutter-deploy"""

import os
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    ANDROID_DIR,
    KEYSTORE_DIR,
    KEYSTORE_FILE,
    KEYSTORE_PROPERTIES_FILE,
    KEYSTORE_TEMPLATE_FILE,
    DEFAULT_MANIFEST_FILE,
    PROJECT_CONFIG_FILE,
    ENV_PROJECT_DIR,
    ENV_CONFIG_PATH,
    BuildKind,
)


class PathResolver:
    """Resolves paths within a Flutter project"""

    def __init__(self, project_root: Union[str, Path],
                 manifest_file: str = DEFAULT_MANIFEST_FILE):
        """Initialize path resolver

        Args:
            project_root: Root directory of the Flutter project
            manifest_file: Manifest file name relative to the project root
        """
        self.project_root = Path(project_root).expanduser().resolve()
        self.manifest_file = manifest_file

    @classmethod
    def from_environment(cls, project_dir: Optional[Union[str, Path]] = None,
                         manifest_file: str = DEFAULT_MANIFEST_FILE) -> 'PathResolver':
        """Create a resolver from an explicit directory, FLUTTER_PROJECT_DIR or cwd

        Args:
            project_dir: Explicit project directory (takes precedence)
            manifest_file: Manifest file name

        Returns:
            PathResolver instance
        """
        if project_dir is None:
            project_dir = os.environ.get(ENV_PROJECT_DIR) or Path.cwd()
        return cls(project_dir, manifest_file)

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def get_android_dir(self) -> Path:
        return self.project_root / ANDROID_DIR

    def get_keystore_dir(self) -> Path:
        return self.project_root / KEYSTORE_DIR

    def get_keystore_file(self) -> Path:
        """Get path of the release keystore (app-release.jks)"""
        return self.project_root / KEYSTORE_FILE

    def get_properties_file(self) -> Path:
        """Get path of android/keystore.properties"""
        return self.project_root / KEYSTORE_PROPERTIES_FILE

    def get_properties_template(self) -> Path:
        """Get path of android/keystore.properties.template"""
        return self.project_root / KEYSTORE_TEMPLATE_FILE

    def get_manifest_file(self) -> Path:
        """Get path of the manifest declaring the app version"""
        return self.resolve(self.manifest_file)

    def get_build_output(self, kind: BuildKind) -> Path:
        """Get path of the artifact produced by a release build

        Args:
            kind: Build kind (appbundle or apk)

        Returns:
            Path to the expected artifact
        """
        return self.project_root / kind.output_path

    def get_config_file(self) -> Path:
        """Get path of the tool configuration file

        FLUTTER_DEPLOY_CONFIG takes precedence over the project-local file.
        """
        config_path = os.environ.get(ENV_CONFIG_PATH)
        if config_path:
            return self.resolve(os.path.expanduser(config_path))

        return self.project_root / PROJECT_CONFIG_FILE
