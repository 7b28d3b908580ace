# flutter_deploy/core/keystore_manager.py
"""Release keystore generation and keystore.properties scaffolding"""

import logging
import shutil
from typing import List, Optional

from ..constants import KEYSTORE_PROPERTIES_TEMPLATE, PropertiesSource
from ..models.config import KeystoreConfig, ToolsConfig
from ..models.result import SetupResult
from .path_resolver import PathResolver
from .process_runner import ProcessRunner


class KeystoreManager:
    """Create the release keystore with keytool and the matching properties file"""

    def __init__(self,
                 path_resolver: PathResolver,
                 runner: Optional[ProcessRunner] = None,
                 keystore_config: Optional[KeystoreConfig] = None,
                 tools: Optional[ToolsConfig] = None):
        """
        Initialize keystore manager

        Args:
            path_resolver: Path resolver for the Flutter project
            runner: Process runner used to invoke keytool
            keystore_config: keytool parameters
            tools: Configured executables
        """
        self.path_resolver = path_resolver
        self.runner = runner or ProcessRunner()
        self.keystore_config = keystore_config or KeystoreConfig()
        self.tools = tools or ToolsConfig()
        self.logger = logging.getLogger(self.__class__.__name__)

    def keytool_command(self) -> List[str]:
        """Build the keytool invocation for the release keystore"""
        config = self.keystore_config
        return [
            self.tools.keytool,
            "-genkey", "-v",
            "-keystore", str(self.path_resolver.get_keystore_file()),
            "-keyalg", config.keyalg,
            "-keysize", str(config.keysize),
            "-validity", str(config.validity),
            "-alias", config.alias,
        ]

    def setup(self) -> SetupResult:
        """
        Generate the keystore and properties file when missing

        An existing keystore or properties file is never overwritten.
        keytool runs attached to the terminal because it prompts for
        passwords and the certificate owner.

        Returns:
            SetupResult

        Raises:
            CommandError: If keytool exits with a non-zero status
            ToolNotFoundError: If keytool cannot be executed
        """
        result = SetupResult(
            keystore_path=self.path_resolver.get_keystore_file(),
            properties_path=self.path_resolver.get_properties_file(),
        )

        result.keystore_generated = self.generate_keystore()
        result.properties_source = self.ensure_properties()

        return result

    def generate_keystore(self) -> bool:
        """Run keytool unless the keystore exists; return True if generated"""
        keystore_file = self.path_resolver.get_keystore_file()

        if keystore_file.exists():
            self.logger.warning(f"Keystore already exists at {keystore_file}, skipping generation")
            return False

        self.path_resolver.get_keystore_dir().mkdir(parents=True, exist_ok=True)
        self.logger.info(f"Generating keystore at {keystore_file}")
        self.runner.check(
            self.keytool_command(),
            cwd=self.path_resolver.project_root,
            interactive=True
        )
        return True

    def ensure_properties(self) -> PropertiesSource:
        """Create keystore.properties from the template or the default content"""
        properties_file = self.path_resolver.get_properties_file()

        if properties_file.exists():
            return PropertiesSource.EXISTING

        properties_file.parent.mkdir(parents=True, exist_ok=True)
        template = self.path_resolver.get_properties_template()

        if template.exists():
            shutil.copyfile(template, properties_file)
            self.logger.info(f"Copied {template} to {properties_file}")
            return PropertiesSource.TEMPLATE

        with open(properties_file, 'w', encoding='utf-8') as f:
            f.write(KEYSTORE_PROPERTIES_TEMPLATE.format(alias=self.keystore_config.alias))

        self.logger.info(f"Created default {properties_file}")
        return PropertiesSource.DEFAULT
