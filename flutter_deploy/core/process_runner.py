"""External command execution"""

import logging
import shutil
import stat
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.exceptions import CommandError, FileAccessError, ToolNotFoundError
from ..models.result import CommandResult
from ..utils.file_utils import stat_path


class ProcessRunner:
    """Runs external tools and reports exit status and output

    Everything that shells out (keytool, flutter) goes through a runner so the
    calling component can be exercised with a fake in tests.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def which(self, name: str) -> Optional[str]:
        """Locate an executable on PATH

        Args:
            name: Executable name or path

        Returns:
            Full path or None if not found
        """
        return shutil.which(name)

    def run(self,
            args: Sequence[Union[str, Path]],
            cwd: Optional[Path] = None,
            interactive: bool = False) -> CommandResult:
        """Run a command to completion

        Args:
            args: Command and arguments
            cwd: Working directory
            interactive: Inherit the terminal instead of capturing output

        Returns:
            CommandResult

        Raises:
            ToolNotFoundError: If the executable does not exist
            FileAccessError: If cwd is not a directory or the executable
                cannot be run
        """
        argv: List[str] = [str(arg) for arg in args]
        self.logger.debug(f"Running: {' '.join(argv)} (cwd={cwd})")

        if cwd is not None:
            self._check_cwd(Path(cwd))

        try:
            if interactive:
                completed = subprocess.run(argv, cwd=cwd)
            else:
                completed = subprocess.run(
                    argv,
                    cwd=cwd,
                    capture_output=True,
                    text=True
                )
        except FileNotFoundError:
            raise ToolNotFoundError(argv[0])
        except PermissionError as e:
            raise FileAccessError(f"Cannot execute {argv[0]}: {e}", argv[0]) from e

        result = CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

        self.logger.debug(f"Exit code {result.returncode}: {result.command_line}")
        return result

    def check(self,
              args: Sequence[Union[str, Path]],
              cwd: Optional[Path] = None,
              interactive: bool = False) -> CommandResult:
        """Run a command and raise CommandError on a non-zero exit"""
        result = self.run(args, cwd=cwd, interactive=interactive)
        if not result.success:
            raise CommandError(result.args, result.returncode, result.stderr)
        return result

    def _check_cwd(self, cwd: Path) -> None:
        try:
            info = stat_path(cwd)
        except OSError as e:
            raise FileAccessError(f"Cannot access {cwd}: {e}", cwd) from e

        if info is None or not stat.S_ISDIR(info.st_mode):
            raise FileAccessError(f"Working directory does not exist: {cwd}", cwd)
