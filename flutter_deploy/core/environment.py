"""Toolchain availability checks"""

from typing import Dict, Optional

from ..api.exceptions import ToolNotFoundError
from ..models.config import ToolsConfig
from .process_runner import ProcessRunner

TOOL_HINTS = {
    "keytool": "part of JDK",
}


def check_environment(tools: Optional[ToolsConfig] = None,
                      runner: Optional[ProcessRunner] = None) -> Dict[str, str]:
    """
    Verify that flutter and keytool are on PATH

    Args:
        tools: Configured executables
        runner: Process runner used for PATH lookups

    Returns:
        Mapping of tool name to resolved executable path

    Raises:
        ToolNotFoundError: Naming the first missing tool
    """
    tools = tools or ToolsConfig()
    runner = runner or ProcessRunner()

    found = {}
    for name, executable in (("flutter", tools.flutter), ("keytool", tools.keytool)):
        location = runner.which(executable)
        if not location:
            raise ToolNotFoundError(executable, TOOL_HINTS.get(name))
        found[name] = location

    return found
