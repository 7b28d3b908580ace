"""Exception definitions for flutter-deploy"""

from ..constants import ErrorCode


class FlutterDeployError(Exception):
    """Base exception for flutter-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(FlutterDeployError):
    """Tool configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class NotFoundError(FlutterDeployError):
    """Expected file or manifest line is absent"""

    def __init__(self, message: str, path=None):
        super().__init__(message, ErrorCode.NOT_FOUND)
        self.path = path


class MalformedVersionError(FlutterDeployError):
    """Version value is present but cannot be parsed"""

    def __init__(self, value: str, path=None, reason: str = None):
        message = f"Malformed version '{value}'"
        if path:
            message += f" in {path}"
        message += f": {reason or 'expected <name>+<build number>'}"
        super().__init__(message, ErrorCode.MALFORMED_VERSION)
        self.value = value
        self.path = path


class FileAccessError(FlutterDeployError):
    """Path is unreadable, unwritable or missing"""

    def __init__(self, message: str, path=None):
        super().__init__(message, ErrorCode.FILE_ACCESS)
        self.path = path


class ToolNotFoundError(FlutterDeployError):
    """Required executable is not on PATH"""

    def __init__(self, tool: str, hint: str = None):
        message = f"{tool} is not installed or not in PATH"
        if hint:
            message += f" ({hint})"
        super().__init__(message, ErrorCode.TOOL_NOT_FOUND)
        self.tool = tool


class CommandError(FlutterDeployError):
    """External command exited with a non-zero status"""

    def __init__(self, args, returncode: int, stderr: str = ""):
        command = " ".join(str(arg) for arg in args)
        message = f"Command failed with exit code {returncode}: {command}"
        if stderr:
            message += f"\n{stderr.strip()}"
        super().__init__(message, ErrorCode.COMMAND_FAILED)
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr


class BuildError(FlutterDeployError):
    """Build finished but the expected artifact is missing"""

    def __init__(self, message: str, artifact_path=None):
        super().__init__(message, ErrorCode.BUILD_FAILED)
        self.artifact_path = artifact_path


class ValidationError(FlutterDeployError):
    """Signing configuration is incomplete"""

    def __init__(self, message: str, report=None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)
        self.report = report
