"""Global constants for flutter-deploy"""

from enum import Enum

APP_NAME = "flutter-deploy"
LOG_FORMAT = "%(message)s"

# Tool configuration
PROJECT_CONFIG_FILE = ".flutter-deploy.yaml"

# Project layout, relative to the Flutter project root
DEFAULT_MANIFEST_FILE = "pubspec.yaml"
ANDROID_DIR = "android"
KEYSTORE_DIR = "android/keystore"
KEYSTORE_FILE = "android/keystore/app-release.jks"
KEYSTORE_PROPERTIES_FILE = "android/keystore.properties"
KEYSTORE_TEMPLATE_FILE = "android/keystore.properties.template"
BUILD_OUTPUT_AAB = "build/app/outputs/bundle/release/app-release.aab"
BUILD_OUTPUT_APK = "build/app/outputs/flutter-apk/app-release.apk"

# Manifest format
VERSION_KEY = "version:"
BUILD_SEPARATOR = "+"

# External tools
DEFAULT_FLUTTER_BIN = "flutter"
DEFAULT_KEYTOOL_BIN = "keytool"

# Keystore generation defaults
DEFAULT_KEY_ALIAS = "app-release"
DEFAULT_KEY_ALGORITHM = "RSA"
DEFAULT_KEY_SIZE = 2048
DEFAULT_KEY_VALIDITY_DAYS = 10000

KEYSTORE_PROPERTIES_TEMPLATE = """# Keystore properties for release signing
# DO NOT commit this file to version control

storePassword=YOUR_KEYSTORE_PASSWORD
keyPassword=YOUR_KEY_PASSWORD
keyAlias={alias}
storeFile=keystore/app-release.jks
"""


class BuildKind(Enum):
    """Release artifact kinds produced by `flutter build`"""
    APPBUNDLE = "appbundle"
    APK = "apk"

    @property
    def output_path(self) -> str:
        """Artifact path relative to the project root"""
        if self is BuildKind.APPBUNDLE:
            return BUILD_OUTPUT_AAB
        return BUILD_OUTPUT_APK

    @property
    def label(self) -> str:
        """Short display label"""
        return "AAB" if self is BuildKind.APPBUNDLE else "APK"


class CheckKind(Enum):
    """Kinds of signing configuration files"""
    PROPERTIES = "properties"
    KEYSTORE = "keystore"


class PropertiesSource(Enum):
    """Where the keystore.properties file came from during setup"""
    EXISTING = "existing"
    TEMPLATE = "template"
    DEFAULT = "default"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "FD001"
    NOT_FOUND = "FD002"
    MALFORMED_VERSION = "FD003"
    FILE_ACCESS = "FD004"
    TOOL_NOT_FOUND = "FD005"
    COMMAND_FAILED = "FD006"
    BUILD_FAILED = "FD007"
    VALIDATION_FAILED = "FD008"


# Environment variables
ENV_PROJECT_DIR = "FLUTTER_PROJECT_DIR"
ENV_CONFIG_PATH = "FLUTTER_DEPLOY_CONFIG"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Display constants
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️ "
EMOJI_PACKAGE = "📦"
EMOJI_KEY = "🔑"

# Message templates
MSG_BUILD_SUCCESS = f"{EMOJI_SUCCESS} Build successful!"
MSG_KEYSTORE_EXISTS = f"{EMOJI_WARNING} Keystore already exists at {{path}}"
MSG_KEYSTORE_GENERATED = f"{EMOJI_SUCCESS} Keystore generated at {{path}}"
MSG_EDIT_PROPERTIES = f"{EMOJI_WARNING} Please edit {{path}} with your keystore details"
MSG_VERSION_UPDATED = f"{EMOJI_SUCCESS} Version updated to {{version}}"
MSG_CONFIG_VALID = f"{EMOJI_SUCCESS} Keystore configuration valid"

# Next steps after a deploy build
DEPLOY_NEXT_STEPS = [
    "Upload {artifact} to Google Play Console",
    "Complete store listing information",
    "Submit for review",
]
