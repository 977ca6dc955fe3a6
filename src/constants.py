"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FAILURE = 1


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Version gates, expressed as semantic_version.SimpleSpec strings
    NODE_SUPPORTED_SPEC = ">=16.14.0"
    NODE_UNTESTED_SPEC = ">=17.0.0"
    YARN_SUPPORTED_SPEC = ">=1.10.1,<2.0.0"
    VERSION_PATTERN = r"^v?(\d+)\.(\d+)\.(\d+)"

    # Invoker identity
    ENV_EXECPATH = "npm_execpath"
    ENV_NODE_EXECPATH = "npm_node_execpath"
    INVOKER_PATTERN = r"yarn[\w.-]*\.c?js$|yarnpkg$"

    # Windows toolchain discovery, in descending preference order
    VS_VERSIONS = ["2022", "2019", "2017"]
    VS_EDITIONS = ["Enterprise", "Professional", "Community", "Preview", "BuildTools"]
    VS_INSTALL_ENV_TEMPLATE = "vs{version}_install"
    ENV_PROGRAM_FILES = "ProgramFiles"
    ENV_PROGRAM_FILES_X86 = "ProgramFiles(x86)"
    VS_DIR_NAME = "Microsoft Visual Studio"
    VCVARSALL_RELPATH = ("VC", "Auxiliary", "Build", "vcvarsall.bat")
    SPECTRE_ARG = "-vcvars_spectre_libs=spectre_mode"

    # Native headers
    YARN_CMD = "yarn.cmd"
    HEADERS_TOOL_DIR = ("build", "npm", "gyp")
    NODE_GYP_RELPATH = ("node_modules", ".bin", "node-gyp.cmd")
    NODE_GYP_INFO_PREFIX = "gyp info"
    YARNRC_FILE = ".yarnrc"
    REMOTE_DIR = "remote"

    PREREQUISITES_URL = "https://github.com/microsoft/vscode/wiki/How-to-Contribute#prerequisites"

    # Messages
    MSG_NODE_VERSION = "Please use node.js versions >=16.14.x and <17."
    MSG_NODE_UNTESTED = "Warning: Versions of node.js >= 17 have not been tested."
    MSG_YARN_VERSION = "Please use yarn >=1.10.1 and <2."
    MSG_USE_YARN = "Please use yarn to install dependencies."
    MSG_TOOLCHAIN = f"Invalid C/C++ Compiler Toolchain. Please check {PREREQUISITES_URL}."
    MSG_VCVARSALL_MISSING = f"vcvarsall.bat not found. Please check {PREREQUISITES_URL}."
    MSG_NODE_GYP_FAILED = "Installing node-gyp failed"

    # Logging / configuration
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "PREFLIGHT_LOG_LEVEL"
    ENV_CONFIG = "PREFLIGHT_CONFIG"
    ENV_NO_COLOR = "NO_COLOR"
    ANSI_ERROR = "\033[1;31m"
    ANSI_RESET = "\033[0;0m"
