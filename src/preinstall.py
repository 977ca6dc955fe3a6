"""Preinstall - developer environment preflight check.

Runs before dependency installation and verifies node.js, yarn, that yarn
is the one installing, and on Windows the C/C++ toolchain and node-gyp
headers. Every check runs; the exit status reflects all of them.

    Returns:
        int: Exit code
"""
import logging
import os
import subprocess
import sys

from args import parse_args
from checks.models import PreflightReport
from checks.package_manager import check_invoker, run_yarn_check
from checks.runtime import run_node_check
from cli_config import apply_config_overrides, load_config, resolve_config_path
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from headers import install_headers
from toolchain import check_toolchain, enable_spectre_mode

logger = logging.getLogger(__name__)


def is_windows(platform=None):
    """Return True when running on Windows."""
    return (platform or sys.platform) == "win32"


def run_windows_checks(report, root, env=None):
    """Discover the toolchain, enable spectre mode and install headers.

    Header installation only happens when no earlier check failed.
    """
    vs_path, toolchain_result = check_toolchain(env)
    report.add(toolchain_result)
    if vs_path:
        report.add(enable_spectre_mode(vs_path))
    if not report.failed:
        report.add(install_headers(root))
    return report


def run_preflight(root, env=None, platform=None):
    """Run every check in order and return the accumulated report."""
    env = os.environ if env is None else env
    report = PreflightReport()
    report.add(run_node_check(env))
    report.add(run_yarn_check(platform))
    report.add(check_invoker(env))
    if is_windows(platform):
        run_windows_checks(report, root, env)
    return report


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to the centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_FILE", None))

    apply_config_overrides(load_config(resolve_config_path(args.CONFIG)))

    root = os.path.abspath(args.ROOT or os.getcwd())
    if is_debug_enabled(logger):
        logger.debug(
            "Preflight start",
            extra=extra_context(event="function_entry", component="cli", action="main", root=root),
        )

    try:
        report = run_preflight(root)
    except subprocess.CalledProcessError as exc:
        logger.error("Command %s failed with exit status %s", exc.cmd, exc.returncode)
        sys.exit(ExitCodes.FAILURE.value)
    except OSError as exc:
        logger.error("Unable to run %s: %s", getattr(exc, "filename", None) or "command", exc)
        sys.exit(ExitCodes.FAILURE.value)

    if report.failed:
        logger.debug("Preflight failed: %d error(s)", len(report.errors))
        print("", file=sys.stderr)
        sys.exit(ExitCodes.FAILURE.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
