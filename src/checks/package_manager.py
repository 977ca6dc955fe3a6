"""Yarn version gate and invoker identity check."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import sys
from typing import Mapping, Optional

from checks.models import CheckResult
from constants import Constants
from versioning.parser import VersionParseError, parse_version_triple, satisfies

logger = logging.getLogger(__name__)

_INVOKER_RE = re.compile(Constants.INVOKER_PATTERN)


def yarn_executable(platform: Optional[str] = None) -> str:
    """Return the yarn launcher name; Windows installs it as a .cmd shim."""
    return Constants.YARN_CMD if (platform or sys.platform) == "win32" else "yarn"


def get_yarn_version(platform: Optional[str] = None) -> str:
    """Return the output of ``yarn -v``, stripped.

    Raises:
        OSError: If yarn is not on PATH.
        subprocess.CalledProcessError: If yarn exits non-zero.
    """
    proc = subprocess.run(
        [yarn_executable(platform), "-v"],
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.strip()


def check_yarn_version(version: Optional[str]) -> CheckResult:
    """Accept yarn versions in [1.10.1, 2.0.0)."""
    result = CheckResult("yarn-version")
    try:
        parsed = parse_version_triple(version, source="yarn version")
    except VersionParseError as exc:
        logger.error("%s", exc)
        result.errors.append(str(exc))
        return result

    if not satisfies(parsed, Constants.YARN_SUPPORTED_SPEC):
        logger.error(Constants.MSG_YARN_VERSION)
        result.errors.append(Constants.MSG_YARN_VERSION)
    return result


def run_yarn_check(platform: Optional[str] = None) -> CheckResult:
    """Query yarn and validate its version."""
    try:
        version = get_yarn_version(platform)
    except (OSError, subprocess.CalledProcessError) as exc:
        result = CheckResult("yarn-version")
        message = f"Unable to determine yarn version: {exc}"
        logger.error(message)
        result.errors.append(message)
        return result
    return check_yarn_version(version)


def is_yarn_execpath(execpath: Optional[str]) -> bool:
    """Return True if execpath points at a yarn entry script."""
    if not execpath:
        return False
    return _INVOKER_RE.search(execpath) is not None


def check_invoker(env: Optional[Mapping[str, str]] = None) -> CheckResult:
    """Fail unless yarn is the package manager running this install."""
    env = os.environ if env is None else env
    result = CheckResult("invoker")
    execpath = env.get(Constants.ENV_EXECPATH)
    logger.debug("%s=%r", Constants.ENV_EXECPATH, execpath)
    if not is_yarn_execpath(execpath):
        logger.error(Constants.MSG_USE_YARN)
        result.errors.append(Constants.MSG_USE_YARN)
    return result
