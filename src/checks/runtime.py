"""Node.js runtime version gate."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Mapping, Optional

from checks.models import CheckResult
from constants import Constants
from versioning.parser import VersionParseError, parse_version_triple, satisfies

logger = logging.getLogger(__name__)


def get_node_version(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the version reported by the node binary driving this install.

    Package managers export the node executable running the lifecycle script
    as ``npm_node_execpath``; fall back to ``node`` on PATH otherwise.

    Raises:
        OSError: If the executable cannot be started.
        subprocess.CalledProcessError: If it exits non-zero.
    """
    env = os.environ if env is None else env
    node = env.get(Constants.ENV_NODE_EXECPATH) or "node"
    proc = subprocess.run(
        [node, "--version"],
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.strip()


def check_node_version(version: Optional[str]) -> CheckResult:
    """Validate the node.js version against the supported range.

    Versions below 16.14 fail; 17 and above pass with an untested warning.
    """
    result = CheckResult("node-version")
    try:
        parsed = parse_version_triple(version, source="node.js version")
    except VersionParseError as exc:
        logger.error("%s", exc)
        result.errors.append(str(exc))
        return result

    logger.debug("Detected node.js %s", parsed)
    if not satisfies(parsed, Constants.NODE_SUPPORTED_SPEC):
        logger.error(Constants.MSG_NODE_VERSION)
        result.errors.append(Constants.MSG_NODE_VERSION)
    if satisfies(parsed, Constants.NODE_UNTESTED_SPEC):
        logger.warning(Constants.MSG_NODE_UNTESTED)
        result.warnings.append(Constants.MSG_NODE_UNTESTED)
    return result


def run_node_check(env: Optional[Mapping[str, str]] = None) -> CheckResult:
    """Query the node binary and validate its version."""
    try:
        version = get_node_version(env)
    except (OSError, subprocess.CalledProcessError) as exc:
        result = CheckResult("node-version")
        message = f"Unable to determine node.js version: {exc}"
        logger.error(message)
        result.errors.append(message)
        return result
    return check_node_version(version)
