"""Installs node-gyp and the native headers the project builds against.

node-gyp itself is installed from the manifest checked into the headers tool
directory, so once that install succeeds the path to its launcher is known.
Both disturl and target come from .yarnrc files checked into the repository.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Iterable, Optional, Set

from checks.models import CheckResult
from constants import Constants

from .rc_parser import HeaderInfo, get_header_info

logger = logging.getLogger(__name__)


def tool_dir(root: str) -> str:
    """Directory holding the node-gyp manifest."""
    return os.path.join(root, *Constants.HEADERS_TOOL_DIR)


def node_gyp_path(root: str) -> str:
    """Location of the node-gyp launcher installed into the tool directory."""
    return os.path.join(tool_dir(root), *Constants.NODE_GYP_RELPATH)


def install_node_gyp(root: str) -> bool:
    """Run ``yarn install`` in the tool directory, streaming to the terminal."""
    try:
        proc = subprocess.run(
            [Constants.YARN_CMD, "install"],
            cwd=tool_dir(root),
            env=os.environ.copy(),
            check=False,
        )
    except OSError as exc:
        logger.debug("yarn install could not be started: %s", exc)
        return False
    return proc.returncode == 0


def parse_installed_versions(output: str) -> Set[str]:
    """Collect version labels from ``node-gyp list`` output, minus its own log lines."""
    versions = set()
    for line in output.split("\n"):
        line = line.rstrip()
        if not line or line.startswith(Constants.NODE_GYP_INFO_PREFIX):
            continue
        versions.add(line)
    return versions


def list_installed_versions(node_gyp: str) -> Set[str]:
    """Return header versions node-gyp already has. Failures propagate."""
    proc = subprocess.run(
        [node_gyp, "list"],
        capture_output=True,
        text=True,
        check=True,
    )
    return parse_installed_versions(proc.stdout)


def install_header(node_gyp: str, info: HeaderInfo) -> None:
    """Download headers for one target. Failures propagate."""
    logger.info("Installing headers for %s from %s", info.target, info.disturl)
    subprocess.run(
        [node_gyp, "install", "--dist-url", info.disturl, info.target],
        check=True,
    )


def install_missing_headers(
    node_gyp: str,
    installed: Set[str],
    specs: Iterable[Optional[HeaderInfo]],
) -> int:
    """Install every present spec whose target is not installed yet.

    Each spec is handled independently. Returns the number of installs run.
    """
    count = 0
    for info in specs:
        if info is None or info.target in installed:
            continue
        install_header(node_gyp, info)
        count += 1
    return count


def install_headers(root: str) -> CheckResult:
    """Install node-gyp, then local and remote headers that are missing.

    Only the node-gyp installation failure is recorded on the result;
    errors while listing or installing headers are raised as
    subprocess.CalledProcessError.
    """
    result = CheckResult("headers")
    if not install_node_gyp(root):
        logger.error(Constants.MSG_NODE_GYP_FAILED)
        result.errors.append(Constants.MSG_NODE_GYP_FAILED)
        return result

    node_gyp = node_gyp_path(root)
    installed = list_installed_versions(node_gyp)
    logger.debug("Installed header versions: %s", sorted(installed))

    local = get_header_info(os.path.join(root, Constants.YARNRC_FILE))
    remote = get_header_info(os.path.join(root, Constants.REMOTE_DIR, Constants.YARNRC_FILE))
    install_missing_headers(node_gyp, installed, [local, remote])
    return result
