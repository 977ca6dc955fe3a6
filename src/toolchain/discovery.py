"""Visual Studio C/C++ toolchain discovery for Windows hosts.

Mirrors the lookup order used by Chromium's ``build/vs_toolchain.py``:
newest supported version first, an explicit ``vs<version>_install``
override before the Program Files probes, and commercial editions before
Community, Preview and BuildTools.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Tuple

from checks.models import CheckResult
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants

logger = logging.getLogger(__name__)


def find_available_vs_path_for_version(program_files: Optional[str], version: str) -> Optional[str]:
    """Return the first installed edition of ``version`` under a Program Files root."""
    if not program_files:
        return None
    vs_root = os.path.join(program_files, Constants.VS_DIR_NAME, version)
    for edition in Constants.VS_EDITIONS:
        candidate = os.path.join(vs_root, edition)
        if os.path.exists(candidate):
            return candidate
    return None


def find_supported_visual_studio_version(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Locate the preferred supported Visual Studio install, or None."""
    env = os.environ if env is None else env
    program_files_roots = [
        env.get(Constants.ENV_PROGRAM_FILES),
        env.get(Constants.ENV_PROGRAM_FILES_X86),
    ]
    for version in Constants.VS_VERSIONS:
        override = env.get(Constants.VS_INSTALL_ENV_TEMPLATE.format(version=version))
        if override and os.path.exists(override):
            return override
        for program_files in program_files_roots:
            vs_path = find_available_vs_path_for_version(program_files, version)
            if vs_path:
                return vs_path
    return None


def check_toolchain(env: Optional[Mapping[str, str]] = None) -> Tuple[Optional[str], CheckResult]:
    """Run toolchain discovery and record an error when nothing is found."""
    result = CheckResult("toolchain")
    vs_path = find_supported_visual_studio_version(env)
    if is_debug_enabled(logger):
        logger.debug(
            "Toolchain discovery finished",
            extra=extra_context(
                event="decision",
                component="toolchain",
                action="discover",
                outcome="found" if vs_path else "missing",
                path=vs_path,
            ),
        )
    if not vs_path:
        logger.error(Constants.MSG_TOOLCHAIN)
        result.errors.append(Constants.MSG_TOOLCHAIN)
    return vs_path, result
