"""Spectre-mitigated library enablement for a discovered toolchain."""

from __future__ import annotations

import logging
import os
import subprocess

from checks.models import CheckResult
from constants import Constants

logger = logging.getLogger(__name__)


def vcvarsall_path(vs_path: str) -> str:
    """Return the location of vcvarsall.bat inside a Visual Studio install."""
    return os.path.join(vs_path, *Constants.VCVARSALL_RELPATH)


def enable_spectre_mode(vs_path: str) -> CheckResult:
    """Run vcvarsall.bat requesting the Spectre-mitigated libraries.

    Best effort: a missing script or a non-zero status is reported but is
    only ever recorded as a warning on the returned result.
    """
    result = CheckResult("spectre-mode")
    aux_path = vcvarsall_path(vs_path)
    if not os.path.exists(aux_path):
        logger.error(Constants.MSG_VCVARSALL_MISSING)
        result.warnings.append(Constants.MSG_VCVARSALL_MISSING)
        return result

    try:
        proc = subprocess.run([aux_path, Constants.SPECTRE_ARG], capture_output=True, check=False)
    except OSError as exc:
        message = f"vcvarsall.bat could not be started: {exc}"
        logger.error(message)
        result.warnings.append(message)
        return result
    if proc.returncode:
        message = f"vcvarsall.bat returned status {proc.returncode}"
        logger.error(message)
        result.warnings.append(message)
    return result
