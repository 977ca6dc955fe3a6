"""Windows native toolchain support."""

from .discovery import (
    check_toolchain,
    find_available_vs_path_for_version,
    find_supported_visual_studio_version,
)
from .spectre import enable_spectre_mode

__all__ = [
    "check_toolchain",
    "find_available_vs_path_for_version",
    "find_supported_visual_studio_version",
    "enable_spectre_mode",
]
