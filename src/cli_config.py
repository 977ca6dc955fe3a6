"""Optional YAML settings for the preflight check.

Settings only adjust where things are looked up (toolchain versions and
editions, header file locations); the node and yarn version gates are
fixed. Loading never raises: an unreadable or malformed file is logged and
the built-in defaults stay in effect.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

# dotted YAML key -> (Constants attribute, expected container type)
_OVERRIDES = {
    "toolchain.versions": ("VS_VERSIONS", list),
    "toolchain.editions": ("VS_EDITIONS", list),
    "headers.tool_dir": ("HEADERS_TOOL_DIR", tuple),
    "headers.remote_dir": ("REMOTE_DIR", str),
}


def resolve_config_path(cli_path: Optional[str]) -> Optional[str]:
    """CLI path wins over the PREFLIGHT_CONFIG environment variable."""
    if cli_path:
        return cli_path
    return os.environ.get(Constants.ENV_CONFIG) or None


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML mapping from path, returning {} on any problem."""
    if not path:
        return {}
    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", path)
        return {}
    return data


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def _coerce(value: Any, kind: type) -> Any:
    if kind is str:
        if not isinstance(value, str) or not value:
            raise ValueError("expected a non-empty string")
        return value
    if isinstance(value, str):
        value = value.replace("\\", "/").split("/")
    if not isinstance(value, (list, tuple)) or not value:
        raise ValueError("expected a non-empty list")
    return kind(str(item) for item in value)


def apply_config_overrides(config: Dict[str, Any]) -> None:
    """Apply recognized settings onto Constants."""
    for key, value in _flatten(config).items():
        target = _OVERRIDES.get(key)
        if target is None:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        attr, kind = target
        try:
            setattr(Constants, attr, _coerce(value, kind))
        except ValueError as exc:
            logger.warning("Ignoring config key %s: %s", key, exc)
            continue
        logger.debug("Config override %s=%r", key, getattr(Constants, attr))
