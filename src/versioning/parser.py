"""Version string parsing utilities for the preflight gates."""

import re
from typing import Optional

import semantic_version

from constants import Constants

_VERSION_RE = re.compile(Constants.VERSION_PATTERN)


class VersionParseError(ValueError):
    """Raised when a tool reports a version without a major.minor.patch prefix."""

    def __init__(self, raw: Optional[str], source: str = "version"):
        self.raw = raw
        self.source = source
        super().__init__(f"Unable to parse {source} string {raw!r}: expected major.minor.patch")


def parse_version_triple(raw: Optional[str], source: str = "version") -> semantic_version.Version:
    """Parse the leading ``major.minor.patch`` of a version string.

    Anything after the triple (prerelease tags, build metadata, trailing
    output) is ignored, and a leading ``v`` as printed by ``node --version``
    is accepted.

    Raises:
        VersionParseError: If the string does not start with a version triple.
    """
    match = _VERSION_RE.match(raw.strip()) if raw else None
    if match is None:
        raise VersionParseError(raw, source)
    major, minor, patch = (int(part) for part in match.groups())
    return semantic_version.Version(major=major, minor=minor, patch=patch)


def satisfies(version: semantic_version.Version, spec: str) -> bool:
    """Return True if version is inside the SimpleSpec range."""
    return semantic_version.SimpleSpec(spec).match(version)
