"""Reader for the ``disturl``/``target`` pair of a .yarnrc file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderInfo:
    """Where to download native headers from and which runtime they target."""
    disturl: str
    target: str


def _quoted_value(line: str, key: str) -> Optional[str]:
    """Return the quoted value of ``key "value"`` or None if line is something else.

    The key must be the first token on the line; a key appearing later in a
    line is deliberately not accepted.
    """
    text = line.strip()
    if not text.startswith(key):
        return None
    rest = text[len(key):].lstrip()
    if len(rest) < 2 or not rest.startswith('"') or not rest.endswith('"'):
        return None
    return rest[1:-1]


def parse_header_info(content: str) -> Optional[HeaderInfo]:
    """Extract HeaderInfo from .yarnrc text; the last occurrence of a key wins."""
    disturl = target = None
    for line in content.splitlines():
        value = _quoted_value(line, "disturl")
        if value is not None:
            disturl = value
        value = _quoted_value(line, "target")
        if value is not None:
            target = value
    if disturl is None or target is None:
        return None
    return HeaderInfo(disturl=disturl, target=target)


def get_header_info(rc_file: str) -> Optional[HeaderInfo]:
    """Read a .yarnrc file. A missing file is treated the same as missing keys."""
    try:
        with open(rc_file, encoding="utf-8", errors="replace", newline="") as fh:
            content = fh.read()
    except FileNotFoundError:
        logger.debug("No header configuration at %s", rc_file)
        return None
    info = parse_header_info(content)
    if info is None:
        logger.debug("Header configuration %s lacks disturl or target", rc_file)
    return info
