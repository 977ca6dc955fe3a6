"""Native header configuration and installation."""

from .installer import install_headers
from .rc_parser import HeaderInfo, get_header_info

__all__ = ["HeaderInfo", "get_header_info", "install_headers"]
