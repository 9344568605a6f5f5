"""
ipsetparse - Element and value parsing for ipset-style set management

Turns user supplied strings (addresses, networks, ranges, ports,
protocols, ICMP type/codes, ethernet addresses, set names and composite
set elements) into typed, range checked values in a per-invocation
option store.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from ipsetparse.data import Family, Opt, SessionData
from ipsetparse.errors import (
    IpsetError,
    IpsetSyntaxError,
    IpsetResourceError,
    IpsetInternalError,
)
from ipsetparse.session import OutputMode, Session

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

__all__ = [
    "Family",
    "Opt",
    "SessionData",
    "Session",
    "OutputMode",
    "IpsetError",
    "IpsetSyntaxError",
    "IpsetResourceError",
    "IpsetInternalError",
]
