"""
Option identifiers and the per-invocation option store.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import socket
from enum import Enum
from typing import Any


IPSET_MAXNAMELEN = 32
ETH_ALEN = 6

CIDR_SEPARATOR = "/"
RANGE_SEPARATOR = "-"
ELEM_SEPARATOR = ","
NAME_SEPARATOR = ","
PROTO_SEPARATOR = ":"


class Opt(str, Enum):
    """Options a parsed value can be stored under."""

    SETNAME = "setname"
    TYPENAME = "typename"
    FAMILY = "family"
    TYPE = "type"

    # Element parts
    IP = "ip"
    IP_TO = "ip_to"
    CIDR = "cidr"
    IP2 = "ip2"
    CIDR2 = "cidr2"
    PORT = "port"
    PORT_TO = "port_to"
    PROTO = "proto"
    ETHER = "ether"
    NAME = "name"
    NAMEREF = "nameref"
    BEFORE = "before"
    SETNAME2 = "setname2"

    # Create/ADT options
    TIMEOUT = "timeout"
    NETMASK = "netmask"
    GC = "gc"
    HASHSIZE = "hashsize"
    MAXELEM = "maxelem"
    PROBES = "probes"
    RESIZE = "resize"
    SIZE = "size"
    EXIST = "exist"

    # Aliases
    IP_FROM = "ip"
    PORT_FROM = "port"


class Family(str, Enum):
    """Address family of an invocation."""

    UNSPEC = "unspec"
    INET = "inet"
    INET6 = "inet6"

    @property
    def af(self) -> int:
        """Socket address family constant."""
        return {
            Family.UNSPEC: socket.AF_UNSPEC,
            Family.INET: socket.AF_INET,
            Family.INET6: socket.AF_INET6,
        }[self]

    @property
    def max_cidr(self) -> int:
        return 128 if self is Family.INET6 else 32

    @property
    def label(self) -> str:
        return "IPv6" if self is Family.INET6 else "IPv4"


class SessionData:
    """Parsed values of one command invocation.

    Every value stored with set() also marks its option as specified,
    so a command layer can refuse an option given twice. flag_set()
    marks an option without attaching a value.
    """

    def __init__(self):
        self._values: dict[Opt, Any] = {}
        self._flags: set[Opt] = set()
        self._ignored: set[Opt] = set()
        self._family = Family.UNSPEC

    def set(self, opt: Opt, value: Any = True) -> None:
        """Store a value and mark the option as specified."""
        if opt is Opt.FAMILY:
            self._family = Family(value)
        self._values[opt] = value
        self._flags.add(opt)

    def get(self, opt: Opt, default: Any = None) -> Any:
        """Get the value stored for an option."""
        if opt is Opt.FAMILY:
            return self._family
        return self._values.get(opt, default)

    def test(self, opt: Opt) -> bool:
        """Check if an option was already specified."""
        return opt in self._flags

    def flag_set(self, opt: Opt) -> None:
        """Mark an option as specified without a value."""
        self._flags.add(opt)

    @property
    def family(self) -> Family:
        return self._family

    def default_family(self) -> Family:
        """Assume IPv4 if no family was given yet.

        The default is stored like an explicit family, so it bounds
        every later prefix length and a family given afterwards is
        refused.
        """
        if self._family is Family.UNSPEC:
            self.set(Opt.FAMILY, Family.INET)
        return self._family

    def ignored(self, opt: Opt) -> bool:
        """Return whether opt was already ignored, marking it ignored."""
        seen = opt in self._ignored
        self._ignored.add(opt)
        return seen

    def reset(self) -> None:
        """Forget every parsed value."""
        self._values.clear()
        self._flags.clear()
        self._ignored.clear()
        self._family = Family.UNSPEC

    def as_dict(self) -> dict[str, Any]:
        """Get specified options and their values, keyed by option name."""
        result: dict[str, Any] = {}
        for opt in Opt:
            if opt in self._flags:
                result[opt.value] = self.get(opt)
        return result
