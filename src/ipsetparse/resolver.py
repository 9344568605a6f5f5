"""
System name resolution used by the parsers.

Hostnames, service names and protocol names are looked up through
the C library resolver. The calls block and expose no timeout.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import socket

from ipsetparse.data import Family

logger = logging.getLogger(__name__)

AddrInfo = tuple[int, int, int, str, tuple]

# getaddrinfo failures that are not about the name itself
RESOURCE_GAI_ERRORS = {
    getattr(socket, "EAI_MEMORY", None),
    getattr(socket, "EAI_SYSTEM", None),
} - {None}


class SystemResolver:
    """Resolver backed by the socket module."""

    def getaddrinfo(self, host: str, family: Family) -> list[AddrInfo]:
        """Resolve host restricted to one address family.

        Raises:
            socket.gaierror: if resolution fails
        """
        logger.debug(f"Resolving {host} ({family.label})")
        return socket.getaddrinfo(
            host,
            None,
            family.af,
            socket.SOCK_RAW,
            0,
            socket.AI_CANONNAME,
        )

    def service_port(self, name: str, proto: str) -> int | None:
        """Look up a service port in host byte order."""
        try:
            return socket.getservbyname(name, proto.lower())
        except (OSError, ValueError):
            return None

    def protocol_number(self, name: str) -> int | None:
        """Look up a protocol number by name."""
        try:
            return socket.getprotobyname(name)
        except (OSError, ValueError):
            return None
