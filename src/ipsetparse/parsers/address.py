"""
IPv4/IPv6 address, network and range parsers.

Hostnames are resolved through the session's resolver; when a name
resolves to several addresses only the first one is used.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import socket
from enum import Enum

from netaddr import IPAddress

from ipsetparse.data import (
    CIDR_SEPARATOR,
    ELEM_SEPARATOR,
    RANGE_SEPARATOR,
    Family,
    Opt,
)
from ipsetparse.errors import IpsetSyntaxError
from ipsetparse.parsers.base import (
    find_separator,
    parse_uint32,
    split_at,
    string_to_cidr,
)
from ipsetparse.resolver import RESOURCE_GAI_ERRORS
from ipsetparse.session import Session

logger = logging.getLogger(__name__)

FAMILY_NAMES = {
    "inet": Family.INET,
    "ipv4": Family.INET,
    "-4": Family.INET,
    "inet6": Family.INET6,
    "ipv6": Family.INET6,
    "-6": Family.INET6,
    "any": Family.UNSPEC,
    "unspec": Family.UNSPEC,
}

# Length of the sockaddr tuple returned by getaddrinfo
SOCKADDR_LEN = {
    Family.INET: 2,
    Family.INET6: 4,
}


class AddrShape(str, Enum):
    """Accepted shapes of an address argument."""

    ANY = "any"
    PLAIN = "plain"
    NET = "net"
    RANGE = "range"


def cidr_separator(text: str) -> int | None:
    return find_separator(text, CIDR_SEPARATOR)


def range_separator(text: str) -> int | None:
    return find_separator(text, RANGE_SEPARATOR)


def parse_family(session: Session, opt: Opt, text: str) -> None:
    """Parse an INET|INET6 family name."""
    if session.data.test(Opt.FAMILY):
        raise session.syntax_err(
            "protocol family may not be specified multiple times"
        )

    family = FAMILY_NAMES.get(text)
    if family is None:
        raise session.syntax_err(f"unknown INET family {text}")

    session.data.set(opt, family)


def _resolve(session: Session, opt: Opt, host: str, family: Family) -> None:
    """Resolve host and store the first address of the right family."""
    try:
        infos = session.resolver.getaddrinfo(host, family)
    except socket.gaierror as e:
        if e.errno in RESOURCE_GAI_ERRORS:
            raise session.resource_err(
                f"Cannot resolve '{host}': {e.strerror}"
            ) from e
        raise session.syntax_err(
            f"cannot resolve '{host}' to an {family.label} address: {e.strerror}"
        ) from e
    except UnicodeError:
        raise session.syntax_err(
            f"cannot parse {host}: resolving to {family.label} address failed"
        ) from None

    found = 0
    for af, _socktype, _proto, _canonname, sockaddr in infos:
        if af != family.af or len(sockaddr) != SOCKADDR_LEN[family]:
            continue
        if found == 0:
            # Drop any IPv6 scope suffix
            address = IPAddress(sockaddr[0].split("%")[0])
            logger.debug(f"{host} -> {address} ({opt.value})")
            session.data.set(opt, address)
        elif found == 1:
            session.warn(
                f"{host} resolves to multiple addresses: "
                "using only the first one returned by the resolver"
            )
        found += 1

    if not found:
        raise session.syntax_err(
            f"cannot parse {host}: {family.label} address could not be resolved"
        )


def _parse_ipaddr(session: Session, opt: Opt, text: str,
                  family: Family) -> None:
    """Parse address, address/cidr or address-address."""
    cidr_opt = Opt.CIDR if opt is Opt.IP else Opt.CIDR2
    to_text = None

    pos = cidr_separator(text)
    if pos is not None:
        text, mask = split_at(text, pos)
        cidr = string_to_cidr(session, mask, 0, family.max_cidr)
        session.data.set(cidr_opt, cidr)
    else:
        pos = range_separator(text)
        if pos is not None:
            text, to_text = split_at(text, pos)
            logger.debug(f"range {text} - {to_text}")

    _resolve(session, opt, text, family)
    if to_text is not None:
        _resolve(session, Opt.IP_TO, to_text, family)


def _cidr_hostaddr(text: str, family: Family) -> bool:
    """Check for a /32 (IPv4) or /128 (IPv6) suffix."""
    pos = cidr_separator(text)
    return pos is not None and text[pos:] == f"/{family.max_cidr}"


def parse_ip_shape(session: Session, opt: Opt, text: str,
                   shape: AddrShape) -> None:
    """Parse an address after checking it has the requested shape.

    If no family was given yet, IPv4 is assumed for the rest of the
    invocation.

    Args:
        session: Parsing session
        opt: Option to store the (first) address under
        text: String to parse
        shape: Required shape of the argument
    """
    family = session.data.default_family()

    if shape is AddrShape.PLAIN:
        if range_separator(text) is not None or (
            cidr_separator(text) is not None
            and not _cidr_hostaddr(text, family)
        ):
            raise session.syntax_err(f"plain IP address must be supplied: {text}")
    elif shape is AddrShape.NET:
        if cidr_separator(text) is None or range_separator(text) is not None:
            raise session.syntax_err(f"IP/netblock must be supplied: {text}")
    elif shape is AddrShape.RANGE:
        if range_separator(text) is None or cidr_separator(text) is not None:
            raise session.syntax_err(f"IP-IP range must be supplied: {text}")

    _parse_ipaddr(session, opt, text, family)


def parse_ip(session: Session, opt: Opt, text: str) -> None:
    """Parse an address, a range or a netblock."""
    parse_ip_shape(session, opt, text, AddrShape.ANY)


def parse_single_ip(session: Session, opt: Opt, text: str) -> None:
    """Parse a single address or hostname."""
    parse_ip_shape(session, opt, text, AddrShape.PLAIN)


def parse_net(session: Session, opt: Opt, text: str) -> None:
    """Parse an address/cidr netblock."""
    parse_ip_shape(session, opt, text, AddrShape.NET)


def parse_range(session: Session, opt: Opt, text: str) -> None:
    """Parse an address-address range.

    The range always goes to IP and IP_TO, whatever opt is.
    """
    parse_ip_shape(session, Opt.IP, text, AddrShape.RANGE)


def parse_netrange(session: Session, opt: Opt, text: str) -> None:
    """Parse an address/cidr netblock or an address range."""
    if range_separator(text) is None and cidr_separator(text) is None:
        raise session.syntax_err(
            f"IP/cidr or IP-IP range must be specified: {text}"
        )
    parse_ip_shape(session, opt, text, AddrShape.ANY)


def parse_iprange(session: Session, opt: Opt, text: str) -> None:
    """Parse an address or an address range."""
    if cidr_separator(text) is not None:
        raise session.syntax_err(
            f"IP address or IP-IP range must be specified: {text}"
        )
    parse_ip_shape(session, opt, text, AddrShape.ANY)


def parse_ipnet(session: Session, opt: Opt, text: str) -> None:
    """Parse an address or an address/cidr netblock."""
    if range_separator(text) is not None:
        raise session.syntax_err(
            f"IP address or IP/cidr must be specified: {text}"
        )
    parse_ip_shape(session, opt, text, AddrShape.ANY)


def parse_ip4_single6(session: Session, opt: Opt, text: str) -> None:
    """Parse any IPv4 address shape, or a single IPv6 address."""
    family = session.data.default_family()
    if family is Family.INET:
        parse_ip(session, opt, text)
    else:
        parse_single_ip(session, opt, text)


def parse_iptimeout(session: Session, opt: Opt, text: str) -> None:
    """Parse the legacy "address,timeout" element syntax."""
    if session.data.test(Opt.TIMEOUT):
        raise session.syntax_err("mixed syntax, timeout already specified")

    pos = find_separator(text, ELEM_SEPARATOR)
    if pos is None:
        raise session.syntax_err(f"Missing separator from {text}")

    address, timeout = split_at(text, pos)
    parse_ip_shape(session, opt, address, AddrShape.ANY)
    parse_uint32(session, Opt.TIMEOUT, timeout)


def parse_netmask(session: Session, opt: Opt, text: str) -> None:
    """Parse a netmask given as prefix length, bounded by family."""
    family = session.data.default_family()
    low, high = (1, 31) if family is Family.INET else (4, 124)

    try:
        cidr = string_to_cidr(session, text, low, high)
    except IpsetSyntaxError:
        raise session.syntax_err(
            f"netmask is out of the inclusive range of {low}-{high}"
        ) from None

    session.data.set(opt, cidr)
