"""
Port, protocol and ICMP type/code parsers.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import socket

from ipsetparse.data import (
    CIDR_SEPARATOR,
    PROTO_SEPARATOR,
    RANGE_SEPARATOR,
    Family,
    Opt,
)
from ipsetparse.errors import IpsetSyntaxError
from ipsetparse.icmp import name_to_icmp, name_to_icmpv6
from ipsetparse.parsers.base import (
    find_separator,
    split_at,
    string_to_u8,
    string_to_u16,
)
from ipsetparse.session import Session

logger = logging.getLogger(__name__)

IPPROTO_ICMP = socket.IPPROTO_ICMP
IPPROTO_TCP = socket.IPPROTO_TCP
IPPROTO_UDP = socket.IPPROTO_UDP
IPPROTO_ICMPV6 = 58


def parse_port(session: Session, opt: Opt, text: str, proto: str) -> None:
    """Parse a single port number or service name.

    Args:
        session: Parsing session
        opt: PORT or PORT_TO
        text: Port number or service name
        proto: Protocol whose service names are looked up
    """
    try:
        port = string_to_u16(session, text)
    except IpsetSyntaxError:
        port = session.resolver.service_port(text, proto)
        if port is None:
            raise session.syntax_err(
                f"cannot parse '{text}' as a {proto} port"
            ) from None

    session.data.set(opt, port)
    # The numeric attempt may have left a stale report behind
    session.report_reset()


def parse_tcpudp_port(session: Session, opt: Opt, text: str,
                      proto: str) -> None:
    """Parse a port or a port-port range of TCP/UDP ports."""
    pos = find_separator(text, RANGE_SEPARATOR)
    if pos is not None:
        text, to_text = split_at(text, pos)
        parse_port(session, Opt.PORT_TO, to_text, proto)
    parse_port(session, opt, text, proto)


def parse_tcp_port(session: Session, opt: Opt, text: str) -> None:
    """Parse a TCP port or port range."""
    parse_tcpudp_port(session, opt, text, "TCP")


def parse_single_tcp_port(session: Session, opt: Opt, text: str) -> None:
    """Parse a single TCP port."""
    parse_port(session, opt, text, "TCP")


def parse_proto(session: Session, opt: Opt, text: str) -> None:
    """Parse a protocol name into its number."""
    name = "ipv6-icmp" if text.lower() == "icmpv6" else text
    proto = session.resolver.protocol_number(name)
    if proto is None:
        raise session.syntax_err(f"cannot parse '{text}' as a protocol name")
    if not proto:
        raise session.syntax_err(f"Unsupported protocol '{text}'")

    session.data.set(opt, proto)


def _parse_icmp_typecode(session: Session, opt: Opt, text: str,
                         label: str) -> None:
    """Parse type/code numbers into a packed type << 8 | code."""
    pos = find_separator(text, CIDR_SEPARATOR)
    if pos is None:
        raise session.syntax_err(f"Cannot parse {text} as an {label} type/code.")

    type_text, code_text = split_at(text, pos)
    icmp_type = string_to_u8(session, type_text)
    code = string_to_u8(session, code_text)
    session.data.set(opt, (icmp_type << 8) | code)


def parse_icmp(session: Session, opt: Opt, text: str) -> None:
    """Parse an ICMP name or type/code."""
    typecode = name_to_icmp(text)
    if typecode is None:
        _parse_icmp_typecode(session, opt, text, "ICMP")
    else:
        session.data.set(opt, typecode)


def parse_icmpv6(session: Session, opt: Opt, text: str) -> None:
    """Parse an ICMPv6 name or type/code."""
    typecode = name_to_icmpv6(text)
    if typecode is None:
        _parse_icmp_typecode(session, opt, text, "ICMPv6")
    else:
        session.data.set(opt, typecode)


def parse_proto_port(session: Session, opt: Opt, text: str) -> None:
    """Parse an optional protocol and a port, separated by a colon.

    Without a protocol TCP is assumed. TCP and UDP take a port or
    port range, ICMP/ICMPv6 a name or type/code matching the session
    family, and every other protocol the pseudo port 0 only.
    """
    data = session.data

    pos = find_separator(text, PROTO_SEPARATOR)
    if pos is None:
        data.set(Opt.PROTO, IPPROTO_TCP)
        parse_tcpudp_port(session, opt, text, "TCP")
        return

    proto_text, port_text = split_at(text, pos)
    family = data.family
    parse_proto(session, Opt.PROTO, proto_text)
    proto = data.get(Opt.PROTO)
    logger.debug(f"protocol {proto_text} ({proto}), port {port_text}")

    if proto in (IPPROTO_TCP, IPPROTO_UDP):
        parse_tcpudp_port(session, opt, port_text, proto_text)
    elif proto == IPPROTO_ICMP:
        if family is not Family.INET:
            raise session.syntax_err(
                "Protocol ICMP can be used with family INET only"
            )
        parse_icmp(session, opt, port_text)
    elif proto == IPPROTO_ICMPV6:
        if family is not Family.INET6:
            raise session.syntax_err(
                "Protocol ICMPv6 can be used with family INET6 only"
            )
        parse_icmpv6(session, opt, port_text)
    else:
        if port_text != "0":
            raise session.syntax_err(
                f"Protocol {proto_text} can be used with pseudo port value 0 only."
            )
        data.flag_set(opt)
