"""
Value parsers.

Every parser takes (session, opt, text), stores what it parsed in
session.data and raises an IpsetError subclass on failure.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from ipsetparse.parsers.base import (
    Parser,
    call_parser,
    find_separator,
    parse_flag,
    parse_ignored,
    parse_output,
    parse_uint8,
    parse_uint16,
    parse_uint32,
    string_to_cidr,
    string_to_number,
    string_to_u8,
    string_to_u16,
    string_to_u32,
)
from ipsetparse.parsers.address import (
    AddrShape,
    parse_family,
    parse_ip,
    parse_ip_shape,
    parse_ip4_single6,
    parse_ipnet,
    parse_iprange,
    parse_iptimeout,
    parse_net,
    parse_netmask,
    parse_netrange,
    parse_range,
    parse_single_ip,
)
from ipsetparse.parsers.port import (
    parse_icmp,
    parse_icmpv6,
    parse_port,
    parse_proto,
    parse_proto_port,
    parse_single_tcp_port,
    parse_tcp_port,
    parse_tcpudp_port,
)
from ipsetparse.parsers.ether import parse_ether
from ipsetparse.parsers.setname import (
    parse_after,
    parse_before,
    parse_name_compat,
    parse_setname,
    parse_typename,
)
from ipsetparse.parsers.elem import parse_elem

__all__ = [
    "Parser",
    "AddrShape",
    "call_parser",
    "find_separator",
    "string_to_number",
    "string_to_u8",
    "string_to_u16",
    "string_to_u32",
    "string_to_cidr",
    "parse_flag",
    "parse_ignored",
    "parse_output",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "parse_family",
    "parse_ip",
    "parse_ip_shape",
    "parse_ip4_single6",
    "parse_ipnet",
    "parse_iprange",
    "parse_iptimeout",
    "parse_net",
    "parse_netmask",
    "parse_netrange",
    "parse_range",
    "parse_single_ip",
    "parse_icmp",
    "parse_icmpv6",
    "parse_port",
    "parse_proto",
    "parse_proto_port",
    "parse_single_tcp_port",
    "parse_tcp_port",
    "parse_tcpudp_port",
    "parse_ether",
    "parse_after",
    "parse_before",
    "parse_name_compat",
    "parse_setname",
    "parse_typename",
    "parse_elem",
]
