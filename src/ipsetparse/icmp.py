"""
ICMP and ICMPv6 symbolic type/code names.

Values are packed as type << 8 | code.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


def _pack(icmp_type: int, code: int) -> int:
    return (icmp_type << 8) | code


ICMP_TYPECODES: dict[str, int] = {
    "echo-reply": _pack(0, 0),
    "pong": _pack(0, 0),
    "network-unreachable": _pack(3, 0),
    "host-unreachable": _pack(3, 1),
    "protocol-unreachable": _pack(3, 2),
    "port-unreachable": _pack(3, 3),
    "fragmentation-needed": _pack(3, 4),
    "source-route-failed": _pack(3, 5),
    "network-unknown": _pack(3, 6),
    "host-unknown": _pack(3, 7),
    "network-prohibited": _pack(3, 9),
    "host-prohibited": _pack(3, 10),
    "tos-network-unreachable": _pack(3, 11),
    "tos-host-unreachable": _pack(3, 12),
    "communication-prohibited": _pack(3, 13),
    "host-precedence-violation": _pack(3, 14),
    "precedence-cutoff": _pack(3, 15),
    "source-quench": _pack(4, 0),
    "network-redirect": _pack(5, 0),
    "host-redirect": _pack(5, 1),
    "tos-network-redirect": _pack(5, 2),
    "tos-host-redirect": _pack(5, 3),
    "echo-request": _pack(8, 0),
    "ping": _pack(8, 0),
    "router-advertisement": _pack(9, 0),
    "router-solicitation": _pack(10, 0),
    "ttl-zero-during-transit": _pack(11, 0),
    "ttl-zero-during-reassembly": _pack(11, 1),
    "ip-header-bad": _pack(12, 0),
    "required-option-missing": _pack(12, 1),
    "timestamp-request": _pack(13, 0),
    "timestamp-reply": _pack(14, 0),
    "address-mask-request": _pack(17, 0),
    "address-mask-reply": _pack(18, 0),
}

ICMPV6_TYPECODES: dict[str, int] = {
    "no-route": _pack(1, 0),
    "communication-prohibited": _pack(1, 1),
    "address-unreachable": _pack(1, 3),
    "port-unreachable": _pack(1, 4),
    "packet-too-big": _pack(2, 0),
    "ttl-zero-during-transit": _pack(3, 0),
    "ttl-zero-during-reassembly": _pack(3, 1),
    "bad-header": _pack(4, 0),
    "unknown-header-type": _pack(4, 1),
    "unknown-option": _pack(4, 2),
    "echo-request": _pack(128, 0),
    "ping": _pack(128, 0),
    "echo-reply": _pack(129, 0),
    "pong": _pack(129, 0),
    "router-solicitation": _pack(133, 0),
    "router-advertisement": _pack(134, 0),
    "neighbour-solicitation": _pack(135, 0),
    "neighbor-solicitation": _pack(135, 0),
    "neighbour-advertisement": _pack(136, 0),
    "neighbor-advertisement": _pack(136, 0),
    "redirect": _pack(137, 0),
}


def name_to_icmp(name: str) -> int | None:
    """Get the packed ICMP type/code for a name (case-insensitive)."""
    return ICMP_TYPECODES.get(name.lower())


def name_to_icmpv6(name: str) -> int | None:
    """Get the packed ICMPv6 type/code for a name (case-insensitive)."""
    return ICMPV6_TYPECODES.get(name.lower())
