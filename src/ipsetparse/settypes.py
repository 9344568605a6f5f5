"""
Set type descriptors and the built-in type catalog.

A set type declares how many parts its elements have and which parser
handles each part.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from typing import Iterator

from ipsetparse.data import Family, Opt
from ipsetparse.parsers.base import Parser
from ipsetparse.parsers.address import (
    parse_ip,
    parse_ip4_single6,
    parse_ipnet,
    parse_iptimeout,
    parse_single_ip,
)
from ipsetparse.parsers.port import parse_proto_port, parse_tcp_port
from ipsetparse.parsers.ether import parse_ether
from ipsetparse.parsers.setname import parse_name_compat, parse_setname
from ipsetparse.session import Session


@dataclass(frozen=True)
class ElemSpec:
    """One part of an element: where it is stored and who parses it."""

    opt: Opt
    parser: Parser | None = None


@dataclass
class SetType:
    """Set type descriptor."""

    name: str
    dimension: int
    elems: tuple[ElemSpec, ...]
    family: Family = Family.UNSPEC
    aliases: tuple[str, ...] = ()
    compat_parse_elem: Parser | None = None
    description: str = ""

    def __post_init__(self):
        if not 1 <= self.dimension <= 3:
            raise ValueError(
                f"Set type {self.name} has dimension {self.dimension}, must be 1-3"
            )

    def supports(self, family: Family) -> bool:
        """Check if the type can be used with a family."""
        return (
            self.family is Family.UNSPEC
            or family is Family.UNSPEC
            or family is self.family
        )

    def elem_spec(self, session: Session, dim: int) -> ElemSpec:
        """Get the part declared for a position of the element.

        Raises:
            IpsetInternalError: if the type declares no such part
        """
        if not 0 <= dim < len(self.elems):
            raise session.internal_err(f"missing parser function for {self.name}")
        return self.elems[dim]

    def parse_part(self, session: Session, dim: int, text: str) -> None:
        """Parse one part of an element with the parser of its position."""
        spec = self.elem_spec(session, dim)
        if spec.parser is None:
            raise session.internal_err(f"missing parser function for {self.name}")
        spec.parser(session, spec.opt, text)


@dataclass
class TypeRegistry:
    """Catalog of set types, looked up by name or legacy alias."""

    _types: dict[str, SetType] = field(default_factory=dict)
    _aliases: dict[str, str] = field(default_factory=dict)

    def register(self, settype: SetType) -> SetType:
        """Add a type, replacing any type of the same name."""
        self._types[settype.name] = settype
        for alias in settype.aliases:
            self._aliases[alias] = settype.name
        return settype

    def get(self, name: str) -> SetType | None:
        """Get a type by canonical name."""
        return self._types.get(name)

    def resolve(self, name: str) -> SetType | None:
        """Get a type by canonical name or alias."""
        return self._types.get(name) or self._types.get(self._aliases.get(name, ""))

    def __iter__(self) -> Iterator[SetType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None


BUILTIN_TYPES = [
    SetType(
        name="bitmap:ip",
        dimension=1,
        elems=(ElemSpec(Opt.IP, parse_ip),),
        family=Family.INET,
        aliases=("ipmap",),
        description="IPv4 addresses, networks or ranges from a fixed range",
    ),
    SetType(
        name="bitmap:ip,mac",
        dimension=2,
        elems=(
            ElemSpec(Opt.IP, parse_single_ip),
            ElemSpec(Opt.ETHER, parse_ether),
        ),
        family=Family.INET,
        aliases=("macipmap",),
        description="IPv4 address and MAC address pairs",
    ),
    SetType(
        name="bitmap:port",
        dimension=1,
        elems=(ElemSpec(Opt.PORT, parse_tcp_port),),
        aliases=("portmap",),
        description="Ports or port ranges",
    ),
    SetType(
        name="hash:ip",
        dimension=1,
        elems=(ElemSpec(Opt.IP, parse_ip),),
        aliases=("iphash", "iptree", "iptreemap"),
        compat_parse_elem=parse_iptimeout,
        description="IP addresses",
    ),
    SetType(
        name="hash:net",
        dimension=1,
        elems=(ElemSpec(Opt.IP, parse_ipnet),),
        aliases=("nethash",),
        description="Network addresses",
    ),
    SetType(
        name="hash:ip,port",
        dimension=2,
        elems=(
            ElemSpec(Opt.IP, parse_ip4_single6),
            ElemSpec(Opt.PORT, parse_proto_port),
        ),
        aliases=("ipporthash",),
        description="IP address and protocol:port pairs",
    ),
    SetType(
        name="hash:net,port",
        dimension=2,
        elems=(
            ElemSpec(Opt.IP, parse_ipnet),
            ElemSpec(Opt.PORT, parse_proto_port),
        ),
        description="Network address and protocol:port pairs",
    ),
    SetType(
        name="hash:ip,port,ip",
        dimension=3,
        elems=(
            ElemSpec(Opt.IP, parse_ip4_single6),
            ElemSpec(Opt.PORT, parse_proto_port),
            ElemSpec(Opt.IP2, parse_single_ip),
        ),
        aliases=("ipportiphash",),
        description="IP address, protocol:port and IP address triples",
    ),
    SetType(
        name="hash:ip,port,net",
        dimension=3,
        elems=(
            ElemSpec(Opt.IP, parse_ip4_single6),
            ElemSpec(Opt.PORT, parse_proto_port),
            ElemSpec(Opt.IP2, parse_ipnet),
        ),
        aliases=("ipportnethash",),
        description="IP address, protocol:port and network address triples",
    ),
    SetType(
        name="list:set",
        dimension=1,
        elems=(ElemSpec(Opt.NAME, parse_setname),),
        aliases=("setlist",),
        compat_parse_elem=parse_name_compat,
        description="Set names",
    ),
]


def default_registry() -> TypeRegistry:
    """Build a registry holding the built-in types."""
    registry = TypeRegistry()
    for settype in BUILTIN_TYPES:
        registry.register(settype)
    return registry
