"""
Command line front end.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typing import Any
from xml.sax.saxutils import escape

import click
from netaddr import IPAddress
from rich.console import Console
from rich.markup import escape as markup_escape
from rich.table import Table

from ipsetparse.config import get_config
from ipsetparse.data import Family, Opt
from ipsetparse.errors import IpsetError
from ipsetparse.logging_config import configure_logging, get_logger
from ipsetparse.parsers import (
    call_parser,
    parse_elem,
    parse_ether,
    parse_family,
    parse_icmp,
    parse_icmpv6,
    parse_ip,
    parse_ipnet,
    parse_iprange,
    parse_net,
    parse_netmask,
    parse_netrange,
    parse_output,
    parse_proto,
    parse_proto_port,
    parse_range,
    parse_setname,
    parse_single_ip,
    parse_tcp_port,
    parse_typename,
    parse_uint8,
    parse_uint32,
)
from ipsetparse.session import OutputMode, Session
from ipsetparse.settypes import SetType, default_registry

logger = get_logger(__name__)

console = Console()

# kind -> (parser, option)
VALUE_PARSERS = {
    "ip": (parse_ip, Opt.IP),
    "single-ip": (parse_single_ip, Opt.IP),
    "net": (parse_net, Opt.IP),
    "range": (parse_range, Opt.IP),
    "netrange": (parse_netrange, Opt.IP),
    "iprange": (parse_iprange, Opt.IP),
    "ipnet": (parse_ipnet, Opt.IP),
    "port": (parse_tcp_port, Opt.PORT),
    "proto": (parse_proto, Opt.PROTO),
    "proto-port": (parse_proto_port, Opt.PORT),
    "icmp": (parse_icmp, Opt.PORT),
    "icmpv6": (parse_icmpv6, Opt.PORT),
    "ether": (parse_ether, Opt.ETHER),
    "setname": (parse_setname, Opt.SETNAME),
    "netmask": (parse_netmask, Opt.NETMASK),
    "timeout": (parse_uint32, Opt.TIMEOUT),
    "hashsize": (parse_uint32, Opt.HASHSIZE),
    "maxelem": (parse_uint32, Opt.MAXELEM),
    "probes": (parse_uint8, Opt.PROBES),
    "resize": (parse_uint8, Opt.RESIZE),
}


def format_value(value: Any) -> str:
    """Render a parsed value for display."""
    if isinstance(value, SetType):
        return value.name
    if isinstance(value, Family):
        return value.value
    if isinstance(value, bytes):
        return ":".join(f"{b:02x}" for b in value)
    if isinstance(value, IPAddress):
        return str(value)
    if value is True:
        return "yes"
    return str(value)


def _new_session(ctx: click.Context) -> Session:
    session = Session()
    family = ctx.obj.get("family")
    if family:
        call_parser(session, parse_family, "family", Opt.FAMILY, family)
    parse_output(session, None, ctx.obj.get("output", "plain"))
    return session


def _print_session(session: Session, title: str) -> None:
    for warning in session.warnings:
        console.print(f"[yellow]Warning:[/yellow] {markup_escape(warning)}")

    values = {key: format_value(val) for key, val in session.data.as_dict().items()}

    if session.output_mode is OutputMode.SAVE:
        console.print(" ".join(f"{key} {val}" for key, val in values.items()),
                      highlight=False)
    elif session.output_mode is OutputMode.XML:
        body = "".join(f"<{key}>{escape(val)}</{key}>" for key, val in values.items())
        console.print(f"<elem>{body}</elem>", highlight=False, markup=False)
    else:
        table = Table(title=title, show_header=False, box=None)
        table.add_column("Option", style="cyan")
        table.add_column("Value", style="white")
        for key, val in values.items():
            table.add_row(key, val)
        console.print(table)


@click.group()
@click.option("--family", "-f", default=None,
              help="Address family: inet, inet6, ipv4, ipv6, -4, -6")
@click.option("--output", "-o", default=None,
              help="Output mode: plain, save or xml")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, family: str | None, output: str | None, debug: bool):
    """Parse and validate ipset elements and option values."""
    config = get_config()
    configure_logging(debug=debug, log_file=config.log_file or None,
                      level=config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["family"] = family or config.family
    ctx.obj["output"] = output or config.output_mode


@main.command("types")
def list_types():
    """List the known set types."""
    table = Table(title="Set Types")
    table.add_column("Type", style="cyan")
    table.add_column("Dimension", justify="right")
    table.add_column("Family")
    table.add_column("Aliases", style="dim")
    table.add_column("Description")

    for settype in default_registry():
        table.add_row(
            settype.name,
            str(settype.dimension),
            settype.family.value,
            ", ".join(settype.aliases),
            settype.description,
        )

    console.print(table)


@main.command("elem")
@click.argument("typename")
@click.argument("element")
@click.option("--optional", is_flag=True,
              help="Allow trailing element parts to be omitted")
@click.pass_context
def elem(ctx: click.Context, typename: str, element: str, optional: bool):
    """Parse ELEMENT as an element of a TYPENAME set.

    Examples:
        ipsetparse elem hash:ip,port 192.168.1.1,udp:53
        ipsetparse elem list:set setA,before,setB
        ipsetparse -f inet6 elem hash:ip,port 2001:db8::1,icmpv6:ping
    """
    try:
        session = _new_session(ctx)
        parse_typename(session, Opt.TYPENAME, typename)
        parse_elem(session, optional, element)
    except IpsetError as e:
        console.print(f"[red]Error:[/red] {markup_escape(str(e))}")
        raise SystemExit(1)

    _print_session(session, f"{typename} element: {element}")


@main.command("value")
@click.argument("kind", type=click.Choice(sorted(VALUE_PARSERS)))
@click.argument("text")
@click.pass_context
def value(ctx: click.Context, kind: str, text: str):
    """Parse TEXT as a single value of KIND.

    Examples:
        ipsetparse value net 10.0.0.0/8
        ipsetparse value port 1024-2048
        ipsetparse value ether 00:11:22:33:44:55
    """
    parser, opt = VALUE_PARSERS[kind]
    try:
        session = _new_session(ctx)
        call_parser(session, parser, kind, opt, text)
    except IpsetError as e:
        console.print(f"[red]Error:[/red] {markup_escape(str(e))}")
        raise SystemExit(1)

    logger.debug(f"parsed {kind} {text}")
    _print_session(session, f"{kind}: {text}")
