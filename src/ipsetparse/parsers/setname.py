"""
Set name, set reference and set type name parsers.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging

from ipsetparse.data import ELEM_SEPARATOR, IPSET_MAXNAMELEN, Family, Opt
from ipsetparse.parsers.base import find_separator, split_at
from ipsetparse.session import Session

logger = logging.getLogger(__name__)


def check_setname(session: Session, text: str) -> None:
    """Refuse names that do not fit IPSET_MAXNAMELEN."""
    if len(text) > IPSET_MAXNAMELEN - 1:
        raise session.syntax_err(
            f"setname '{text}' is longer than {IPSET_MAXNAMELEN - 1} characters"
        )


def _check_nameref(session: Session) -> None:
    if session.data.test(Opt.NAMEREF):
        raise session.syntax_err(
            "mixed syntax, before|after option already used"
        )


def parse_setname(session: Session, opt: Opt, text: str) -> None:
    """Parse a set name."""
    check_setname(session, text)
    session.data.set(opt, text)


def parse_name_compat(session: Session, opt: Opt, text: str) -> None:
    """Parse a set name element, with the legacy reference syntax.

    Accepts "setname" and "setname,before|after,setname".
    """
    _check_nameref(session)

    name, direction, ref = text, None, None
    pos = find_separator(text, ELEM_SEPARATOR)
    if pos is not None:
        name, rest = split_at(text, pos)
        pos = find_separator(rest, ELEM_SEPARATOR)
        if pos is not None:
            direction, ref = split_at(rest, pos)
        if ref is None or direction not in ("before", "after"):
            raise session.syntax_err(
                f"you must specify elements as "
                f"setname{ELEM_SEPARATOR}[before|after]{ELEM_SEPARATOR}setname"
            )

    check_setname(session, name)
    session.data.set(opt, name)
    if ref is None:
        return

    check_setname(session, ref)
    session.data.set(Opt.NAMEREF, ref)
    if direction == "before":
        session.data.set(Opt.BEFORE, True)


def parse_before(session: Session, opt: Opt, text: str) -> None:
    """Parse the set name an element is placed before."""
    _check_nameref(session)
    check_setname(session, text)
    session.data.set(Opt.BEFORE, True)
    session.data.set(opt, text)


def parse_after(session: Session, opt: Opt, text: str) -> None:
    """Parse the set name an element is placed after."""
    _check_nameref(session)
    check_setname(session, text)
    session.data.set(opt, text)


def parse_typename(session: Session, opt: Opt, text: str) -> None:
    """Look up a set type by name or legacy alias.

    Stores the canonical name under TYPENAME and the descriptor
    under TYPE. A single-family type fixes an unspecified family.
    """
    if len(text) > IPSET_MAXNAMELEN - 1:
        raise session.syntax_err(
            f"typename '{text}' is longer than {IPSET_MAXNAMELEN - 1} characters"
        )

    settype = session.types.resolve(text)
    if settype is None:
        raise session.syntax_err(f"typename '{text}' is unknown")
    session.data.set(Opt.TYPENAME, settype.name)

    family = session.data.family
    if not settype.supports(family):
        raise session.syntax_err(
            f"settype {settype.name} does not support family {family.value}"
        )
    if family is Family.UNSPEC and settype.family is not Family.UNSPEC:
        session.data.set(Opt.FAMILY, settype.family)

    logger.debug(f"typename {text} resolved to {settype.name}")
    session.data.set(Opt.TYPE, settype)
