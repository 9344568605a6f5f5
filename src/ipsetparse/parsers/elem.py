"""
Composite element parser.

An element has one to three comma separated parts, as declared by the
dimension of the set type; each part goes to the parser the type
registers for that position.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging

from ipsetparse.data import ELEM_SEPARATOR, Opt
from ipsetparse.parsers.base import find_separator, split_at
from ipsetparse.session import Session

logger = logging.getLogger(__name__)

DIM_ONE = 0
DIM_TWO = 1
DIM_THREE = 2


def elem_separator(text: str | None) -> int | None:
    if text is None:
        return None
    return find_separator(text, ELEM_SEPARATOR)


def parse_elem(session: Session, optional: bool, text: str) -> None:
    """Parse a (multipart) element according to the session's set type.

    Args:
        session: Parsing session, with the set type already resolved
        optional: Trailing parts may be omitted
        text: Element to parse

    Raises:
        IpsetSyntaxError: if the element does not match the type
        IpsetInternalError: if no set type is known or a part parser is missing
    """
    settype = session.data.get(Opt.TYPE)
    if settype is None:
        raise session.internal_err("set type is unknown!")

    first, second, third = text, None, None

    pos = elem_separator(text)
    if settype.dimension > 1:
        if pos is not None:
            first, second = split_at(text, pos)
        elif not optional:
            raise session.syntax_err(f"Second element is missing from {text}.")
    elif pos is not None:
        if settype.compat_parse_elem is not None:
            logger.debug(f"legacy syntax for {settype.name}: {text}")
            spec = settype.elem_spec(session, DIM_ONE)
            settype.compat_parse_elem(session, spec.opt, text)
            return
        raise session.syntax_err(
            f"Elem separator in {text}, but settype {settype.name} supports none."
        )

    pos = elem_separator(second)
    if settype.dimension > 2:
        if pos is not None:
            second, third = split_at(second, pos)
        elif not optional:
            raise session.syntax_err(f"Third element is missing from {text}.")
    elif pos is not None:
        raise session.syntax_err(
            f"Two elem separators in {text}, but settype {settype.name} supports one."
        )
    if elem_separator(third) is not None:
        raise session.syntax_err(
            f"Three elem separators in {text}, but settype {settype.name} supports two."
        )

    logger.debug(f"parse elem part one: {first}")
    settype.parse_part(session, DIM_ONE, first)

    if settype.dimension > 1 and second is not None:
        logger.debug(f"parse elem part two: {second}")
        settype.parse_part(session, DIM_TWO, second)
    if settype.dimension > 2 and third is not None:
        logger.debug(f"parse elem part three: {third}")
        settype.parse_part(session, DIM_THREE, third)
