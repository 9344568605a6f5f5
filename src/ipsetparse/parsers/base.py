"""
Separator scanning, number parsing and generic option parsers.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import re
from typing import Callable

from ipsetparse.data import Opt
from ipsetparse.session import OutputMode, Session

logger = logging.getLogger(__name__)

ULLONG_MAX = 2**64 - 1

# Integral literal: optional sign, then hex, octal or decimal digits
NUMBER_RE = re.compile(
    r"\s*(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)

Parser = Callable[[Session, Opt, str], None]


def find_separator(text: str, separators: str) -> int | None:
    """Find a separator inside text.

    The separators are tried in order. The first occurrence of a
    separator is returned, unless the string starts or ends with that
    separator character.

    Args:
        text: String to scan
        separators: Candidate separator characters

    Returns:
        Index of the separator, or None
    """
    if not text:
        return None
    for sep in separators:
        pos = text.find(sep)
        if pos >= 0 and text[0] != sep and text[-1] != sep:
            return pos
    return None


def split_at(text: str, pos: int) -> tuple[str, str]:
    """Split text around the separator at pos."""
    return text[:pos], text[pos + 1:]


def string_to_number(session: Session, text: str, min_value: int,
                     max_value: int) -> int:
    """Parse an unsigned integer in decimal, hex or octal notation.

    A max_value of 0 means the full 64-bit range.

    Raises:
        IpsetSyntaxError: if text is not a number or out of range
    """
    upper = max_value or ULLONG_MAX
    match = NUMBER_RE.fullmatch(text)
    if not match:
        raise session.syntax_err(f"'{text}' is invalid as number")

    if match.group("hex") is not None:
        number = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        number = int(match.group("oct"), 8)
    else:
        number = int(match.group("dec"), 10)

    if number > ULLONG_MAX:
        raise session.syntax_err(
            f"'{text}' is out of range {min_value}-{upper}"
        )
    if match.group("sign") == "-":
        # Negative values wrap around to huge unsigned ones
        number = (ULLONG_MAX + 1 - number) & ULLONG_MAX

    if not min_value <= number <= upper:
        raise session.syntax_err(
            f"'{text}' is out of range {min_value}-{upper}"
        )
    return number


def string_to_u8(session: Session, text: str) -> int:
    return string_to_number(session, text, 0, 0xFF)


def string_to_u16(session: Session, text: str) -> int:
    return string_to_number(session, text, 0, 0xFFFF)


def string_to_u32(session: Session, text: str) -> int:
    return string_to_number(session, text, 0, 0xFFFFFFFF)


def string_to_cidr(session: Session, text: str, low: int, high: int) -> int:
    """Parse a prefix length in the inclusive range low-high."""
    cidr = string_to_u8(session, text)
    if not low <= cidr <= high:
        raise session.syntax_err(f"'{text}' is out of range {low}-{high}")
    return cidr


def parse_uint8(session: Session, opt: Opt, text: str) -> None:
    """Parse text as an 8-bit unsigned integer."""
    session.data.set(opt, string_to_u8(session, text))


def parse_uint16(session: Session, opt: Opt, text: str) -> None:
    """Parse text as a 16-bit unsigned integer."""
    session.data.set(opt, string_to_u16(session, text))


def parse_uint32(session: Session, opt: Opt, text: str) -> None:
    """Parse text as a 32-bit unsigned integer."""
    session.data.set(opt, string_to_u32(session, text))


def parse_flag(session: Session, opt: Opt, text: str = "") -> None:
    """Record a presence-only option."""
    session.data.set(opt, True)


def parse_output(session: Session, opt: Opt | None, text: str) -> None:
    """Parse an output mode name and switch the session to it."""
    try:
        session.output_mode = OutputMode(text)
    except ValueError:
        raise session.syntax_err(f"unknown output mode '{text}'") from None


def parse_ignored(session: Session, opt: Opt, text: str) -> None:
    """Accept a deprecated option, warning once per option."""
    if not session.data.ignored(opt):
        session.warn(f"Option {text} is ignored. Please upgrade your syntax.")


def call_parser(session: Session, parser: Parser, optstr: str, opt: Opt,
                text: str) -> None:
    """Run a parser for a command line option.

    An option that was already specified is refused. Ignored options
    get the option name instead of the argument, for the warning.
    """
    if session.data.test(opt):
        raise session.syntax_err(f"{optstr} already specified")

    logger.debug(f"{optstr}: {text}")
    parser(session, opt, optstr if parser is parse_ignored else text)
