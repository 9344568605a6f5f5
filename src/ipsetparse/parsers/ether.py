"""
Ethernet (MAC) address parser.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re

from ipsetparse.data import ETH_ALEN, Opt
from ipsetparse.session import Session

OCTET_RE = re.compile(r"[0-9a-fA-F]{2}")


def parse_ether(session: Session, opt: Opt, text: str) -> None:
    """Parse xx:xx:xx:xx:xx:xx into six bytes.

    Every group must have exactly two hex digits.
    """
    if len(text) != ETH_ALEN * 3 - 1:
        raise session.syntax_err(f"cannot parse '{text}' as ethernet address")

    octets = []
    for i in range(ETH_ALEN):
        group = text[i * 3:i * 3 + 2]
        sep = text[i * 3 + 2:i * 3 + 3]
        if not OCTET_RE.fullmatch(group) or sep not in (":", ""):
            raise session.syntax_err(
                f"cannot parse '{text}' as ethernet address"
            )
        octets.append(int(group, 16))

    session.data.set(opt, bytes(octets))
