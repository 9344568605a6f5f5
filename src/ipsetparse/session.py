"""
Parsing session: option store, error report and warning channel.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from enum import Enum
from typing import Any

from ipsetparse.data import Family, Opt, SessionData
from ipsetparse.errors import (
    IpsetInternalError,
    IpsetResourceError,
    IpsetSyntaxError,
)
from ipsetparse.resolver import SystemResolver

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    """Listing output formats."""

    PLAIN = "plain"
    XML = "xml"
    SAVE = "save"


class Session:
    """State shared by the parsers during one command invocation.

    Usage:
        session = Session()
        parse_elem(session, False, "10.0.0.1,tcp:80")
        session.data.get(Opt.PORT)
    """

    def __init__(
        self,
        resolver: Any | None = None,
        types: Any | None = None,
        family: Family | str | None = None,
    ):
        self.data = SessionData()
        self.resolver = resolver or SystemResolver()
        if types is None:
            from ipsetparse.settypes import default_registry
            types = default_registry()
        self.types = types
        self.output_mode = OutputMode.PLAIN
        self.errmsg: str | None = None
        self.warnings: list[str] = []
        if family:
            self.data.set(Opt.FAMILY, Family(family))

    def syntax_err(self, message: str) -> IpsetSyntaxError:
        """Record a syntax error and return the exception to raise."""
        self.errmsg = f"Syntax error: {message}"
        logger.debug(self.errmsg)
        return IpsetSyntaxError(self.errmsg)

    def internal_err(self, message: str) -> IpsetInternalError:
        """Record an internal error and return the exception to raise."""
        self.errmsg = f"Internal error: {message}"
        logger.error(self.errmsg)
        return IpsetInternalError(self.errmsg)

    def resource_err(self, message: str) -> IpsetResourceError:
        """Record a resource error and return the exception to raise."""
        self.errmsg = message
        logger.error(message)
        return IpsetResourceError(message)

    def warn(self, message: str) -> None:
        """Record a non-fatal warning."""
        self.warnings.append(message)
        logger.warning(message)

    def report_reset(self) -> None:
        """Drop the current error report."""
        self.errmsg = None

    def reset(self) -> None:
        """Prepare the session for the next invocation."""
        self.data.reset()
        self.report_reset()
        self.warnings.clear()
