"""
Exceptions raised by the parsers.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class IpsetError(Exception):
    """Base exception for parse failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IpsetSyntaxError(IpsetError):
    """Malformed or inconsistent user input."""
    pass


class IpsetResourceError(IpsetError):
    """A system facility needed for parsing failed."""
    pass


class IpsetInternalError(IpsetError):
    """Misconfigured set type or missing session state."""
    pass
