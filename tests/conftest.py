"""Shared fixtures: a session wired to an in-memory resolver."""

import socket

import pytest

from ipsetparse.data import Family
from ipsetparse.session import Session


class FakeResolver:
    """Resolver answering from dictionaries instead of the system."""

    SERVICES = {
        ("ftp", "tcp"): 21,
        ("ssh", "tcp"): 22,
        ("domain", "tcp"): 53,
        ("domain", "udp"): 53,
        ("http", "tcp"): 80,
        ("https", "tcp"): 443,
    }

    PROTOCOLS = {
        "ip": 0,
        "icmp": 1,
        "tcp": 6,
        "udp": 17,
        "gre": 47,
        "ipv6-icmp": 58,
    }

    def __init__(self, hosts: dict[str, list[str]] | None = None):
        self.hosts = hosts or {}
        self.lookups: list[str] = []

    def getaddrinfo(self, host, family):
        self.lookups.append(host)
        infos = []
        for address in self.hosts.get(host, [host]):
            for af, sockaddr in (
                (socket.AF_INET, (address, 0)),
                (socket.AF_INET6, (address, 0, 0, 0)),
            ):
                try:
                    socket.inet_pton(af, address)
                except OSError:
                    continue
                if family is Family.UNSPEC or af == family.af:
                    infos.append((af, socket.SOCK_RAW, 0, "", sockaddr))
        if not infos:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        return infos

    def service_port(self, name, proto):
        return self.SERVICES.get((name, proto.lower()))

    def protocol_number(self, name):
        return self.PROTOCOLS.get(name.lower())


@pytest.fixture
def resolver():
    return FakeResolver(hosts={
        "gw.example": ["192.0.2.1"],
        "multi.example": ["192.0.2.10", "192.0.2.11", "2001:db8::10"],
        "v6.example": ["2001:db8::1"],
    })


@pytest.fixture
def session(resolver):
    return Session(resolver=resolver)


@pytest.fixture
def session4(resolver):
    return Session(resolver=resolver, family=Family.INET)


@pytest.fixture
def session6(resolver):
    return Session(resolver=resolver, family=Family.INET6)
