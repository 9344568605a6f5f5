"""Tests for the composite element parser."""

import pytest
from netaddr import IPAddress

from ipsetparse.data import Family, Opt
from ipsetparse.errors import IpsetInternalError, IpsetSyntaxError
from ipsetparse.parsers.elem import parse_elem
from ipsetparse.parsers.setname import parse_setname, parse_typename
from ipsetparse.settypes import ElemSpec, SetType


def recording(calls, parser):
    def parse(session, opt, text):
        calls.append((opt, text))
        parser(session, opt, text)
    return parse


@pytest.fixture
def calls():
    return []


@pytest.fixture
def pair_type(calls):
    return SetType(
        name="test:pair",
        dimension=2,
        elems=(
            ElemSpec(Opt.NAME, recording(calls, parse_setname)),
            ElemSpec(Opt.SETNAME2, recording(calls, parse_setname)),
        ),
    )


@pytest.fixture
def triple_type(calls):
    return SetType(
        name="test:triple",
        dimension=3,
        elems=(
            ElemSpec(Opt.NAME, recording(calls, parse_setname)),
            ElemSpec(Opt.SETNAME2, recording(calls, parse_setname)),
            ElemSpec(Opt.NAMEREF, recording(calls, parse_setname)),
        ),
    )


@pytest.fixture
def single_type(calls):
    return SetType(
        name="test:single",
        dimension=1,
        elems=(ElemSpec(Opt.NAME, recording(calls, parse_setname)),),
    )


class TestDimensions:

    def test_two_parts_in_order(self, session, pair_type, calls):
        session.data.set(Opt.TYPE, pair_type)
        parse_elem(session, False, "setA,setB")
        assert calls == [(Opt.NAME, "setA"), (Opt.SETNAME2, "setB")]
        assert session.data.get(Opt.SETNAME2) == "setB"

    def test_second_part_missing(self, session, pair_type, calls):
        session.data.set(Opt.TYPE, pair_type)
        with pytest.raises(IpsetSyntaxError, match="Second element is missing from setA."):
            parse_elem(session, False, "setA")
        assert calls == []

    def test_second_part_optional(self, session, pair_type, calls):
        session.data.set(Opt.TYPE, pair_type)
        parse_elem(session, True, "setA")
        assert calls == [(Opt.NAME, "setA")]
        assert not session.data.test(Opt.SETNAME2)

    def test_too_many_parts_for_two(self, session, pair_type):
        session.data.set(Opt.TYPE, pair_type)
        with pytest.raises(IpsetSyntaxError,
                           match="Two elem separators in a,b,c, but settype test:pair supports one."):
            parse_elem(session, False, "a,b,c")

    def test_three_parts(self, session, triple_type, calls):
        session.data.set(Opt.TYPE, triple_type)
        parse_elem(session, False, "a,b,c")
        assert [text for _, text in calls] == ["a", "b", "c"]

    def test_third_part_missing(self, session, triple_type):
        session.data.set(Opt.TYPE, triple_type)
        with pytest.raises(IpsetSyntaxError, match="Third element is missing from a,b."):
            parse_elem(session, False, "a,b")

    def test_third_part_optional(self, session, triple_type, calls):
        session.data.set(Opt.TYPE, triple_type)
        parse_elem(session, True, "a,b")
        assert [text for _, text in calls] == ["a", "b"]

    def test_too_many_parts_for_three(self, session, triple_type):
        session.data.set(Opt.TYPE, triple_type)
        with pytest.raises(IpsetSyntaxError, match="Three elem separators in a,b,c,d"):
            parse_elem(session, False, "a,b,c,d")

    def test_separator_in_single_part_type(self, session, single_type):
        session.data.set(Opt.TYPE, single_type)
        with pytest.raises(IpsetSyntaxError,
                           match="Elem separator in a,b, but settype test:single supports none."):
            parse_elem(session, False, "a,b")

    def test_edge_separators_are_not_split(self, session, single_type, calls):
        session.data.set(Opt.TYPE, single_type)
        parse_elem(session, False, "setA,")
        assert calls == [(Opt.NAME, "setA,")]

    def test_first_failure_stops_parsing(self, session, pair_type, calls):
        session.data.set(Opt.TYPE, pair_type)
        with pytest.raises(IpsetSyntaxError, match="is longer than"):
            parse_elem(session, False, "x" * 40 + ",setB")
        assert len(calls) == 1
        assert not session.data.test(Opt.SETNAME2)


class TestInternalErrors:

    def test_no_type(self, session):
        with pytest.raises(IpsetInternalError, match="set type is unknown!"):
            parse_elem(session, False, "10.0.0.1")

    def test_missing_parser(self, session):
        broken = SetType(
            name="test:broken",
            dimension=2,
            elems=(ElemSpec(Opt.NAME, parse_setname), ElemSpec(Opt.SETNAME2, None)),
        )
        session.data.set(Opt.TYPE, broken)
        with pytest.raises(IpsetInternalError,
                           match="missing parser function for test:broken"):
            parse_elem(session, False, "setA,setB")
        assert session.errmsg.startswith("Internal error:")

    def test_legacy_syntax_without_parts(self, session):
        calls = []
        broken = SetType(
            name="test:legacy",
            dimension=1,
            elems=(),
            compat_parse_elem=recording(calls, parse_setname),
        )
        session.data.set(Opt.TYPE, broken)
        with pytest.raises(IpsetInternalError,
                           match="missing parser function for test:legacy"):
            parse_elem(session, False, "setA,before,setB")
        assert calls == []

    def test_internal_error_is_not_a_syntax_error(self, session):
        assert not issubclass(IpsetInternalError, IpsetSyntaxError)


class TestBuiltinTypes:

    def test_hash_ip(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip")
        parse_elem(session, False, "10.0.0.0/24")
        assert session.data.get(Opt.IP) == IPAddress("10.0.0.0")
        assert session.data.get(Opt.CIDR) == 24

    def test_hash_ip_legacy_timeout(self, session):
        parse_typename(session, Opt.TYPENAME, "iptree")
        parse_elem(session, False, "10.0.0.1,600")
        assert session.data.get(Opt.IP) == IPAddress("10.0.0.1")
        assert session.data.get(Opt.TIMEOUT) == 600

    def test_hash_ip_port(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip,port")
        parse_elem(session, False, "192.168.1.1,udp:53")
        assert session.data.get(Opt.IP) == IPAddress("192.168.1.1")
        assert session.data.get(Opt.PROTO) == 17
        assert session.data.get(Opt.PORT) == 53

    def test_hash_ip_port_icmp(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip,port")
        parse_elem(session, False, "192.168.1.1,icmp:echo-request")
        assert session.data.get(Opt.PORT) == 0x0800

    def test_hash_ip_port_ipv6(self, session6):
        parse_typename(session6, Opt.TYPENAME, "hash:ip,port")
        parse_elem(session6, False, "2001:db8::1,icmpv6:ping")
        assert session6.data.get(Opt.IP) == IPAddress("2001:db8::1")
        assert session6.data.get(Opt.PORT) == 0x8000

    def test_hash_ip_port_ipv6_plain_only(self, session6):
        parse_typename(session6, Opt.TYPENAME, "hash:ip,port")
        with pytest.raises(IpsetSyntaxError, match="plain IP address must be supplied"):
            parse_elem(session6, False, "2001:db8::/64,tcp:80")

    def test_hash_ip_port_ip(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip,port,ip")
        parse_elem(session, False, "10.0.0.1,tcp:80,10.0.0.2")
        assert session.data.get(Opt.IP2) == IPAddress("10.0.0.2")
        assert session.data.get(Opt.PORT) == 80

    def test_hash_ip_port_net(self, session):
        parse_typename(session, Opt.TYPENAME, "ipportnethash")
        parse_elem(session, False, "10.0.0.1,80,10.1.0.0/16")
        assert session.data.get(Opt.CIDR2) == 16

    def test_bitmap_ip_mac(self, session):
        parse_typename(session, Opt.TYPENAME, "bitmap:ip,mac")
        parse_elem(session, False, "10.0.0.1,00:11:22:33:44:55")
        assert session.data.get(Opt.ETHER) == bytes([0, 0x11, 0x22, 0x33, 0x44, 0x55])

    def test_bitmap_ip_mac_optional_mac(self, session):
        parse_typename(session, Opt.TYPENAME, "bitmap:ip,mac")
        parse_elem(session, True, "10.0.0.1")
        assert not session.data.test(Opt.ETHER)

    def test_bitmap_port(self, session):
        parse_typename(session, Opt.TYPENAME, "portmap")
        parse_elem(session, False, "1024-2048")
        assert session.data.get(Opt.PORT_TO) == 2048

    def test_list_set(self, session):
        parse_typename(session, Opt.TYPENAME, "list:set")
        parse_elem(session, False, "setA")
        assert session.data.get(Opt.NAME) == "setA"

    def test_list_set_legacy_reference(self, session):
        parse_typename(session, Opt.TYPENAME, "setlist")
        parse_elem(session, False, "setA,before,setB")
        assert session.data.get(Opt.NAME) == "setA"
        assert session.data.get(Opt.NAMEREF) == "setB"
        assert session.data.get(Opt.BEFORE) is True

    def test_hash_net_rejects_range(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:net")
        with pytest.raises(IpsetSyntaxError, match="IP address or IP/cidr must be specified"):
            parse_elem(session, False, "10.0.0.1-10.0.0.9")

    def test_hash_ip_port_missing_port(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip,port")
        with pytest.raises(IpsetSyntaxError, match="Second element is missing"):
            parse_elem(session, False, "10.0.0.1")
        assert session.data.family is Family.UNSPEC
