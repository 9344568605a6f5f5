"""Tests for set name, reference and type name parsers."""

import pytest

from ipsetparse.data import Family, Opt
from ipsetparse.errors import IpsetSyntaxError
from ipsetparse.parsers.setname import (
    parse_after,
    parse_before,
    parse_name_compat,
    parse_setname,
    parse_typename,
)


class TestSetname:

    def test_longest_name(self, session):
        name = "s" * 31
        parse_setname(session, Opt.SETNAME, name)
        assert session.data.get(Opt.SETNAME) == name

    def test_too_long(self, session):
        with pytest.raises(IpsetSyntaxError, match="is longer than 31 characters"):
            parse_setname(session, Opt.SETNAME, "s" * 32)
        assert not session.data.test(Opt.SETNAME)


class TestNameCompat:

    def test_plain_name(self, session):
        parse_name_compat(session, Opt.NAME, "setA")
        assert session.data.get(Opt.NAME) == "setA"
        assert not session.data.test(Opt.NAMEREF)

    def test_before(self, session):
        parse_name_compat(session, Opt.NAME, "setA,before,setB")
        assert session.data.get(Opt.NAME) == "setA"
        assert session.data.get(Opt.NAMEREF) == "setB"
        assert session.data.get(Opt.BEFORE) is True

    def test_after(self, session):
        parse_name_compat(session, Opt.NAME, "setA,after,setB")
        assert session.data.get(Opt.NAMEREF) == "setB"
        assert not session.data.test(Opt.BEFORE)

    @pytest.mark.parametrize("text", ["setA,inside,setB", "setA,before"])
    def test_bad_compound(self, session, text):
        with pytest.raises(IpsetSyntaxError,
                           match=r"setname,\[before\|after\],setname"):
            parse_name_compat(session, Opt.NAME, text)

    def test_reference_too_long(self, session):
        with pytest.raises(IpsetSyntaxError, match="is longer than"):
            parse_name_compat(session, Opt.NAME, "setA,after," + "r" * 40)

    def test_reference_only_once(self, session):
        parse_before(session, Opt.NAMEREF, "setB")
        with pytest.raises(IpsetSyntaxError,
                           match="mixed syntax, before|after option already used"):
            parse_name_compat(session, Opt.NAME, "setA,after,setC")


class TestBeforeAfter:

    def test_before(self, session):
        parse_before(session, Opt.NAMEREF, "setB")
        assert session.data.get(Opt.NAMEREF) == "setB"
        assert session.data.get(Opt.BEFORE) is True

    def test_after(self, session):
        parse_after(session, Opt.NAMEREF, "setB")
        assert session.data.get(Opt.NAMEREF) == "setB"
        assert not session.data.test(Opt.BEFORE)

    def test_mutually_exclusive(self, session):
        parse_after(session, Opt.NAMEREF, "setB")
        with pytest.raises(IpsetSyntaxError, match="mixed syntax"):
            parse_before(session, Opt.NAMEREF, "setC")
        assert session.data.get(Opt.NAMEREF) == "setB"


class TestTypename:

    def test_canonical_name(self, session):
        parse_typename(session, Opt.TYPENAME, "hash:ip,port")
        assert session.data.get(Opt.TYPENAME) == "hash:ip,port"
        assert session.data.get(Opt.TYPE).dimension == 2

    def test_alias(self, session):
        parse_typename(session, Opt.TYPENAME, "iphash")
        assert session.data.get(Opt.TYPENAME) == "hash:ip"

    def test_unknown(self, session):
        with pytest.raises(IpsetSyntaxError, match="typename 'hash:foo' is unknown"):
            parse_typename(session, Opt.TYPENAME, "hash:foo")

    def test_too_long(self, session):
        with pytest.raises(IpsetSyntaxError, match="typename .* is longer than 31"):
            parse_typename(session, Opt.TYPENAME, "x" * 32)

    def test_single_family_type_sets_family(self, session):
        parse_typename(session, Opt.TYPENAME, "bitmap:ip")
        assert session.data.family is Family.INET
        assert session.data.test(Opt.FAMILY)

    def test_family_mismatch(self, session6):
        with pytest.raises(IpsetSyntaxError, match="does not support family inet6"):
            parse_typename(session6, Opt.TYPENAME, "bitmap:ip,mac")
        assert not session6.data.test(Opt.TYPE)
