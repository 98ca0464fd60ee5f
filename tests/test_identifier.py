import pytest

from roundtrip.resolver.identifier import (
    HOSTNAME_RE,
    IdentifierType,
    canonical_address,
    classify,
    normalize_hostname,
)


@pytest.mark.parametrize("value, expected", [
    ("192.0.2.1", "192.0.2.1"),
    (" 192.0.2.1 ", "192.0.2.1"),
    ("2001:DB8::1", "2001:db8::1"),
    ("2001:db8:0:0:0:0:0:1", "2001:db8::1"),
])
def test_ip_addresses(value, expected):
    identifier = classify(value)

    assert identifier.kind == IdentifierType.IP
    assert identifier.value == expected


@pytest.mark.parametrize("value", [
    "example.com",
    "Example.COM.",
    "a-b.c-d.example",
    "1host.example.org",
    "x" * 63 + ".example.com",
])
def test_hostnames(value):
    identifier = classify(value)

    assert identifier.kind == IdentifierType.HOSTNAME
    assert identifier.value == value


@pytest.mark.parametrize("value", [
    "not a host!",
    "bad host",
    "localhost",
    "",
    "example..com",
    ".example.com",
    "x" * 64 + ".example.com",
    "under_score.example.com",
])
def test_invalid(value):
    identifier = classify(value)

    assert identifier.kind == IdentifierType.INVALID
    assert not identifier.is_valid


def test_ip_is_never_a_hostname():
    assert classify("192.0.2.1").kind == IdentifierType.IP


def test_normalize_hostname():
    assert normalize_hostname("WWW.Example.COM.") == "www.example.com"
    assert normalize_hostname("www.example.com") == "www.example.com"


def test_canonical_address():
    assert canonical_address("2001:0db8::0001") == "2001:db8::1"
    assert canonical_address("not-an-ip") == "not-an-ip"


def test_hostname_grammar_rejects_trailing_newline():
    assert HOSTNAME_RE.fullmatch("example.com\n") is None
    assert HOSTNAME_RE.fullmatch("example.com.") is not None
