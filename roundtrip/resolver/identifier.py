"""
Input identifier classifier
"""

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum


class IdentifierType(Enum):
    """Identifier classification types"""
    IP = "ip"
    HOSTNAME = "hostname"
    INVALID = "invalid"


# Two or more dot-separated labels of 1-63 letters, digits or hyphens,
# with an optional trailing dot
HOSTNAME_RE = re.compile(r'[a-zA-Z0-9-]{1,63}(?:\.[a-zA-Z0-9-]{1,63})+\.?')


@dataclass(frozen=True)
class Identifier:
    """Classified input value"""
    kind: IdentifierType
    value: str

    @property
    def is_valid(self) -> bool:
        return self.kind != IdentifierType.INVALID


def normalize_hostname(name: str) -> str:
    """Lowercase and drop one trailing dot"""
    name = name.lower()
    if name.endswith('.'):
        name = name[:-1]
    return name


def canonical_address(text: str) -> str:
    """Canonical textual form of an IP address, or text unchanged"""
    try:
        return str(ipaddress.ip_address(text))
    except ValueError:
        return text


def classify(raw: str) -> Identifier:
    """
    Classify an input value.

    IP addresses take precedence over the hostname grammar, so
    "192.0.2.1" is always an IP.

    Args:
        raw: Value from the input column

    Returns:
        Identifier with canonical IP text, the hostname as given, or
        the stripped value for anything else
    """
    value = raw.strip()

    try:
        addr = ipaddress.ip_address(value)
    except ValueError:
        addr = None

    if addr is not None:
        return Identifier(IdentifierType.IP, str(addr))

    if HOSTNAME_RE.fullmatch(value):
        return Identifier(IdentifierType.HOSTNAME, value)

    return Identifier(IdentifierType.INVALID, value)
