"""
Forward and reverse lookups against the system-configured resolver
"""

import logging
import socket
from abc import ABC, abstractmethod

import dns.exception
import dns.resolver

from ..errors import ConfigurationError, DNSLookupError


logger = logging.getLogger(__name__)


class BaseLookup(ABC):
    """
    Abstract base class for lookup backends.

    Both directions either return every answer or raise
    DNSLookupError.
    """

    name = "base"

    @abstractmethod
    def addresses(self, hostname: str) -> list[str]:
        """
        Forward lookup.

        Args:
            hostname: Normalized hostname

        Returns:
            IPv4 and IPv6 addresses of hostname, as returned by the resolver
        """
        pass

    @abstractmethod
    def hostnames(self, ip: str) -> list[str]:
        """
        Reverse lookup.

        Args:
            ip: Canonical IP address

        Returns:
            Hostnames pointing at ip, as returned by the resolver
        """
        pass

    def close(self):
        """Release resolver resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def _socket_cause(exc: Exception) -> str:
    return getattr(exc, 'strerror', None) or str(exc) or exc.__class__.__name__


class SystemLookup(BaseLookup):
    """
    Platform resolver via getaddrinfo/gethostbyaddr.

    Sees the same answers as other programs on the host, including
    /etc/hosts entries.
    """

    name = "system"

    def addresses(self, hostname: str) -> list[str]:
        logger.debug("forward lookup %s", hostname)
        try:
            infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
        except (socket.gaierror, socket.herror, UnicodeError, OSError) as e:
            raise DNSLookupError(hostname, _socket_cause(e)) from e

        addrs: list[str] = []
        for info in infos:
            ip = info[4][0]
            if ip not in addrs:
                addrs.append(ip)
        return addrs

    def hostnames(self, ip: str) -> list[str]:
        logger.debug("reverse lookup %s", ip)
        try:
            primary, aliases, _ = socket.gethostbyaddr(ip)
        except (socket.gaierror, socket.herror, OSError) as e:
            raise DNSLookupError(ip, _socket_cause(e)) from e

        names = [primary] if primary else []
        for alias in aliases:
            if alias and alias not in names:
                names.append(alias)
        return names


class DnsPythonLookup(BaseLookup):
    """
    dnspython resolver using the system resolver configuration.

    Forward lookups ask for A and AAAA records, reverse lookups for
    PTR records. Nameservers and search list come from resolv.conf.
    """

    name = "dnspython"
    ADDRESS_TYPES = ('A', 'AAAA')

    def __init__(self, resolver: dns.resolver.Resolver = None):
        if resolver is None:
            try:
                resolver = dns.resolver.Resolver()
            except dns.resolver.NoResolverConfiguration as e:
                raise ConfigurationError(f"no system resolver configuration: {e}") from e
        self._resolver = resolver

    def addresses(self, hostname: str) -> list[str]:
        logger.debug("forward lookup %s", hostname)
        addrs: list[str] = []
        for rdtype in self.ADDRESS_TYPES:
            try:
                answers = self._resolver.resolve(hostname, rdtype, search=True)
            except dns.resolver.NoAnswer:
                continue
            except dns.resolver.NXDOMAIN as e:
                raise DNSLookupError(hostname, "no such host") from e
            except dns.exception.DNSException as e:
                raise DNSLookupError(hostname, str(e) or e.__class__.__name__) from e
            for rdata in answers:
                addr = rdata.to_text()
                if addr not in addrs:
                    addrs.append(addr)

        if not addrs:
            raise DNSLookupError(hostname, "no such host")
        return addrs

    def hostnames(self, ip: str) -> list[str]:
        logger.debug("reverse lookup %s", ip)
        try:
            answers = self._resolver.resolve_address(ip)
        except dns.resolver.NXDOMAIN as e:
            raise DNSLookupError(ip, "no such host") from e
        except dns.exception.DNSException as e:
            raise DNSLookupError(ip, str(e) or e.__class__.__name__) from e
        except ValueError as e:
            raise DNSLookupError(ip, str(e)) from e

        return [rdata.target.to_text() for rdata in answers]


BACKENDS = {
    'system': SystemLookup,
    'dnspython': DnsPythonLookup,
}


def create_lookup(backend: str = 'system') -> BaseLookup:
    """Create a lookup backend by name"""
    lookup_class = BACKENDS.get(backend.lower())
    if not lookup_class:
        raise ConfigurationError(
            f"Unknown backend '{backend}'. "
            f"Supported: {', '.join(BACKENDS.keys())}"
        )
    return lookup_class()
