"""
Round-trip resolver
"""

import logging
from typing import Callable

from ..errors import DNSLookupError
from ..models import NameSet, ResolutionResult
from .identifier import Identifier, IdentifierType, canonical_address, normalize_hostname
from .lookup import BaseLookup


logger = logging.getLogger(__name__)


class RoundTripResolver:
    """
    Checks that forward and reverse DNS agree for an identifier.

    An IP is resolved to its PTR names and those names back to
    addresses; a hostname is resolved to its addresses and those
    back to names. The result is consistent when the starting
    identifier shows up again at the end.

    Lookup failures never raise: the first failure aborts the
    identifier and is reported as an error marker in the column of
    the direction that failed.
    """

    def __init__(self, lookup: BaseLookup):
        self.lookup = lookup

    def resolve(self, identifier: Identifier) -> ResolutionResult:
        """Resolve a classified IP or hostname"""
        if identifier.kind == IdentifierType.IP:
            return self.resolve_ip(identifier.value)
        if identifier.kind == IdentifierType.HOSTNAME:
            return self.resolve_name(identifier.value)
        raise ValueError(f"cannot resolve invalid identifier '{identifier.value}'")

    def resolve_ip(self, ip: str) -> ResolutionResult:
        """
        Reverse-resolve ip, then forward-resolve every name found.

        Args:
            ip: IPv4 or IPv6 address

        Returns:
            ResolutionResult with forward = addresses of all PTR names,
            reverse = PTR names, consistent = ip among those addresses
        """
        ip = canonical_address(ip)

        try:
            names = NameSet(normalize_hostname(n) for n in self.lookup.hostnames(ip))
        except DNSLookupError as e:
            logger.debug("reverse lookup failed: %s", e)
            return ResolutionResult.reverse_failed(e)

        try:
            addresses = self._round_trip(names, self.lookup.addresses, canonical_address)
        except DNSLookupError as e:
            logger.debug("forward lookup failed: %s", e)
            return ResolutionResult.forward_failed(e)

        return ResolutionResult(
            forward=addresses,
            reverse=names,
            consistent=ip in addresses,
        )

    def resolve_name(self, name: str) -> ResolutionResult:
        """
        Forward-resolve name, then reverse-resolve every address found.

        Args:
            name: Hostname, any case, optionally with a trailing dot

        Returns:
            ResolutionResult with forward = addresses of name,
            reverse = names of all those addresses, consistent = name
            among those names
        """
        name = normalize_hostname(name)

        try:
            addresses = NameSet(canonical_address(a) for a in self.lookup.addresses(name))
        except DNSLookupError as e:
            logger.debug("forward lookup failed: %s", e)
            return ResolutionResult.forward_failed(e)

        try:
            names = self._round_trip(addresses, self.lookup.hostnames, normalize_hostname)
        except DNSLookupError as e:
            logger.debug("reverse lookup failed: %s", e)
            return ResolutionResult.reverse_failed(e)

        return ResolutionResult(
            forward=addresses,
            reverse=names,
            consistent=name in names,
        )

    @staticmethod
    def _round_trip(queries: NameSet, lookup: Callable[[str], list[str]],
                    normalize: Callable[[str], str]) -> NameSet:
        """Union of normalized answers for every query, failing on the first error"""
        found = NameSet()
        for query in queries:
            found.update(normalize(answer) for answer in lookup(query))
        return found
