from typing import Dict, List, Optional

import pytest

from roundtrip.errors import DNSLookupError
from roundtrip.resolver.lookup import BaseLookup


class FakeLookup(BaseLookup):
    """
    Lookup backend answering from fixed tables.

    forward maps hostname -> addresses, reverse maps ip -> hostnames.
    A query missing from its table fails with "no such host"; a value
    of None fails with a timeout. Every query is recorded in calls.
    """

    name = "fake"

    def __init__(
        self,
        forward: Optional[Dict[str, Optional[List[str]]]] = None,
        reverse: Optional[Dict[str, Optional[List[str]]]] = None,
    ):
        self.forward = forward or {}
        self.reverse = reverse or {}
        self.calls: List[tuple] = []
        self.closed = False

    def _answer(self, table, query):
        if query not in table:
            raise DNSLookupError(query, "no such host")
        answer = table[query]
        if answer is None:
            raise DNSLookupError(query, "i/o timeout")
        return list(answer)

    def addresses(self, hostname: str) -> List[str]:
        self.calls.append(("forward", hostname))
        return self._answer(self.forward, hostname)

    def hostnames(self, ip: str) -> List[str]:
        self.calls.append(("reverse", ip))
        return self._answer(self.reverse, ip)

    def close(self):
        self.closed = True


@pytest.fixture
def example_lookup() -> FakeLookup:
    return FakeLookup(
        forward={"example.com": ["192.0.2.5"]},
        reverse={"192.0.2.5": ["example.com."]},
    )
