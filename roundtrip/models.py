"""
Data models for roundtrip
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


ERROR_PREFIX = "ERROR: "


class NameSet:
    """
    Ordered set of addresses or hostnames.

    Entries are unique and always iterate in ascending lexicographic
    order of their string form.
    """

    def __init__(self, items: Iterable[str] = ()):
        self._items: set[str] = set()
        self.update(items)

    def add(self, item: str):
        self._items.add(item)

    def update(self, items: Iterable[str]):
        for item in items:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NameSet):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"NameSet({list(self)!r})"

    def join(self, sep: str = " ") -> str:
        return sep.join(self)


@dataclass
class ResolutionResult:
    """Forward and reverse closure of one identifier"""
    forward: NameSet = field(default_factory=NameSet)
    reverse: NameSet = field(default_factory=NameSet)
    consistent: bool = False
    forward_error: Optional[str] = None
    reverse_error: Optional[str] = None

    @classmethod
    def forward_failed(cls, cause: object) -> 'ResolutionResult':
        return cls(forward_error=f"{ERROR_PREFIX}{cause}")

    @classmethod
    def reverse_failed(cls, cause: object) -> 'ResolutionResult':
        return cls(reverse_error=f"{ERROR_PREFIX}{cause}")

    @property
    def failed(self) -> bool:
        return self.forward_error is not None or self.reverse_error is not None

    @property
    def forward_text(self) -> str:
        return self.forward_error or self.forward.join()

    @property
    def reverse_text(self) -> str:
        return self.reverse_error or self.reverse.join()

    @property
    def verdict_text(self) -> str:
        return "yes" if self.consistent else "no"

    def columns(self) -> list[str]:
        """Values of the three derived output columns"""
        return [self.forward_text, self.reverse_text, self.verdict_text]


@dataclass
class RunConfig:
    """Options for a single run"""
    input_path: Optional[str] = None  # None or '-' reads stdin
    output_path: Optional[str] = None  # None or '-' writes stdout
    discards_path: Optional[str] = None
    column: str = "1"
    backend: str = "system"
    show_progress: bool = True
    verbose: bool = False

    @property
    def writes_stdout(self) -> bool:
        return self.output_path in (None, '', '-')

    @property
    def output_name(self) -> str:
        return "stdout" if self.writes_stdout else self.output_path


@dataclass
class ProcessedRow:
    """Input record with its resolution attached"""
    line: int  # 1-based line in the input file
    record: list[str]
    identifier: str
    result: ResolutionResult

    @property
    def values(self) -> list[str]:
        return self.record + self.result.columns()


@dataclass
class RunSummary:
    """Counts for a finished run"""
    total: int = 0
    resolved: int = 0
    consistent: int = 0
    inconsistent: int = 0
    errors: int = 0
    discarded: int = 0

    def record(self, result: ResolutionResult):
        self.resolved += 1
        if result.consistent:
            self.consistent += 1
        else:
            self.inconsistent += 1
        if result.failed:
            self.errors += 1


@dataclass
class RunResult:
    """Everything a run produced"""
    header: list[str]
    column: int
    processed: list[ProcessedRow] = field(default_factory=list)
    discarded: list[list[str]] = field(default_factory=list)
    summary: RunSummary = field(default_factory=RunSummary)

    @property
    def rows(self) -> list[list[str]]:
        return [row.values for row in self.processed]
