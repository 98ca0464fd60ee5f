"""
Exceptions raised by roundtrip
"""


class RoundtripError(Exception):
    """Base class for errors that abort a run"""


class InputError(RoundtripError):
    """Input could not be opened or parsed"""


class TableShapeError(InputError):
    """A data row does not have as many fields as the header"""

    def __init__(self, line: int, found: int, expected: int, record: list[str]):
        self.line = line
        self.found = found
        self.expected = expected
        self.record = record
        super().__init__(
            f"record {line} has {found} columns, I was expecting {expected}\n"
            f"{','.join(record)}"
        )


class ColumnError(RoundtripError):
    """Input column selector does not match the header"""


class OutputError(RoundtripError):
    """Output or discards destination could not be written"""


class ConfigurationError(RoundtripError):
    """Invalid option combination or value"""


class DNSLookupError(Exception):
    """
    A single forward or reverse lookup failed.

    Never aborts a run: the resolver turns it into an error marker
    in the affected output column.
    """

    def __init__(self, query: str, cause: str):
        self.query = query
        self.cause = cause
        super().__init__(f"lookup {query}: {cause}")
