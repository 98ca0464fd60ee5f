"""
CSV input and output
"""

import csv
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, TextIO

from .errors import ColumnError, InputError, OutputError, TableShapeError


DERIVED_COLUMNS = ('ips_from_forward_dns', 'hostnames_from_reverse_dns', 'roundtrip_ok')


@contextmanager
def open_input(path: Optional[str] = None) -> Iterator[TextIO]:
    """
    Open the input CSV, or stdin when path is None or '-'.

    Raises:
        InputError: file cannot be opened, or stdin is a terminal
    """
    if path and path != '-':
        try:
            f = open(path, 'r', encoding='utf-8', newline='')
        except OSError as e:
            raise InputError(f"failed to open input: {e}") from e
        with f:
            yield f
        return

    if sys.stdin is None or sys.stdin.isatty():
        raise InputError("stdin doesn't look like something I can read")
    yield sys.stdin


def read_records(f: TextIO) -> list[list[str]]:
    """Read every non-blank CSV record, header included"""
    try:
        return [record for record in csv.reader(f) if record]
    except (csv.Error, UnicodeDecodeError) as e:
        raise InputError(f"while reading input: {e}") from e


def split_header(records: list[list[str]]) -> tuple[list[str], list[list[str]]]:
    """
    Separate the header from the data rows and check the table shape.

    Raises:
        InputError: no header row
        TableShapeError: a row has a different number of fields
    """
    if not records:
        raise InputError("input is empty, expected a header row")

    header, rows = records[0], records[1:]
    for i, row in enumerate(rows):
        if len(row) != len(header):
            raise TableShapeError(line=i + 2, found=len(row),
                                  expected=len(header), record=row)
    return header, rows


def select_column(header: list[str], selector: str) -> int:
    """
    Resolve a column selector to a zero-based index.

    Args:
        header: Header row
        selector: 1-based column number, or a header name

    Returns:
        Zero-based column index

    Raises:
        ColumnError: out of range or no such header name
    """
    selector = str(selector)
    try:
        index = int(selector) - 1
    except ValueError:
        index = -1
        for i, name in enumerate(header):
            if name == selector:
                index = i
        if index == -1:
            raise ColumnError(f"can't find input column '{selector}'")

    if index < 0 or index >= len(header):
        raise ColumnError(f"input column {index + 1} is out of range")
    return index


def derive_column_names(header: list[str],
                        names: Iterable[str] = DERIVED_COLUMNS) -> list[str]:
    """
    Header with the derived columns appended.

    A name already present gets the first free numeric suffix,
    e.g. roundtrip_ok_1.
    """
    columns = list(header)
    for name in names:
        if name in columns:
            suffix = 1
            while f"{name}_{suffix}" in columns:
                suffix += 1
            name = f"{name}_{suffix}"
        columns.append(name)
    return columns


def write_rows(f: TextIO, header: list[str], rows: Iterable[list[str]]):
    writer = csv.writer(f, lineterminator='\n')
    writer.writerow(header)
    writer.writerows(rows)


def write_table(path: Optional[str], header: list[str], rows: Iterable[list[str]]):
    """
    Write a CSV table to path, or stdout when path is None or '-'.

    Raises:
        OutputError: destination cannot be created or written
    """
    if not path or path == '-':
        write_rows(sys.stdout, header, rows)
        sys.stdout.flush()
        return

    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            write_rows(f, header, rows)
    except OSError as e:
        raise OutputError(f"couldn't write {path}: {e}") from e
