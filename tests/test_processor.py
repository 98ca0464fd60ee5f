from roundtrip.processor import Processor
from roundtrip.resolver import RoundTripResolver

from tests.conftest import FakeLookup


HEADER = ["id", "host"]
ROWS = [
    ["1", "example.com"],
    ["2", "192.0.2.5"],
    ["3", "bad host"],
]


def test_end_to_end_rows(example_lookup):
    result = Processor(RoundTripResolver(example_lookup), column=1).run(HEADER, ROWS)

    assert result.rows == [
        ["1", "example.com", "192.0.2.5", "example.com", "yes"],
        ["2", "192.0.2.5", "192.0.2.5", "example.com", "yes"],
    ]
    assert result.discarded == [["3", "bad host"]]
    assert result.summary.discarded == 1
    assert result.summary.total == 3
    assert result.summary.consistent == 2


def test_discarded_values_never_reach_the_resolver():
    lookup = FakeLookup()
    result = Processor(RoundTripResolver(lookup), column=1).run(HEADER, [["1", "not a host!"]])

    assert lookup.calls == []
    assert result.processed == []
    assert result.discarded == [["1", "not a host!"]]


def test_lookup_failures_keep_the_row():
    lookup = FakeLookup()
    result = Processor(RoundTripResolver(lookup), column=1).run(
        HEADER, [["1", "gone.example.com"], ["2", "198.51.100.9"]]
    )

    assert [row.values[-1] for row in result.processed] == ["no", "no"]
    assert result.processed[0].values[2].startswith("ERROR: ")
    assert result.processed[1].values[3].startswith("ERROR: ")
    assert result.summary.errors == 2
    assert result.summary.inconsistent == 2


def test_rows_keep_input_order_and_line_numbers(example_lookup):
    rows = [["1", "192.0.2.5"], ["2", "bad host"], ["3", "example.com"]]
    result = Processor(RoundTripResolver(example_lookup), column=1).run(HEADER, rows)

    assert [row.record[0] for row in result.processed] == ["1", "3"]
    assert [row.line for row in result.processed] == [2, 4]


def test_selected_value_is_stripped(example_lookup):
    result = Processor(RoundTripResolver(example_lookup), column=1).run(HEADER, [["1", "  example.com "]])

    assert result.processed[0].identifier == "example.com"
    assert result.processed[0].record == ["1", "  example.com "]


def test_progress_callback(example_lookup):
    seen = []
    Processor(RoundTripResolver(example_lookup), column=1).run(
        HEADER, ROWS, on_row=lambda index, total, value: seen.append((index, total, value))
    )

    assert seen == [(0, 3, "example.com"), (1, 3, "192.0.2.5"), (2, 3, "bad host")]
