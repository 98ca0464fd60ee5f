import logging
import sys
from typing import Optional

import click
from rich.logging import RichHandler

from . import __version__
from .errors import RoundtripError
from .models import RunConfig, RunResult
from .output import ConsoleOutput
from .processor import Processor
from .resolver import RoundTripResolver, create_lookup
from .resolver.lookup import BACKENDS, BaseLookup
from .table import derive_column_names, open_input, read_records, select_column, split_header, write_table


def setup_logging(output: ConsoleOutput, verbose: bool = False):
    """Send log records to the stderr console"""
    handler = RichHandler(console=output.console, show_path=False, show_time=False)
    root = logging.getLogger('roundtrip')
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def resolve_rows(config: RunConfig, output: ConsoleOutput, header: list[str],
                 rows: list[list[str]], column: int, lookup: BaseLookup) -> RunResult:
    """Resolve every row, with a progress bar when enabled"""
    processor = Processor(RoundTripResolver(lookup), column)

    if not config.show_progress or not rows:
        return processor.run(header, rows)

    progress, task_id = output.create_progress(len(rows))

    def on_row(index: int, total: int, identifier: str):
        progress.update(task_id, completed=index, identifier=identifier)

    with progress:
        result = processor.run(header, rows, on_row=on_row)
        progress.update(task_id, completed=len(rows), identifier="")
    return result


def run(config: RunConfig, output: ConsoleOutput,
        lookup: Optional[BaseLookup] = None) -> RunResult:
    """
    Execute a full run: read, resolve, write.

    Args:
        config: Run options
        output: Console for status messages
        lookup: Lookup backend; created from config.backend when omitted

    Returns:
        RunResult of the run

    Raises:
        RoundtripError: on any fatal input, column or output problem
    """
    with open_input(config.input_path) as f:
        records = read_records(f)
    output.print_success(f"Read {len(records)} lines")

    header, rows = split_header(records)
    column = select_column(header, config.column)
    output.print_success(f"using column {column + 1} ({header[column]}) as input column")

    columns = derive_column_names(header)

    # Resolve
    if lookup is None:
        with create_lookup(config.backend) as backend:
            result = resolve_rows(config, output, header, rows, column, backend)
    else:
        result = resolve_rows(config, output, header, rows, column, lookup)

    # Write output
    write_table(config.output_path, columns, result.rows)
    output.print_success(f"{len(result.processed) + 1} lines written to {config.output_name}")

    if result.discarded:
        if config.discards_path:
            write_table(config.discards_path, header, result.discarded)
            output.print_warning(
                f"{len(result.discarded)} discarded rows written to {config.discards_path}"
            )
        else:
            output.print_warning(
                f"{len(result.discarded)} rows discarded (use --discards to see them)"
            )

    return result


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('input_path', required=False, metavar='[FILE.CSV]')
@click.option('--column', default='1', show_default=True,
              help='Look for addresses or hostnames in this column (number or header name)')
@click.option('-o', '--out', 'output_path', type=click.Path(dir_okay=False),
              help='Send output CSV to this file (default: stdout)')
@click.option('--discards', 'discards_path', type=click.Path(dir_okay=False),
              help='Write bad input lines to this CSV file')
@click.option('--backend', default='system', show_default=True,
              type=click.Choice(list(BACKENDS.keys()), case_sensitive=False),
              help='Lookup backend; both use the system resolver configuration')
@click.option('--progress/--no-progress', 'show_progress', default=True,
              help='Show a progress bar while resolving (default: enabled)')
@click.option('--summary/--no-summary', 'show_summary', default=True,
              help='Print a summary when done (default: enabled)')
@click.option('-v', '--verbose', is_flag=True,
              help='Log every lookup to stderr')
@click.version_option(version=__version__)
def main(input_path: Optional[str], column: str, output_path: Optional[str],
         discards_path: Optional[str], backend: str, show_progress: bool,
         show_summary: bool, verbose: bool):
    """
    roundtrip - check that forward and reverse DNS agree.

    Reads a CSV file (or stdin), looks up the IP address or hostname
    in the chosen column, and writes the CSV back out with three
    extra columns: the addresses from forward DNS, the hostnames from
    reverse DNS, and whether the round trip got back to where it
    started.

    Examples:

        roundtrip hosts.csv -o checked.csv

        roundtrip --column hostname --discards bad.csv hosts.csv

        cat hosts.csv | roundtrip > checked.csv
    """
    config = RunConfig(
        input_path=input_path,
        output_path=output_path,
        discards_path=discards_path,
        column=column,
        backend=backend.lower(),
        show_progress=show_progress,
        verbose=verbose
    )

    output = ConsoleOutput()
    setup_logging(output, verbose=config.verbose)

    try:
        result = run(config, output)
        if show_summary:
            output.print_summary(result.summary)

    except RoundtripError as e:
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        output.print_warning("\nInterrupted")
        sys.exit(130)


if __name__ == '__main__':
    main()
