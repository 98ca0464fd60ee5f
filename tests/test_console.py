import io

import pytest
from rich.console import Console

from roundtrip.models import RunSummary
from roundtrip.output import ConsoleOutput


def _terminal_output() -> ConsoleOutput:
    console = Console(file=io.StringIO(), force_terminal=True, color_system=None, width=200)
    return ConsoleOutput(console)


@pytest.mark.parametrize("identifier", [
    "bad[/x]host",
    "[red]x[/red]",
    "[bold]",
])
def test_progress_shows_identifier_literally(identifier):
    output = _terminal_output()
    progress, task_id = output.create_progress(3)
    progress.update(task_id, completed=1, identifier=identifier)

    output.console.print(progress.get_renderable())

    assert identifier in output.console.file.getvalue()


def test_summary_panel():
    output = _terminal_output()
    output.print_summary(RunSummary(total=4, resolved=3, consistent=2,
                                    inconsistent=1, errors=1, discarded=1))

    text = output.console.file.getvalue()
    assert "Summary" in text
    assert "Round-trip OK: 2" in text
    assert "Round-trip failed: 1 (1 with lookup errors)" in text
    assert "Discarded: 1" in text


def test_error_message_is_not_markup():
    output = _terminal_output()
    output.print_error("[Errno 2] No such file or directory: '[x]'")

    assert "Error: [Errno 2] No such file or directory: '[x]'" in output.console.file.getvalue()
