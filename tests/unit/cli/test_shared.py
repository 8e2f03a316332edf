from io import StringIO

import pytest
from rich.console import Console

from gitprompt.cli._commands import ExitCode, exit_with_error, print_warning


def make_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


class TestExitCode:
    def test_values_are_unique(self) -> None:
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_usable_with_system_exit(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            raise SystemExit(ExitCode.NOT_FOUND)
        assert exc_info.value.code == 3


class TestPrintWarning:
    def test_message_markup_is_not_interpreted(self) -> None:
        console, buffer = make_console()

        print_warning("add [bold]/srv/repo[/bold]", console=console)

        assert buffer.getvalue() == "Warning: add [bold]/srv/repo[/bold]\n"


class TestExitWithError:
    def test_prints_and_exits(self) -> None:
        console, buffer = make_console()

        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("no such shell", ExitCode.NOT_FOUND, console=console)

        assert exc_info.value.code == ExitCode.NOT_FOUND
        assert buffer.getvalue() == "Error: no such shell\n"

