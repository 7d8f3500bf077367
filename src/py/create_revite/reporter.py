"""Stage progress reporting."""

from typing import TYPE_CHECKING, Protocol

from create_revite.console import console, err_console

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ("ConsoleReporter", "NullReporter", "Reporter")


class Reporter(Protocol):
    """Receives stage transitions from the materializer."""

    def start_stage(self, name: str) -> None: ...

    def succeed(self, name: str) -> None: ...

    def fail(self, name: str) -> None: ...

    def info(self, message: str) -> None: ...


class ConsoleReporter:
    """Report stages on the terminal.

    Child processes write straight to the terminal, so stages are separated with
    rules rather than a live spinner that would fight their output.
    """

    def __init__(
        self,
        out: "Console | None" = None,
        err: "Console | None" = None,
        *,
        quiet: bool = False,
    ) -> None:
        self.out = out or console
        self.err = err or err_console
        self.quiet = quiet

    def start_stage(self, name: str) -> None:
        if not self.quiet:
            self.out.rule(f"[yellow]{name}[/]", align="left")

    def succeed(self, name: str) -> None:
        self.out.print(f"[green]✓ {name}[/]")

    def fail(self, name: str) -> None:
        self.err.print(f"[red]✗ {name}[/]")

    def info(self, message: str) -> None:
        if not self.quiet:
            self.out.print(message)


class NullReporter:
    """Discard all progress output."""

    def start_stage(self, name: str) -> None:
        pass

    def succeed(self, name: str) -> None:
        pass

    def fail(self, name: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass
