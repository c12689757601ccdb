"""Console reporter: BuilderDefinition → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from kwbuilder.domain.model.parameter import ParameterKind

if TYPE_CHECKING:
    from kwbuilder.application.builder.definition import BuilderDefinition


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        title: Table title. None = builder name.
    """

    width: int = 120
    title: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: describes a builder's keys with rich tables.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, definition: BuilderDefinition) -> str:
        """Format builder definition as rich formatted string.

        Args:
            definition: Builder to describe.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, definition)
        console.print(self._build_table(definition))

        if definition.is_wildcard():
            console.print("[yellow]Wildcard:[/yellow] any other key is passed through as **kwargs")
        console.print()

        return output.getvalue()

    def _render_header(self, console: Console, definition: BuilderDefinition) -> None:
        console.print()
        console.rule(f"[bold]{definition.name}[/bold]")
        console.print(f"[bold]Mode:[/bold] {definition.mode.name}  [bold]Keys:[/bold] {len(definition.keys)}")
        console.print()

    def _build_table(self, definition: BuilderDefinition) -> Table:
        table = Table(title=self._config.title or definition.name)
        table.add_column("Key", style="cyan")
        table.add_column("Kind")
        table.add_column("Required")

        for param in definition.parameters:
            if param.kind.is_named:
                table.add_row(param.name, _kind_label(param.kind), "yes" if param.is_required else "no")
            elif param.kind is ParameterKind.VARIADIC_KEYWORD:
                table.add_row(f"**{param.name}", _kind_label(param.kind), "no")

        return table


def _kind_label(kind: ParameterKind) -> str:
    return kind.value.lower().replace("_", " ")
