"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from kwbuilder.application.builder.definition import BuilderDefinition


class PlainTextReporter:
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, definition: BuilderDefinition) -> None:
        """Write key listing of a builder.

        Args:
            definition: Builder to describe
        """
        required = definition.required_keys

        self._write("=" * 70)
        self._write(f"Builder {definition.name} ({definition.mode.name})")
        self._write("=" * 70)

        for key in sorted(definition.keys):
            marker = "*" if key in required else " "
            self._write(f"  {marker} {key}")

        if definition.is_wildcard():
            self._write("  + any other key (wildcard)")

        self._write()
        self._write(f"Keys: {len(definition.keys)}, required: {len(required)}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
