"""Reporters describing builder definitions.

ConsoleReporter renders with rich and returns a string.
PlainTextReporter prints stdlib text to a stream.
"""

from kwbuilder.presentation.reporters.console import ConsoleConfig, ConsoleReporter
from kwbuilder.presentation.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
