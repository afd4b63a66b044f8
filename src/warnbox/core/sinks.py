# topmark:header:start
#
#   project      : WarnBox
#   file         : sinks.py
#   file_relpath : src/warnbox/core/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic channels: the `warn` / `error` entry points program code calls.

Program code reports developer-facing problems through the process-wide
[`console`][warnbox.core.sinks.console]:

```python
from warnbox import console

console.warn("Warning: %s is deprecated, use %s", "foo()", "bar()")
console.error("Warning: Each child in a list should have a unique key.")
```

The console host forwards each call to its active sink. By default this is a
[`StreamSink`][warnbox.core.sinks.StreamSink] writing to stderr; the interception
installer swaps in a sink that also feeds the warning registry, and swaps the
previous one back on uninstall.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

import click

from warnbox.core.category import parse_category


@runtime_checkable
class DiagnosticSink(Protocol):
    """Capability interface for the ``warn`` and ``error`` channels."""

    def warn(self, *args: object) -> None:
        """Report a warning; ``args`` is a printf-style template and its values."""
        ...

    def error(self, *args: object) -> None:
        """Report an error; ``args`` is a printf-style template and its values."""
        ...


class StreamSink(DiagnosticSink):
    """Sink that renders messages and writes them to a text stream.

    Args:
        enable_color (bool): If True, style warnings yellow and errors bright red.
        err (TextIO | None): Target stream; resolved to `sys.stderr` at write time
            when None.
    """

    def __init__(self, *, enable_color: bool = True, err: TextIO | None = None) -> None:
        self.enable_color: bool = enable_color
        self._err: TextIO | None = err

    @property
    def err(self) -> TextIO:
        """Return the target stream."""
        return self._err or sys.stderr

    def warn(self, *args: object) -> None:
        """Write a warning message to the stream."""
        self._write(args, fg="yellow")

    def error(self, *args: object) -> None:
        """Write an error message to the stream."""
        self._write(args, fg="bright_red")

    def _write(self, args: tuple[object, ...], *, fg: str) -> None:
        text: str = parse_category(args).message
        click.secho(text, file=self.err, color=self.enable_color, fg=fg)


class ConsoleHost:
    """Process-wide holder of the active diagnostic sink.

    Args:
        sink (DiagnosticSink): Initial sink.
    """

    def __init__(self, sink: DiagnosticSink) -> None:
        self._sink: DiagnosticSink = sink

    def get_sink(self) -> DiagnosticSink:
        """Return the active sink."""
        return self._sink

    def set_sink(self, sink: DiagnosticSink) -> DiagnosticSink:
        """Replace the active sink.

        Args:
            sink (DiagnosticSink): The new sink.

        Returns:
            DiagnosticSink: The sink that was active before.
        """
        prior: DiagnosticSink = self._sink
        self._sink = sink
        return prior

    def warn(self, *args: object) -> None:
        """Forward a warning to the active sink."""
        self._sink.warn(*args)

    def error(self, *args: object) -> None:
        """Forward an error to the active sink."""
        self._sink.error(*args)


class RecordingSink(DiagnosticSink):
    """Sink that records calls in memory, for embedding hosts and tests."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def warn(self, *args: object) -> None:
        """Record a warning call."""
        self.calls.append(("warn", args))

    def error(self, *args: object) -> None:
        """Record an error call."""
        self.calls.append(("error", args))

    def channel(self, name: str) -> list[tuple[object, ...]]:
        """Return the argument tuples recorded for one channel."""
        return [args for channel, args in self.calls if channel == name]


# Process-wide console; lives until interpreter exit.
console: ConsoleHost = ConsoleHost(StreamSink())
