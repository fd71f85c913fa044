"""Terminal output for expressgen: data on stdout, diagnostics on stderr.

Scripts that pipe ``expressgen`` only ever see data on stdout: the table of
generated files or a config dump. Status lines, errors and next-step hints
go to stderr so they never corrupt that data.

The data format is picked once per invocation:

* ``json`` -- machine-readable, one JSON document per command;
* ``plain`` -- tab-separated lines, no headers, no colour;
* ``rich`` -- Rich tables for a human at a terminal;
* ``auto`` -- ``rich`` on an interactive terminal with colour enabled,
  ``plain`` otherwise.

Colour is disabled by ``--no-color``, ``NO_COLOR`` (any value) or
``TERM=dumb``. :func:`~expressgen.app.main_callback` installs the
:class:`OutputManager` for the run with :func:`set_output`; everything else
calls the module-level helpers.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    """Data formats selectable with ``--json``/``--plain`` or ``output.format``."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


# (plain-text prefix, Rich style) per diagnostic kind.
_DIAGNOSTIC_STYLES = {
    "error": ("Error: ", "bold red"),
    "success": ("", "green"),
    "suggest": ("→ ", "dim"),
    "debug": ("[debug] ", "dim"),
}


class OutputManager:
    """Writes command results and diagnostics for one CLI invocation.

    Args:
        format: Requested data format. ``AUTO`` is resolved here, once.
        no_color: Print diagnostics without Rich markup.
        quiet: Drop info, success and suggestion lines. Errors still print.
        verbose: Print debug lines.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._format = _resolve_format(format, self._no_color)

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=self._format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        """The data format after ``AUTO`` resolution."""
        return self._format

    # --- stdout ---

    def print_data(self, text: str) -> None:
        """Write *text* to stdout unchanged, followed by a newline."""
        print(text, file=sys.stdout, flush=True)

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Write *rows* to stdout.

        JSON mode emits a list of objects keyed by *headers*; plain mode one
        tab-separated line per row. *title* is only shown in Rich mode.
        """
        if self._format == OutputFormat.JSON:
            self._dump([dict(zip(headers, row)) for row in rows])
            return
        if self._format == OutputFormat.PLAIN:
            for row in rows:
                self.print_data("\t".join(row))
            return

        table = Table(title=title, header_style="bold cyan")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self._stdout.print(table)

    def format_response(self, data: Any) -> None:
        """Write a mapping, list or scalar to stdout.

        Mappings become key/value rows outside JSON mode; nested values are
        shown as compact JSON.
        """
        if self._format == OutputFormat.JSON:
            self._dump(data)
        elif isinstance(data, dict):
            rows = [[str(key), _scalar(value)] for key, value in data.items()]
            self.print_table(["Key", "Value"], rows)
        elif isinstance(data, list):
            for item in data:
                self.print_data(_scalar(item))
        else:
            self.print_data(str(data))

    def _dump(self, data: Any) -> None:
        self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    # --- stderr ---

    def info(self, message: str) -> None:
        """Status line. Hidden by ``--quiet``."""
        if not self._quiet:
            self._diagnostic(message)

    def success(self, message: str) -> None:
        """Completion line in green. Hidden by ``--quiet``."""
        if not self._quiet:
            self._diagnostic(message, "success")

    def error(self, message: str) -> None:
        """Error line, always shown."""
        self._diagnostic(message, "error")

    def suggest(self, message: str) -> None:
        """Next-step hint. Hidden by ``--quiet``."""
        if not self._quiet:
            self._diagnostic(message, "suggest")

    def debug(self, message: str) -> None:
        """Trace line, shown only with ``--verbose``."""
        if self._verbose:
            self._diagnostic(message, "debug")

    def _diagnostic(self, message: str, kind: Optional[str] = None) -> None:
        prefix, style = _DIAGNOSTIC_STYLES.get(kind, ("", ""))
        if self._no_color:
            print(f"{prefix}{message}", file=sys.stderr, flush=True)
            return
        text = escape(f"{prefix}{message}")
        self._stderr.print(f"[{style}]{text}[/{style}]" if style else text, highlight=False)


def _resolve_format(requested: OutputFormat, no_color: bool) -> OutputFormat:
    if requested != OutputFormat.AUTO:
        return requested
    return OutputFormat.RICH if _is_tty() and not no_color else OutputFormat.PLAIN


def _scalar(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """``True`` when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# --- Process-wide instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed manager, creating a default one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the installed manager.

    A manager keeps the ``sys.stdout``/``sys.stderr`` objects it was built
    with, so tests reset it once a capture ends.
    """
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_table(
    headers: list[str],
    rows: list[list[str]],
    title: Optional[str] = None,
) -> None:
    get_output().print_table(headers, rows, title)


def info(message: str) -> None:
    get_output().info(message)


def error(message: str) -> None:
    get_output().error(message)


def success(message: str) -> None:
    get_output().success(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)
