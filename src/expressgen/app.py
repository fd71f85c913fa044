"""Typer application and CLI entry point for expressgen.

Registers the ``new`` and ``generate-resource`` commands and the ``config``
group on the root app. :func:`main` is the console-script entry point
declared in ``pyproject.toml``: it installs a SIGINT handler, invokes the
app and maps escaping exceptions to exit codes. ``OSError`` is reported as
an I/O failure; anything else unexpected is written to a crash log under
the data directory.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any

import typer

from expressgen import __version__
from expressgen.commands.config import config_app
from expressgen.commands.generate import generate_resource_command
from expressgen.commands.new import new_command
from expressgen.exit_codes import EXIT_GENERIC_FAILURE, EXIT_IO_FAILURE
from expressgen.output import OutputFormat


app = typer.Typer(
    name="expressgen",
    help="Scaffold Express projects and generate resources.",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)

app.command("new", help="Create a new Express project.")(new_command)
app.command("generate-resource", help="Generate a test endpoint resource.")(
    generate_resource_command
)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"expressgen {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show what would be written without writing."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing files and skip confirmations."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~expressgen.output.OutputManager` built from
    the output flags and stores ``dry_run``/``force`` in ``ctx.obj`` for the
    sub-commands. Without ``--json`` or ``--plain`` the format comes from the
    ``output.format`` config key.
    """
    from expressgen.output import OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = _configured_format()

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["dry_run"] = dry_run
    ctx.obj["force"] = force


def _configured_format() -> OutputFormat:
    """Return the output format stored in the global config.

    An unreadable config file falls back to ``AUTO``; the commands that
    load the config report the error themselves.
    """
    from expressgen.config import load_global_config
    from expressgen.exceptions import ConfigError

    try:
        return OutputFormat(load_global_config().output.format)
    except ConfigError:
        return OutputFormat.AUTO


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log() -> str:
    """Write the current traceback to the data directory and return the log path."""
    from expressgen.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``expressgen`` console script.

    :class:`~expressgen.exceptions.ExpressgenError` exits with the error's
    ``exit_code``; ``OSError`` exits with
    :data:`~expressgen.exit_codes.EXIT_IO_FAILURE`; any other exception
    produces a crash log and exits with
    :data:`~expressgen.exit_codes.EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from expressgen.exceptions import ExpressgenError
        from expressgen.output import error

        if isinstance(exc, ExpressgenError):
            error(str(exc))
            sys.exit(exc.exit_code)
        if isinstance(exc, OSError):
            error(f"I/O error: {exc}")
            sys.exit(EXIT_IO_FAILURE)
        log_path = _write_crash_log()
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
