"""Generate-resource command -- add a controller and route to a project.

Implements ``expressgen generate-resource <name>``. The project root
defaults to the current directory and can be pointed elsewhere with
``--root``; the work is done by
:func:`~expressgen.scaffold.resource.generate_resource`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from expressgen.exceptions import ExpressgenError
from expressgen.output import error, info, print_table, success


def generate_resource_command(
    ctx: typer.Context,
    name: str = typer.Argument(help="Resource name, e.g. 'user'."),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root (defaults to the current directory).",
        file_okay=False,
    ),
) -> None:
    """Generate a test endpoint resource.

    Writes ``src/controllers/<name>.js`` and ``src/routes/<name>.js`` and
    mounts the new router at ``/<name>`` in ``src/routes/index.js``.
    Running it again for the same name leaves the router file unchanged.

    Example::

        expressgen generate-resource user
        expressgen --json generate-resource order --root ./demo
    """
    from expressgen.scaffold import generate_resource

    opts = ctx.obj or {}
    dry_run = bool(opts.get("dry_run"))
    project_root = root if root is not None else Path.cwd()

    try:
        result = generate_resource(project_root, name, dry_run=dry_run)
    except ExpressgenError as exc:
        error(f"Error generating resource: {exc}")
        raise typer.Exit(code=exc.exit_code) from None

    rows = [["created", path] for path in result.created]
    rows += [["modified", path] for path in result.modified]
    print_table(["Status", "Path"], rows, title=f"Resource {result.name}")

    if dry_run:
        info("Dry run: no files were written.")
    else:
        success(f"Generated resource: {result.name}")
