"""New command -- scaffold an Express project.

Implements ``expressgen new <name>``. Resolves the effective configuration
(port and dependency versions), hands off to
:func:`~expressgen.scaffold.project.create_project`, lists the files written
on stdout and suggests the next steps on stderr.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from expressgen.exceptions import ExpressgenError
from expressgen.output import error, info, print_table, success, suggest


def new_command(
    ctx: typer.Context,
    name: str = typer.Argument(help="Project name (also the directory created)."),
    firebase: bool = typer.Option(
        False, "--firebase", help="Include Firebase Admin setup."
    ),
    port: Optional[int] = typer.Option(
        None, "--port", help="Default PORT written to .env (overrides config)."
    ),
) -> None:
    """Create a new Express project.

    Example::

        expressgen new demo
        expressgen new demo --firebase --port 3000
    """
    from expressgen.config import resolve_config
    from expressgen.scaffold import create_project

    opts = ctx.obj or {}
    dry_run = bool(opts.get("dry_run"))

    try:
        config = resolve_config(cli_port=port)
        result = create_project(
            Path.cwd(),
            name,
            firebase=firebase,
            config=config,
            force=bool(opts.get("force")),
            dry_run=dry_run,
        )
    except ExpressgenError as exc:
        error(f"Error creating project: {exc}")
        raise typer.Exit(code=exc.exit_code) from None

    print_table(
        ["Status", "Path"],
        [["created", f"{result.name}/{path}"] for path in result.files],
        title=f"Project {result.name}",
    )
    if dry_run:
        info("Dry run: no files were written.")
        return

    success("Project created successfully!")
    suggest(f"cd {result.name}")
    suggest("npm install")
    suggest("npm run dev")
