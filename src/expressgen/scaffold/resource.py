"""Resource generator -- backend of ``expressgen generate-resource``.

For a resource ``user`` inside a generated project this writes
``src/controllers/user.js`` and ``src/routes/user.js`` and patches
``src/routes/index.js`` with :func:`expressgen.patcher.patch`.

The project root is always passed in explicitly; nothing here reads the
process working directory.
"""

from __future__ import annotations

from pathlib import Path

from expressgen.exceptions import PreconditionError
from expressgen.files import atomic_write, write_files
from expressgen.models import GenerationResult
from expressgen.output import debug
from expressgen.patcher import patch
from expressgen.renderer import ROUTER_INDEX_PATH, render_resource_files
from expressgen.scaffold.names import validate_resource_name

PROJECT_MARKER = "src"


def check_project_root(project_root: Path) -> Path:
    """Return the router file path of *project_root*, checking it is a project.

    Raises:
        PreconditionError: If ``src/`` or ``src/routes/index.js`` is missing.
    """
    if not (project_root / PROJECT_MARKER).is_dir():
        raise PreconditionError(
            "Must be run from project root directory (where src/ folder exists)"
        )
    router_path = project_root / ROUTER_INDEX_PATH
    if not router_path.is_file():
        raise PreconditionError(
            f"Router file {ROUTER_INDEX_PATH} not found in {project_root}"
        )
    return router_path


def generate_resource(
    project_root: Path,
    name: str,
    *,
    dry_run: bool = False,
) -> GenerationResult:
    """Add resource *name* to the project at *project_root*.

    The router file is read and patched in memory before anything is
    written, so a router file with missing anchors aborts the command with
    no files changed. The controller and route files are then written
    (overwriting earlier versions of the same resource), and finally the
    router file is replaced atomically.

    Args:
        project_root: Root directory of a project created by ``expressgen new``.
        name: Resource name; must be a JavaScript identifier.
        dry_run: Run every check and compute the patch, but write nothing.

    Returns:
        A :class:`~expressgen.models.GenerationResult` with the created
        and modified paths, relative to *project_root*.

    Raises:
        InvalidUsageError: If *name* is not a valid identifier.
        PreconditionError: If *project_root* is not a generated project.
        StructuralPatchError: If the router file lacks its anchors.
        OSError: On any filesystem failure.
    """
    validate_resource_name(name)
    project_root = Path(project_root)
    router_path = check_project_root(project_root)

    # newline="" keeps \r\n endings intact across the rewrite.
    with open(router_path, encoding="utf-8", newline="") as f:
        original = f.read()
    patched = patch(original, name)

    files = render_resource_files(name)
    result = GenerationResult(
        name=name,
        created=list(files),
        modified=[ROUTER_INDEX_PATH] if patched != original else [],
    )
    if dry_run:
        return result

    write_files(project_root, files)
    if patched != original:
        atomic_write(router_path, patched)
        debug(f"Patched {ROUTER_INDEX_PATH} for resource '{name}'")
    else:
        debug(f"{ROUTER_INDEX_PATH} already wires resource '{name}'")
    return result
