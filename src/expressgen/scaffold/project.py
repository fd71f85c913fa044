"""Project bootstrapper -- backend of ``expressgen new``.

Creates ``<parent>/<name>/`` with this layout::

    src/
      app.js
      server.js
      routes/index.js        <- router-aggregator file patched later
      controllers/
      lib/firebase.js        <- only with --firebase
    package.json
    .env
    .gitignore

Every file body comes from :mod:`expressgen.renderer`; the manifest from
:meth:`~expressgen.models.PackageManifest.build`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from expressgen.exceptions import ProjectExistsError
from expressgen.files import write_files
from expressgen.models import GlobalConfig, PackageManifest, ProjectResult
from expressgen.output import debug
from expressgen.renderer import render_core_files, render_dotfiles
from expressgen.scaffold.names import validate_project_name

PROJECT_DIRS = ("src/routes", "src/controllers")
FIREBASE_DIRS = ("src/lib",)


def project_files(
    name: str,
    firebase: bool = False,
    config: Optional[GlobalConfig] = None,
) -> dict[str, str]:
    """Return every file of a new project, keyed by path relative to its root."""
    config = config or GlobalConfig()
    manifest = PackageManifest.build(name, firebase=firebase, versions=config.versions)

    files = render_core_files(port=config.port, firebase=firebase)
    files["package.json"] = json.dumps(manifest.to_json(), indent=2) + "\n"
    files.update(render_dotfiles(port=config.port))
    return files


def create_project(
    parent_dir: Path,
    name: str,
    *,
    firebase: bool = False,
    config: Optional[GlobalConfig] = None,
    force: bool = False,
    dry_run: bool = False,
) -> ProjectResult:
    """Create project *name* under *parent_dir*.

    Args:
        parent_dir: Directory in which the project directory is created.
        name: Project (and directory) name; also the manifest ``name``.
        firebase: Add ``src/lib/firebase.js`` and the ``firebase-admin``
            dependency.
        config: Port and dependency versions. Defaults to
            :class:`~expressgen.models.GlobalConfig` defaults.
        force: Write into an existing non-empty directory, overwriting
            files with the same names.
        dry_run: Compute the result without touching the filesystem.

    Returns:
        A :class:`~expressgen.models.ProjectResult` listing the files written.

    Raises:
        InvalidUsageError: If *name* is not a valid directory name.
        ProjectExistsError: If the target exists, is not empty, and *force*
            is not set.
        OSError: On any filesystem failure. Files written before the failure
            are left in place.
    """
    validate_project_name(name)
    project_path = Path(parent_dir) / name

    if project_path.exists():
        if not project_path.is_dir():
            raise ProjectExistsError(f"{project_path} exists and is not a directory")
        if any(project_path.iterdir()) and not force:
            raise ProjectExistsError(
                f"Directory {project_path} already exists and is not empty "
                "(use --force to overwrite)"
            )

    files = project_files(name, firebase=firebase, config=config)
    result = ProjectResult(name=name, project_path=project_path, files=list(files))
    if dry_run:
        return result

    dirs = PROJECT_DIRS + FIREBASE_DIRS if firebase else PROJECT_DIRS
    for rel_dir in dirs:
        (project_path / rel_dir).mkdir(parents=True, exist_ok=True)
        debug(f"Created directory {rel_dir}/")

    write_files(project_path, files)
    debug(f"Wrote {len(files)} files to {project_path}")
    return result
