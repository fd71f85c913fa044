"""Canonical Pydantic models shared across all expressgen modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`DependencyVersions`, :class:`OutputConfig` and
    :class:`GlobalConfig`.

**Generation models** -- produced by the scaffolders and the router patcher:
    :class:`PackageManifest`, :class:`ProjectResult`,
    :class:`GenerationResult`, :class:`Anchor` and :class:`RouterAnchors`.

All models use Pydantic v2.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Configuration ---


class DependencyVersions(BaseModel):
    """Semver ranges written into the generated ``package.json``.

    Field names are Python identifiers; :meth:`PackageManifest.build` maps
    them to npm package names (``firebase_admin`` -> ``firebase-admin``).
    """

    express: str = Field(default="^4.18.2", description="express version range")
    cors: str = Field(default="^2.8.5", description="cors version range")
    firebase_admin: str = Field(
        default="^11.11.0", description="firebase-admin version range (--firebase only)"
    )
    nodemon: str = Field(default="^2.0.20", description="nodemon dev dependency range")


class OutputConfig(BaseModel):
    """Output format used when neither ``--json`` nor ``--plain`` is given."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/expressgen/config.json``.

    Loaded and saved by :func:`~expressgen.config.load_global_config` and
    :func:`~expressgen.config.save_global_config`. See
    :func:`~expressgen.config.resolve_config` for how environment variables
    and CLI flags override these values.
    """

    port: int = Field(default=8080, ge=1, le=65535, description="PORT written to .env")
    versions: DependencyVersions = Field(default_factory=DependencyVersions)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Generated project ---


class PackageManifest(BaseModel):
    """The ``package.json`` of a generated project.

    ``type`` is always ``"module"`` so the generated sources can use ES
    module ``import``/``export`` syntax, which the router patcher relies on.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "1.0.0"
    type: str = "module"
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "start": "node src/server.js",
            "dev": "nodemon src/server.js",
        }
    )
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    @classmethod
    def build(
        cls,
        name: str,
        firebase: bool = False,
        versions: Optional[DependencyVersions] = None,
    ) -> PackageManifest:
        """Assemble the manifest for project *name*.

        ``firebase-admin`` is only added to ``dependencies`` when *firebase*
        is set.
        """
        versions = versions or DependencyVersions()
        deps = {
            "express": versions.express,
            "cors": versions.cors,
        }
        if firebase:
            deps["firebase-admin"] = versions.firebase_admin
        return cls(
            name=name,
            dependencies=deps,
            dev_dependencies={"nodemon": versions.nodemon},
        )

    def to_json(self) -> dict:
        """Return the manifest as it appears on disk (npm key names)."""
        return self.model_dump(mode="json", by_alias=True)


class ProjectResult(BaseModel):
    """Outcome of :func:`~expressgen.scaffold.project.create_project`."""

    name: str
    project_path: Path
    files: list[str] = Field(
        default_factory=list, description="Written files, relative to project_path"
    )


class GenerationResult(BaseModel):
    """Outcome of :func:`~expressgen.scaffold.resource.generate_resource`.

    Paths are POSIX-style and relative to the project root. Used purely for
    reporting.
    """

    name: str
    created: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)

    @property
    def files(self) -> list[str]:
        """All touched files: created first, then modified."""
        return [*self.created, *self.modified]


# --- Router anchors ---


class Anchor(BaseModel):
    """Position of a structural marker in router source text.

    ``line`` is zero-based; ``offset`` is the character offset of the
    marker itself (not of its line start).
    """

    line: int
    offset: int


class RouterAnchors(BaseModel):
    """Typed anchor positions found by :func:`~expressgen.patcher.anchors.find_anchors`.

    ``last_import_end`` is ``None`` when the text has no import line.
    ``declaration`` and ``export`` are ``None`` when the marker is absent;
    :func:`~expressgen.patcher.anchors.require_anchors` turns that into a
    :class:`~expressgen.exceptions.StructuralPatchError`.
    """

    last_import_end: Optional[int] = Field(
        default=None,
        description="Offset just past the last import line's line break",
    )
    declaration: Optional[Anchor] = None
    export: Optional[Anchor] = None
    bindings: list[str] = Field(
        default_factory=list, description="Default-import bindings, in file order"
    )
    newline: str = Field(default="\n", description="Line ending used by the text")
