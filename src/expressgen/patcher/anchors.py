"""Line tokenizer that locates the structural anchors of a router file.

A generated ``src/routes/index.js`` has this shape::

    import { Router } from 'express';      <- import lines (zero or more)
    import userRoutes from './user.js';
    const router = Router();               <- router declaration
    router.use('/user', userRoutes);       <- mount statements (zero or more)
    export default router;                 <- export statement

:func:`find_anchors` walks the text line by line and records where each
marker sits, returning a :class:`~expressgen.models.RouterAnchors` instead
of raw ``str.find`` offsets, so that a missing marker is an explicit
``None`` rather than ``-1``. :func:`require_anchors` then enforces the
declaration-before-export ordering the patcher depends on.
"""

from __future__ import annotations

import re

from expressgen.exceptions import StructuralPatchError
from expressgen.models import Anchor, RouterAnchors

DECLARATION_MARKER = "const router = Router();"
EXPORT_MARKER = "export default router;"

_IMPORT_LINE_RE = re.compile(r"^\s*import(?=[\s{'\"*])")
_DEFAULT_BINDING_RE = re.compile(r"^\s*import\s+([A-Za-z_$][\w$]*)")


def is_import_line(line: str) -> bool:
    """Return ``True`` if *line* starts with the ``import`` keyword.

    ``important()`` or ``reimport`` do not count; the keyword must be
    followed by whitespace, a brace, a quote or ``*``.
    """
    return bool(_IMPORT_LINE_RE.match(line))


def import_binding(line: str) -> str | None:
    """Return the default-import binding of an import line, if it has one.

    ``import userRoutes from './user.js';`` -> ``"userRoutes"``;
    ``import { Router } from 'express';`` -> ``None``.
    """
    match = _DEFAULT_BINDING_RE.match(line)
    if match is None or match.group(1) == "from":
        return None
    return match.group(1)


def find_anchors(text: str) -> RouterAnchors:
    """Scan *text* and return the positions of every structural anchor.

    Lines are split on ``\\n`` only, so offsets stay valid for texts using
    ``\\r\\n`` endings (the ``\\r`` remains part of the line).

    Args:
        text: Full router source text.

    Returns:
        A :class:`~expressgen.models.RouterAnchors`. The declaration and
        export anchors refer to the first occurrence of their markers;
        ``last_import_end`` refers to the last import line. ``newline`` is
        ``"\\r\\n"`` if the text contains any CRLF ending.
    """
    anchors = RouterAnchors(newline="\r\n" if "\r\n" in text else "\n")
    offset = 0
    for index, line in enumerate(text.split("\n")):
        if is_import_line(line):
            anchors.last_import_end = min(offset + len(line) + 1, len(text))
            binding = import_binding(line)
            if binding is not None:
                anchors.bindings.append(binding)

        if anchors.declaration is None:
            column = line.find(DECLARATION_MARKER)
            if column != -1:
                anchors.declaration = Anchor(line=index, offset=offset + column)

        if anchors.export is None:
            column = line.find(EXPORT_MARKER)
            if column != -1:
                anchors.export = Anchor(line=index, offset=offset + column)

        offset += len(line) + 1
    return anchors


def require_anchors(anchors: RouterAnchors) -> tuple[Anchor, Anchor]:
    """Check that both the declaration and export anchors exist and are ordered.

    Returns:
        ``(declaration, export)``.

    Raises:
        StructuralPatchError: If either marker is missing, or the export
            statement precedes the router declaration.
    """
    if anchors.export is None:
        raise StructuralPatchError(
            f"Router file has no '{EXPORT_MARKER}' statement", anchor="export"
        )
    if anchors.declaration is None:
        raise StructuralPatchError(
            f"Router file has no '{DECLARATION_MARKER}' declaration",
            anchor="declaration",
        )
    if anchors.export.offset < anchors.declaration.offset:
        raise StructuralPatchError(
            f"'{EXPORT_MARKER}' appears before '{DECLARATION_MARKER}' "
            f"(line {anchors.export.line + 1})",
            anchor="export",
        )
    return anchors.declaration, anchors.export
