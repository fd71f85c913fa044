"""Idempotent patching of the router-aggregator file.

:func:`patch` wires one resource into ``src/routes/index.js`` with two
edits, each skipped when already present:

1. an import of ``{name}Routes`` from ``./{name}.js``, placed after the last
   import line (or at the very top when the file has none);
2. a mount statement ``router.use('/{name}', {name}Routes);`` placed
   immediately before ``export default router;``.

New lines take the line ending already used by the file. The second edit
is located against the text produced by the first, so the two are always
applied in sequence. Both are pure string operations; reading and writing
the file is the caller's job (see :mod:`expressgen.scaffold.resource`).
"""

from __future__ import annotations

from expressgen.exceptions import InvalidUsageError
from expressgen.patcher.anchors import find_anchors, require_anchors


def import_statement(name: str, newline: str = "\n") -> str:
    """Return the import line for resource *name*, line ending included."""
    return f"import {name}Routes from './{name}.js';{newline}"


def mount_statement(name: str, newline: str = "\n") -> str:
    """Return the mount line for resource *name*, line ending included."""
    return f"router.use('/{name}', {name}Routes);{newline}"


def has_import(text: str, name: str) -> bool:
    """Return ``True`` if an import line of *text* binds ``{name}Routes``.

    Only real import lines count, so a commented-out import does not.
    """
    return f"{name}Routes" in find_anchors(text).bindings


def has_mount(text: str, name: str) -> bool:
    """Return ``True`` if *text* already mounts resource *name*.

    The guard matches the exact prefix :func:`mount_statement` writes, so a
    second :func:`patch` call with the same name never adds a duplicate.
    """
    return f"router.use('/{name}', " in text


def add_import(text: str, name: str) -> str:
    """Insert the import for *name* after the last import line of *text*.

    The new line uses the line ending of *text*.
    """
    if has_import(text, name):
        return text

    anchors = find_anchors(text)
    statement = import_statement(name, anchors.newline)
    if anchors.last_import_end is None:
        return statement + text

    end = anchors.last_import_end
    if not text[:end].endswith("\n"):
        # Last import is the final line and has no line break.
        statement = anchors.newline + import_statement(name, "")
    return text[:end] + statement + text[end:]


def add_mount(text: str, name: str) -> str:
    """Insert the mount statement for *name* right before the export statement.

    Raises:
        StructuralPatchError: If the declaration or export anchor is missing
            or out of order.
    """
    anchors = find_anchors(text)
    _, export = require_anchors(anchors)
    if has_mount(text, name):
        return text
    statement = mount_statement(name, anchors.newline)
    return text[: export.offset] + statement + text[export.offset :]


def patch(source_text: str, resource_name: str) -> str:
    """Return *source_text* with resource *resource_name* imported and mounted.

    Idempotent: calling ``patch`` on its own output with the same name
    returns the text unchanged. The input string is never modified.

    Args:
        source_text: Current contents of the router-aggregator file.
        resource_name: Resource identifier, e.g. ``"user"``.

    Returns:
        The patched text.

    Raises:
        InvalidUsageError: If *resource_name* is empty.
        StructuralPatchError: If the text lacks the router declaration or the
            export statement, or has them in the wrong order. Checked before
            any edit so nothing partial is returned.

    Example::

        patch(ROUTER_INDEX, "user")

        # import { Router } from 'express';
        # import userRoutes from './user.js';
        # const router = Router();
        # router.use('/user', userRoutes);
        # export default router;
    """
    if not resource_name:
        raise InvalidUsageError("Resource name must not be empty")

    require_anchors(find_anchors(source_text))
    patched = add_import(source_text, resource_name)
    return add_mount(patched, resource_name)
