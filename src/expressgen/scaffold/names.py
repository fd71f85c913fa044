"""Validation of user-supplied project and resource names.

A resource name ends up as a JavaScript binding (``{name}Routes``), a URL
segment and a file name, so it must be a plain identifier. Project names
only become a directory name.
"""

from __future__ import annotations

import re

from expressgen.exceptions import InvalidUsageError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def validate_resource_name(name: str) -> str:
    """Return *name* unchanged if it is a valid resource name.

    Raises:
        InvalidUsageError: If *name* is empty or not a JavaScript identifier.
    """
    if not name:
        raise InvalidUsageError("Resource name must not be empty")
    if not _IDENTIFIER_RE.match(name):
        raise InvalidUsageError(
            f"Invalid resource name '{name}': use letters, digits, '_' or '$', "
            "not starting with a digit"
        )
    return name


def validate_project_name(name: str) -> str:
    """Return *name* unchanged if it can be used as a new directory name.

    Raises:
        InvalidUsageError: If *name* is empty, ``.``/``..``, or contains a
            path separator.
    """
    if not name or not name.strip():
        raise InvalidUsageError("Project name must not be empty")
    if name in (".", "..") or "/" in name or "\\" in name:
        raise InvalidUsageError(
            f"Invalid project name '{name}': must be a single directory name"
        )
    return name
