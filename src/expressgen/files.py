"""File-writing helpers shared by the config layer and the scaffolders.

:func:`atomic_write` writes through a temp file in the target directory and
renames it over the destination, so a crash never leaves a half-written
``src/routes/index.js`` or ``config.json`` behind. :func:`write_files`
writes a batch of generated files relative to a root directory.

Batches are not transactional: if one write fails, files already written
in the same batch stay on disk.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Optional


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up and the exception propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


def write_files(root: Path, files: Mapping[str, str]) -> list[str]:
    """Write each ``relative_path -> content`` entry of *files* under *root*.

    Parent directories are created as needed. Entries are independent of
    each other and written in mapping order.

    Returns:
        The relative paths written, in order.
    """
    written: list[str] = []
    for rel_path, content in files.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8", newline="")
        written.append(rel_path)
    return written
