"""Router-file patcher: anchor parsing and idempotent import/mount insertion.

Exports:
    patch: Pure ``(text, name) -> text`` transformation of ``src/routes/index.js``.
    find_anchors: Line tokenizer returning typed anchor positions.
"""

from expressgen.patcher.anchors import find_anchors, require_anchors
from expressgen.patcher.router import patch

__all__ = ["find_anchors", "patch", "require_anchors"]
