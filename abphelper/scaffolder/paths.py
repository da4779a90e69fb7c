"""Folder path splitting and find-or-create resolution in the project tree."""

from __future__ import annotations

import re

from .collaborators import FolderNode
from .errors import InvalidPathError
from .models import ItemKind

# Project paths use the Windows separator; "/" is accepted as well.
_SEPARATOR_RE = re.compile(r"[\\/]")


def split_path(path: str) -> list[str]:
    """Split ``"a\\b\\c"`` into ``["a", "b", "c"]``.

    Raises:
        InvalidPathError: If *path* is empty or contains an empty segment
            (leading/trailing/doubled separators).
    """
    if not path:
        raise InvalidPathError(path, "path is empty")
    segments = _SEPARATOR_RE.split(path)
    if any(not segment.strip() for segment in segments):
        raise InvalidPathError(path)
    return segments


class PathResolver:
    """Finds or creates each folder of a delimited path under a root node."""

    def resolve(self, root: FolderNode, path: str) -> FolderNode:
        """Return the deepest folder of *path* under *root*, creating missing ones.

        Existing folders are reused, so resolving the same path twice yields
        the same node and no duplicate folders.
        """
        current = root
        for segment in split_path(path):
            existing = current.find_child(segment, ItemKind.PHYSICAL_FOLDER)
            current = existing if existing is not None else current.add_folder(segment)
        return current
