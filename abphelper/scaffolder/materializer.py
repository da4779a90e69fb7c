"""Writes rendered content into the project tree without overwriting."""

from __future__ import annotations

from .collaborators import FolderNode
from .errors import FileIOError
from .models import ItemKind, MaterializeResult


class FileMaterializer:
    """Creates a file in a folder node unless it already exists.

    Existing files are never touched, so re-running a scaffold keeps any
    hand edits made to previously generated files.
    """

    def create_if_absent(
        self, folder: FolderNode, file_name: str, content: str
    ) -> MaterializeResult:
        if folder.find_child(file_name, ItemKind.PHYSICAL_FILE) is not None:
            return MaterializeResult.SKIPPED

        target = folder.path / file_name
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileIOError(str(target), f"write failed: {exc}") from exc

        try:
            folder.add_file(target)
        except Exception as exc:
            # A file on disk that the project does not list is not a valid result.
            target.unlink(missing_ok=True)
            raise FileIOError(str(target), f"could not add to project: {exc}") from exc

        return MaterializeResult.CREATED
