"""Interfaces the engine needs from its host.

The engine never talks to an IDE or to the file system layout of a solution
directly; a host adapter (see :mod:`abphelper.host`) implements these
protocols and is injected into :class:`ScaffoldOrchestrator`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .models import ItemKind, Severity


class FolderNode(Protocol):
    """A folder in the project tree."""

    name: str

    @property
    def path(self) -> Path:
        """Physical directory backing this folder."""
        ...

    def find_child(self, name: str, kind: ItemKind) -> "FolderNode | Path | None":
        """Return the child folder node (or file path) called *name*, if any."""
        ...

    def add_folder(self, name: str) -> "FolderNode":
        """Create a child folder and return its node."""
        ...

    def add_file(self, path: Path) -> None:
        """Register an already-written file as an item of this folder."""
        ...


class Project(Protocol):
    name: str

    @property
    def root(self) -> FolderNode:
        ...


class ProjectDiscovery(Protocol):
    def find_application_project(self) -> Project | None:
        ...

    def find_web_project(self) -> Project | None:
        ...

    def application_name(self) -> str:
        ...


class DependencyInspector(Protocol):
    def list_installed_package_names(self, web_project: Project) -> list[str]:
        ...


class ProgressReporter(Protocol):
    def report(
        self,
        active: bool,
        message: str | None = None,
        step: int | None = None,
        total: int | None = None,
    ) -> None:
        ...

    def finish(self) -> None:
        ...


class UserNotifier(Protocol):
    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        ...
