"""File-system host adapter for an ABP solution directory.

Implements the engine's collaborator protocols on top of a checked-out
solution: projects are ``*.csproj`` files, folders are directories, and new
items are registered in the project file when the project lists its items
explicitly (pre-SDK ``.csproj`` format).
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path, PureWindowsPath

from abphelper.scaffolder.errors import FileIOError
from abphelper.scaffolder.models import ItemKind

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"

ET.register_namespace("", MSBUILD_NS)

# Directories never searched for project files.
_IGNORED_DIRS = {"bin", "obj", "packages", "node_modules", ".git", ".vs"}

_APPLICATION_RE = re.compile(r"(.+)\.Application")
_WEB_RE = re.compile(r"(.+)\.Web")


# ---------------------------------------------------------------------------
# Project tree
# ---------------------------------------------------------------------------


class CsprojProject:
    """A C# project identified by its ``.csproj`` file."""

    def __init__(self, project_file: Path) -> None:
        self.project_file = Path(project_file)
        self.name = self.project_file.stem
        self.directory = self.project_file.parent
        self.root = ProjectFolder(self, self.directory)

    def __repr__(self) -> str:
        return f"CsprojProject({self.name!r})"

    @property
    def is_sdk_style(self) -> bool:
        """SDK-style projects include files by glob and need no registration."""
        return _is_sdk_project(self._parse().getroot())

    def register(self, item: Path, kind: ItemKind) -> None:
        """Add *item* to the project file unless it is already listed.

        Files become ``<Compile>`` (``.cs``) or ``<Content>`` items; folders
        become ``<Folder>`` items.
        """
        tree = self._parse()
        root = tree.getroot()
        if _is_sdk_project(root):
            return

        include = str(PureWindowsPath(item.relative_to(self.directory)))
        if kind is ItemKind.PHYSICAL_FOLDER:
            element_name, include = "Folder", include + "\\"
        elif item.suffix.lower() == ".cs":
            element_name = "Compile"
        else:
            element_name = "Content"

        tag = f"{{{MSBUILD_NS}}}{element_name}"
        for existing in root.iter(tag):
            if existing.get("Include", "").lower() == include.lower():
                return

        group = _find_item_group(root, tag)
        ET.SubElement(group, tag, {"Include": include})
        try:
            tree.write(self.project_file, encoding="utf-8", xml_declaration=True)
        except OSError as exc:
            raise FileIOError(str(self.project_file), f"cannot write project file: {exc}") from exc

    def _parse(self) -> ET.ElementTree:
        # Comments and processing instructions survive the rewrite.
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
        try:
            return ET.parse(self.project_file, parser=parser)
        except (OSError, ET.ParseError) as exc:
            raise FileIOError(str(self.project_file), f"cannot read project file: {exc}") from exc


class ProjectFolder:
    """A directory inside a :class:`CsprojProject`."""

    def __init__(self, project: CsprojProject, path: Path) -> None:
        self.project = project
        self._path = Path(path)
        self.name = self._path.name

    def __repr__(self) -> str:
        return f"ProjectFolder({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectFolder):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def find_child(self, name: str, kind: ItemKind) -> "ProjectFolder | Path | None":
        candidate = self._path / name
        if kind is ItemKind.PHYSICAL_FOLDER:
            return ProjectFolder(self.project, candidate) if candidate.is_dir() else None
        return candidate if candidate.is_file() else None

    def add_folder(self, name: str) -> "ProjectFolder":
        candidate = self._path / name
        created = not candidate.is_dir()
        try:
            candidate.mkdir(exist_ok=True)
        except OSError as exc:
            raise FileIOError(str(candidate), f"cannot create folder: {exc}") from exc

        try:
            self.project.register(candidate, ItemKind.PHYSICAL_FOLDER)
        except FileIOError:
            # A folder on disk that the project does not list is not a valid result.
            if created:
                candidate.rmdir()
            raise
        return ProjectFolder(self.project, candidate)

    def add_file(self, path: Path) -> None:
        self.project.register(Path(path), ItemKind.PHYSICAL_FILE)


def _is_sdk_project(root: ET.Element) -> bool:
    return root.get("Sdk") is not None or root.find("Sdk") is not None


def _find_item_group(root: ET.Element, tag: str) -> ET.Element:
    """Return the first ``ItemGroup`` holding *tag* items, or a new one."""
    group_tag = f"{{{MSBUILD_NS}}}ItemGroup"
    for group in root.findall(group_tag):
        if group.find(tag) is not None:
            return group
    return ET.SubElement(root, group_tag)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class SolutionDirectory:
    """Finds the Application and Web projects of a solution on disk.

    Nested solution folders are searched recursively.  A project named
    exactly ``X.Application``/``X.Web`` wins over one that only contains the
    suffix (``X.Web.Mvc``); ``*.WebApi`` is never taken as the Web project.
    """

    def __init__(self, root: Path, application_name: str | None = None) -> None:
        self.root = Path(root)
        self._application_name = application_name
        self._projects: list[CsprojProject] | None = None

    def projects(self) -> list[CsprojProject]:
        if self._projects is None:
            self._projects = [
                CsprojProject(p)
                for p in sorted(self.root.rglob("*.csproj"))
                if not _IGNORED_DIRS.intersection(p.relative_to(self.root).parts[:-1])
            ]
        return self._projects

    def find_application_project(self) -> CsprojProject | None:
        return self._match(_APPLICATION_RE)

    def find_web_project(self) -> CsprojProject | None:
        return self._match(_WEB_RE, exclude=".WebApi")

    def application_name(self) -> str:
        if self._application_name:
            return self._application_name
        solutions = sorted(self.root.glob("*.sln"))
        if solutions:
            return solutions[0].stem
        return self.root.resolve().name

    def _match(self, pattern: re.Pattern[str], exclude: str | None = None) -> CsprojProject | None:
        candidates = [
            p for p in self.projects()
            if pattern.search(p.name) and not (exclude and exclude in p.name)
        ]
        for project in candidates:
            if pattern.fullmatch(project.name):
                return project
        return candidates[0] if candidates else None


class PackagesDirectoryInspector:
    """Lists NuGet package directories (``Abp.1.0.1.5`` etc.) of a solution.

    The ``packages`` directory next to the Web project's directory is always
    searched; *extra_dirs* are searched after it.
    """

    def __init__(self, packages_dir_name: str = "packages", extra_dirs: Iterable[Path] = ()) -> None:
        self.packages_dir_name = packages_dir_name
        self.extra_dirs = [Path(d) for d in extra_dirs]

    def list_installed_package_names(self, web_project: CsprojProject) -> list[str]:
        search = [web_project.directory.parent / self.packages_dir_name, *self.extra_dirs]
        names: list[str] = []
        seen: set[Path] = set()
        for directory in search:
            resolved = directory.resolve()
            if resolved in seen or not resolved.is_dir():
                continue
            seen.add(resolved)
            names.extend(sorted(p.name for p in resolved.iterdir() if p.is_dir()))
        return names
