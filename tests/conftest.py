"""Shared pytest fixtures for the ABP Helper test suite.

Provides reusable fixtures for:
- An in-memory project tree backed by a temporary directory
- Recording fakes for discovery, package inspection, progress and notifications
- Sample scaffold requests
- A legacy (non-SDK) ABP solution laid out on disk
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from abphelper.scaffolder.models import ItemKind, ScaffoldRequest, Severity, ViewFileSpec
from abphelper.scaffolder.orchestrator import ScaffoldOrchestrator


# ---------------------------------------------------------------------------
# In-memory project tree
# ---------------------------------------------------------------------------


class TreeFolder:
    """Folder node that tracks its items in memory.

    Folders and files are mirrored to disk under *path* so the file
    materializer can write real files, but lookups only see registered items.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = path.name
        self.folders: dict[str, TreeFolder] = {}
        self.files: list[str] = []
        self.fail_on_add_file = False

    @property
    def path(self) -> Path:
        return self._path

    def find_child(self, name: str, kind: ItemKind):
        if kind is ItemKind.PHYSICAL_FOLDER:
            return self.folders.get(name)
        return self._path / name if name in self.files else None

    def add_folder(self, name: str) -> "TreeFolder":
        child = TreeFolder(self._path / name)
        child.path.mkdir(parents=True, exist_ok=True)
        self.folders[name] = child
        return child

    def add_file(self, path: Path) -> None:
        if self.fail_on_add_file:
            raise RuntimeError("project file is read-only")
        self.files.append(path.name)

    def walk(self, prefix: str = "") -> list[str]:
        """Return every folder and file below this node as ``a/b/c`` paths."""
        entries: list[str] = []
        for name, child in self.folders.items():
            entries.append(f"{prefix}{name}/")
            entries.extend(child.walk(f"{prefix}{name}/"))
        entries.extend(f"{prefix}{name}" for name in self.files)
        return entries


class FakeProject:
    def __init__(self, name: str, root: TreeFolder) -> None:
        self.name = name
        self.root = root


class FakeDiscovery:
    def __init__(self, app: FakeProject | None, web: FakeProject | None, app_name: str = "Acme") -> None:
        self.app = app
        self.web = web
        self.app_name = app_name

    def find_application_project(self):
        return self.app

    def find_web_project(self):
        return self.web

    def application_name(self) -> str:
        return self.app_name


class FakeInspector:
    def __init__(self, names: list[str] | None = None) -> None:
        self.names = names or []
        self.calls = 0

    def list_installed_package_names(self, web_project) -> list[str]:
        self.calls += 1
        return list(self.names)


class RecordingProgress:
    def __init__(self) -> None:
        self.reports: list[tuple[bool, str | None, int | None, int | None]] = []
        self.finish_calls = 0

    def report(self, active, message=None, step=None, total=None) -> None:
        self.reports.append((active, message, step, total))

    def finish(self) -> None:
        self.finish_calls += 1


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[tuple[str, Severity]] = []

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.messages.append((message, severity))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_project(tmp_path: Path) -> FakeProject:
    root = tmp_path / "Acme.Application"
    root.mkdir()
    return FakeProject("Acme.Application", TreeFolder(root))


@pytest.fixture
def web_project(tmp_path: Path) -> FakeProject:
    root = tmp_path / "Acme.Web"
    root.mkdir()
    return FakeProject("Acme.Web", TreeFolder(root))


@pytest.fixture
def inspector() -> FakeInspector:
    return FakeInspector()


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_orchestrator(app_project, web_project, inspector, progress, notifier):
    """Factory building an orchestrator wired to the recording fakes."""

    def _make(
        app=app_project, web=web_project, packages=inspector, renderer=None
    ) -> ScaffoldOrchestrator:
        return ScaffoldOrchestrator(
            discovery=FakeDiscovery(app, web),
            inspector=packages,
            progress=progress,
            notifier=notifier,
            renderer=renderer,
        )

    return _make


@pytest.fixture
def order_request() -> ScaffoldRequest:
    """Request from the end-to-end scenario: one non-popup view."""
    return ScaffoldRequest(
        business_name="Order",
        service_name="OrderService",
        service_interface_name="IOrderService",
        service_folder="Sales\\Orders",
        view_folder="App\\Main\\views",
        view_files=[ViewFileSpec(file_name="OrderList", is_popup=False)],
    )


# ---------------------------------------------------------------------------
# Solution on disk
# ---------------------------------------------------------------------------

LEGACY_CSPROJ = textwrap.dedent("""\
    <?xml version="1.0" encoding="utf-8"?>
    <Project ToolsVersion="14.0" DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
      <ItemGroup>
        <Compile Include="Properties\\AssemblyInfo.cs" />
      </ItemGroup>
    </Project>
""")

SDK_CSPROJ = textwrap.dedent("""\
    <Project Sdk="Microsoft.NET.Sdk">
      <PropertyGroup>
        <TargetFramework>net8.0</TargetFramework>
      </PropertyGroup>
    </Project>
""")


def write_project(solution: Path, name: str, content: str = LEGACY_CSPROJ) -> Path:
    project_dir = solution / name
    project_dir.mkdir(parents=True, exist_ok=True)
    project_file = project_dir / f"{name}.csproj"
    project_file.write_text(content, encoding="utf-8")
    return project_file


@pytest.fixture
def solution_dir(tmp_path: Path) -> Path:
    """Legacy ABP solution ``Acme`` with Application, Web and WebApi projects."""
    solution = tmp_path / "Acme"
    solution.mkdir()
    (solution / "Acme.sln").write_text("", encoding="utf-8")
    write_project(solution, "Acme.Application")
    write_project(solution, "Acme.WebApi")
    write_project(solution, "Acme.Web")
    (solution / "packages" / "Abp.0.9.1.1").mkdir(parents=True)
    (solution / "packages" / "EntityFramework.6.1.3").mkdir()
    return solution


@pytest.fixture
def tree(tmp_path: Path) -> TreeFolder:
    """Empty in-memory project tree rooted in a temporary directory."""
    root = tmp_path / "tree"
    root.mkdir()
    return TreeFolder(root)


@pytest.fixture
def sdk_solution_dir(tmp_path: Path) -> Path:
    """ABP solution whose projects use the SDK-style ``.csproj`` format."""
    solution = tmp_path / "Shop"
    (solution / "src").mkdir(parents=True)
    (solution / "Shop.sln").write_text("", encoding="utf-8")
    write_project(solution / "src", "Shop.Application", SDK_CSPROJ)
    write_project(solution / "src", "Shop.Web", SDK_CSPROJ)
    return solution
