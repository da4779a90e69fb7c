"""Host adapters: a solution directory on disk and a Rich console."""

from abphelper.host.console import ConsoleNotifier, RichProgressReporter
from abphelper.host.solution import (
    CsprojProject,
    PackagesDirectoryInspector,
    ProjectFolder,
    SolutionDirectory,
)

__all__ = [
    "ConsoleNotifier",
    "CsprojProject",
    "PackagesDirectoryInspector",
    "ProjectFolder",
    "RichProgressReporter",
    "SolutionDirectory",
]
