"""ABP scaffolding engine -- generates service, interface and view files.

The engine works against a project tree supplied by the host (see
:mod:`abphelper.host` for the file-system implementation) and never
overwrites a file that already exists.

Quick usage::

    from abphelper.scaffolder import ScaffoldOrchestrator, ScaffoldRequest

    request = ScaffoldRequest.from_business_name("Order")
    orchestrator = ScaffoldOrchestrator(discovery, inspector, progress, notifier)
    if orchestrator.can_execute(request):
        result = orchestrator.execute(request)
"""

from abphelper.scaffolder.errors import (
    FileIOError,
    InvalidPathError,
    MissingProjectError,
    ScaffoldError,
    TemplateError,
)
from abphelper.scaffolder.materializer import FileMaterializer
from abphelper.scaffolder.models import (
    ItemKind,
    MaterializeResult,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldState,
    Severity,
    TemplateId,
    ViewFileSpec,
)
from abphelper.scaffolder.namespaces import NamespaceBuilder
from abphelper.scaffolder.orchestrator import ScaffoldOrchestrator
from abphelper.scaffolder.paths import PathResolver
from abphelper.scaffolder.templates import TemplateRenderer
from abphelper.scaffolder.version_rule import VersionAwarePathRule

__all__ = [
    "FileIOError",
    "FileMaterializer",
    "InvalidPathError",
    "ItemKind",
    "MaterializeResult",
    "MissingProjectError",
    "NamespaceBuilder",
    "PathResolver",
    "ScaffoldError",
    "ScaffoldOrchestrator",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldState",
    "Severity",
    "TemplateError",
    "TemplateId",
    "TemplateRenderer",
    "VersionAwarePathRule",
    "ViewFileSpec",
]
