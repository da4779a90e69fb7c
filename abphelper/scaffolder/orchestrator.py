"""Top-level scaffold workflow.

Drives one "add new business" run against the Application and Web projects
of an ABP solution:

1. VALIDATING                -- both projects must have been discovered.
2. RESOLVING_SERVICE_FOLDERS -- service folder plus its ``Dto`` child.
3. GENERATING_SERVICE_FILES  -- ``{Service}.cs`` and ``{IService}.cs``.
4. RESOLVING_VIEW_FOLDER     -- view folder, cased for the installed ABP.
5. GENERATING_VIEW_FILES     -- ``.cshtml`` + ``.js`` per requested view.
6. DONE

Any failure after validation moves the run to FAILED and is reported to the
user as one message.  Files created before the failure stay in place; a
re-run skips them.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from .collaborators import (
    DependencyInspector,
    FolderNode,
    ProgressReporter,
    Project,
    ProjectDiscovery,
    UserNotifier,
)
from .errors import MissingProjectError
from .materializer import FileMaterializer
from .models import (
    MaterializeResult,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldState,
    ServiceFileModel,
    ServiceInterfaceFileModel,
    Severity,
    TemplateId,
    ViewFileModel,
)
from .namespaces import NamespaceBuilder
from .paths import PathResolver
from .templates import TemplateRenderer
from .version_rule import VersionAwarePathRule

DTO_FOLDER = "Dto"

# (extension, template) pairs generated for every view, in order
VIEW_FILE_KINDS: tuple[tuple[str, TemplateId], ...] = (
    (".cshtml", TemplateId.CSHTML_VIEW),
    (".js", TemplateId.JS_VIEW),
)


@dataclass
class ProgressState:
    """Step counter for one run; only ever moves forward."""

    total: int
    current: int = 0

    def advance(self) -> int:
        self.current += 1
        return self.current


class ScaffoldOrchestrator:
    """Runs the scaffold workflow against injected host collaborators.

    Attributes:
        state: Current :class:`ScaffoldState` of the most recent run.
    """

    def __init__(
        self,
        discovery: ProjectDiscovery,
        inspector: DependencyInspector,
        progress: ProgressReporter,
        notifier: UserNotifier,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.discovery = discovery
        self.inspector = inspector
        self.progress = progress
        self.notifier = notifier
        self.renderer = renderer or TemplateRenderer()
        self.resolver = PathResolver()
        self.namespaces = NamespaceBuilder()
        self.version_rule = VersionAwarePathRule()
        self.materializer = FileMaterializer()

        self.state = ScaffoldState.VALIDATING
        self._app_project: Project | None = None
        self._web_project: Project | None = None

    # -- Preconditions -----------------------------------------------------

    def can_execute(self, request: ScaffoldRequest) -> bool:
        """Discover the Application and Web projects.

        Notifies the user and returns ``False`` if either is missing; in that
        case :meth:`execute` must not be called.
        """
        self._app_project = self.discovery.find_application_project()
        self._web_project = self.discovery.find_web_project()

        if self._app_project is None:
            self.notifier.notify(str(MissingProjectError("Application")), Severity.WARNING)
            return False
        if self._web_project is None:
            self.notifier.notify(str(MissingProjectError("Web")), Severity.WARNING)
            return False
        return True

    # -- Workflow ----------------------------------------------------------

    def execute(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the service, interface and view files for *request*.

        Raises:
            MissingProjectError: If :meth:`can_execute` has not found both
                projects.  Nothing is created in that case.
        """
        self.state = ScaffoldState.VALIDATING
        if self._app_project is None or self._web_project is None:
            self.state = ScaffoldState.FAILED
            raise MissingProjectError("Application" if self._app_project is None else "Web")

        progress = ProgressState(total=request.total_steps)
        result = ScaffoldResult(state=self.state, total_steps=progress.total)

        try:
            self.state = ScaffoldState.RESOLVING_SERVICE_FOLDERS
            service_folder = self.resolver.resolve(
                self._app_project.root, request.service_folder
            )
            # Reserved for data-transfer objects; created even when empty.
            self.resolver.resolve(service_folder, DTO_FOLDER)

            self.state = ScaffoldState.GENERATING_SERVICE_FILES
            self._create_service_files(request, service_folder, progress, result)

            self.state = ScaffoldState.RESOLVING_VIEW_FOLDER
            installed = self.inspector.list_installed_package_names(self._web_project)
            view_path = self.version_rule.adjust(request.view_folder, installed)
            view_folder = self.resolver.resolve(self._web_project.root, view_path)

            self.state = ScaffoldState.GENERATING_VIEW_FILES
            self._create_view_files(request, view_folder, progress, result)

            self.state = ScaffoldState.DONE
            self.notifier.notify("Done!", Severity.INFO)
        except Exception as exc:
            self.state = ScaffoldState.FAILED
            result.error = str(exc)
            self.notifier.notify(
                f"Generation failed.\nException: {exc}", Severity.WARNING
            )
        finally:
            self.progress.finish()

        result.state = self.state
        result.step = progress.current
        return result

    # -- Service files -----------------------------------------------------

    def _create_service_files(
        self,
        request: ScaffoldRequest,
        folder: FolderNode,
        progress: ProgressState,
        result: ScaffoldResult,
    ) -> None:
        app_name = self.discovery.application_name()
        namespace = self.namespaces.service(app_name, request.service_folder)

        file_name = f"{request.service_name}.cs"
        self._report(progress, f"Generating service file: {file_name}")
        service_model = ServiceFileModel(
            app_name=app_name,
            namespace=namespace,
            interface_name=request.service_interface_name,
            service_name=request.service_name,
        )
        self._materialize(folder, file_name, TemplateId.SERVICE_FILE, service_model, result)

        file_name = f"{request.service_interface_name}.cs"
        self._report(progress, f"Generating interface file: {file_name}")
        interface_model = ServiceInterfaceFileModel(
            namespace=namespace,
            interface_name=request.service_interface_name,
        )
        self._materialize(
            folder, file_name, TemplateId.SERVICE_INTERFACE_FILE, interface_model, result
        )

    # -- View files --------------------------------------------------------

    def _create_view_files(
        self,
        request: ScaffoldRequest,
        folder: FolderNode,
        progress: ProgressState,
        result: ScaffoldResult,
    ) -> None:
        namespace = self.namespaces.view(request.view_folder)
        for spec in request.view_files:
            model = ViewFileModel(
                business_name=request.business_name,
                namespace=namespace,
                file_name=spec.file_name,
                is_popup=spec.is_popup,
                view_folder=request.view_folder,
                view_files=request.view_files,
            )
            for extension, template_id in VIEW_FILE_KINDS:
                file_name = spec.file_name + extension
                self._report(progress, f"Generating view file: {file_name}")
                self._materialize(folder, file_name, template_id, model, result)

    # -- Helpers -----------------------------------------------------------

    def _report(self, progress: ProgressState, message: str) -> None:
        step = progress.advance()
        self.progress.report(True, message, step, progress.total)

    def _materialize(
        self,
        folder: FolderNode,
        file_name: str,
        template_id: TemplateId,
        model: BaseModel,
        result: ScaffoldResult,
    ) -> None:
        target = str(folder.path / file_name)
        content = self.renderer.render(template_id, model)
        outcome = self.materializer.create_if_absent(folder, file_name, content)
        if outcome is MaterializeResult.CREATED:
            result.created.append(target)
        else:
            result.skipped.append(target)
