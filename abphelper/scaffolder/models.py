"""Value objects for one scaffold run.

``ScaffoldRequest`` is the input, the ``*FileModel`` classes are bound to the
Jinja2 templates, and ``ScaffoldResult`` reports what a run did.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TemplateId(str, Enum):
    """The four templates a scaffold run renders."""

    SERVICE_FILE = "ServiceFile"
    SERVICE_INTERFACE_FILE = "ServiceInterfaceFile"
    CSHTML_VIEW = "CshtmlView"
    JS_VIEW = "JsView"


class ItemKind(str, Enum):
    """Kind of child looked up under a folder node."""

    PHYSICAL_FOLDER = "folder"
    PHYSICAL_FILE = "file"


class MaterializeResult(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"


class ScaffoldState(str, Enum):
    """States of the scaffold workflow, in execution order."""

    VALIDATING = "validating"
    RESOLVING_SERVICE_FOLDERS = "resolving_service_folders"
    GENERATING_SERVICE_FILES = "generating_service_files"
    RESOLVING_VIEW_FOLDER = "resolving_view_folder"
    GENERATING_VIEW_FILES = "generating_view_files"
    DONE = "done"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value.strip()


class ViewFileSpec(BaseModel):
    """One view to generate: ``{file_name}.cshtml`` plus ``{file_name}.js``."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(..., min_length=1, description="File name without extension")
    is_popup: bool = Field(default=False, description="Render the view as a modal popup")

    @field_validator("file_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        value = _not_blank(value)
        if "\\" in value or "/" in value:
            raise ValueError("must be a file name, not a path")
        return value


class ScaffoldRequest(BaseModel):
    """Everything needed to scaffold one business area."""

    model_config = ConfigDict(frozen=True)

    business_name: str = Field(..., min_length=1)
    service_name: str = Field(..., min_length=1)
    service_interface_name: str = Field(..., min_length=1)
    service_folder: str = Field(..., min_length=1, description="e.g. Sales\\Orders")
    view_folder: str = Field(..., min_length=1, description="e.g. App\\Main\\views\\orders")
    view_files: list[ViewFileSpec] = Field(default_factory=list)

    @field_validator(
        "business_name",
        "service_name",
        "service_interface_name",
        "service_folder",
        "view_folder",
    )
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _not_blank(value)

    @model_validator(mode="after")
    def _check_names(self) -> "ScaffoldRequest":
        if self.service_name == self.service_interface_name:
            raise ValueError("service_name and service_interface_name must differ")
        seen: set[str] = set()
        for spec in self.view_files:
            # .cshtml/.js lookups are case-insensitive on Windows hosts
            key = spec.file_name.lower()
            if key in seen:
                raise ValueError(f"duplicate view file name: {spec.file_name}")
            seen.add(key)
        return self

    @property
    def total_steps(self) -> int:
        """Progress steps for a run: service + interface, then two per view."""
        return 2 + 2 * len(self.view_files)

    @classmethod
    def from_business_name(cls, business_name: str) -> "ScaffoldRequest":
        """Build a request with the conventional ABP names for *business_name*.

        ``Order`` gives ``OrderAppService``/``IOrderAppService`` in folder
        ``Order``, and the views ``order`` and ``createOrEditOrderModal``
        under ``App\\Main\\views\\order``.
        """
        name = business_name.strip()
        camel = name[:1].lower() + name[1:]
        return cls(
            business_name=name,
            service_name=f"{name}AppService",
            service_interface_name=f"I{name}AppService",
            service_folder=name,
            view_folder=f"App\\Main\\views\\{camel}",
            view_files=[
                ViewFileSpec(file_name=camel, is_popup=False),
                ViewFileSpec(file_name=f"createOrEdit{name}Modal", is_popup=True),
            ],
        )

    @classmethod
    def load(cls, path: str | Path) -> "ScaffoldRequest":
        """Load a request from a JSON file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate(json.loads(raw))


# ---------------------------------------------------------------------------
# Template models
# ---------------------------------------------------------------------------


class ServiceFileModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_name: str
    namespace: str
    interface_name: str
    service_name: str


class ServiceInterfaceFileModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    namespace: str
    interface_name: str


class ViewFileModel(BaseModel):
    """Bound to both the markup and the script template of one view."""

    model_config = ConfigDict(frozen=True)

    business_name: str
    namespace: str
    file_name: str
    is_popup: bool
    view_folder: str
    view_files: list[ViewFileSpec]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of :meth:`ScaffoldOrchestrator.execute`."""

    state: ScaffoldState
    created: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    step: int = 0
    total_steps: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.state is ScaffoldState.DONE
