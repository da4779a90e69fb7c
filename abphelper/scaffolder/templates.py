"""Jinja2 template rendering for scaffolded ABP files.

Provides the TemplateRenderer class which loads the four Jinja2 templates
(service, service interface, Razor view, AngularJS view script) from the
``abphelper/scaffolder/templates/`` directory and renders them with a typed
template model.  Rendering is pure: the same template and model always give
the same text.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
    select_autoescape,
)
from pydantic import BaseModel

from .errors import TemplateError
from .models import TemplateId


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_FILES: dict[TemplateId, str] = {
    TemplateId.SERVICE_FILE: "ServiceFile.cs.j2",
    TemplateId.SERVICE_INTERFACE_FILE: "ServiceInterfaceFile.cs.j2",
    TemplateId.CSHTML_VIEW: "CshtmlView.cshtml.j2",
    TemplateId.JS_VIEW: "JsView.js.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders scaffold templates bound to a template model.

    Templates use ``StrictUndefined`` so a template referring to a field the
    model does not carry fails instead of silently rendering an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["lower_first"] = _lower_first_filter
        self.env.filters["upper_first"] = _upper_first_filter
        self.env.filters["web_path"] = _web_path_filter

    def render(self, template_id: TemplateId, model: BaseModel) -> str:
        """Render the template for *template_id* with the fields of *model*.

        Raises:
            TemplateError: If the template is missing, does not compile,
                references a field the model does not provide, or fails
                while rendering.
        """
        name = TEMPLATE_FILES[template_id]
        with self._errors(name):
            return self.env.get_template(name).render(**model.model_dump())

    def check(self) -> None:
        """Load every template once so a broken template set fails early."""
        for name in TEMPLATE_FILES.values():
            with self._errors(name):
                self.env.get_template(name)

    def list_templates(self) -> dict[TemplateId, Path]:
        """Return the file backing each template id."""
        return {tid: self.template_dir / name for tid, name in TEMPLATE_FILES.items()}

    @contextmanager
    def _errors(self, name: str) -> Iterator[None]:
        """Translate any Jinja2 failure for template *name* into TemplateError."""
        try:
            yield
        except TemplateNotFound as exc:
            raise TemplateError(name, f"not found in {self.template_dir}") from exc
        except TemplateSyntaxError as exc:
            raise TemplateError(name, f"line {exc.lineno}: {exc.message}") from exc
        except UndefinedError as exc:
            raise TemplateError(name, f"binding failed: {exc.message}") from exc
        except JinjaTemplateError as exc:
            raise TemplateError(name, f"render failed: {exc}") from exc
        except (TypeError, ValueError) as exc:
            # Filters called with bad arguments raise plain Python errors.
            raise TemplateError(name, f"render failed: {exc}") from exc


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _lower_first_filter(value: str) -> str:
    """``OrderList`` -> ``orderList``."""
    return value[:1].lower() + value[1:]


def _upper_first_filter(value: str) -> str:
    """``createOrEditOrderModal`` -> ``CreateOrEditOrderModal``."""
    return value[:1].upper() + value[1:]


def _web_path_filter(value: str) -> str:
    """``App\\Main\\views\\order`` -> ``App/Main/views/order``."""
    return value.replace("\\", "/")
