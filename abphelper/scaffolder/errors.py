"""Exceptions raised by the scaffolding engine.

Every failure the engine knows how to describe derives from
:class:`ScaffoldError`, so the orchestrator can catch the whole family at its
boundary and turn it into a single user-facing message.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidPathError(ScaffoldError):
    """Raised for an empty folder path or a path with an empty segment."""

    def __init__(self, path: str, reason: str = "empty path segment") -> None:
        self.path = path
        super().__init__(f"Invalid folder path {path!r}: {reason}")


class MissingProjectError(ScaffoldError):
    """Raised when the Application or Web project cannot be found."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Cannot find the {kind} project. "
            "Please ensure that you are in the ABP solution."
        )


class TemplateError(ScaffoldError):
    """Raised when a template cannot be located, compiled or bound."""

    def __init__(self, template_name: str, message: str) -> None:
        self.template_name = template_name
        super().__init__(f"Template {template_name!r}: {message}")


class FileIOError(ScaffoldError):
    """Raised when a file cannot be written or registered in the project."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
