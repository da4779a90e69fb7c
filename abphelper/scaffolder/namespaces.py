"""Namespace derivation from folder paths."""

from __future__ import annotations

from .errors import InvalidPathError
from .paths import split_path


class NamespaceBuilder:
    """Derives dotted namespaces for view scripts and C# services."""

    @staticmethod
    def view(folder_path: str) -> str:
        """Lower-case the first character of each segment and join with dots.

        ``App\\Main\\Views`` -> ``app.Main.Views``.
        """
        return ".".join(_lower_first(s) for s in split_path(folder_path))

    @staticmethod
    def service(app_name: str, folder_path: str) -> str:
        """Prefix the dotted folder path with the application name.

        ``("Acme", "Sales\\Orders")`` -> ``Acme.Sales.Orders``.
        """
        if not app_name:
            raise InvalidPathError(app_name, "application name is empty")
        return f"{app_name}." + ".".join(split_path(folder_path))


def _lower_first(segment: str) -> str:
    return segment[:1].lower() + segment[1:]
