"""Legacy-compatibility rule for the casing of the ABP views folder.

ABP 1.0.1.5 keeps its AngularJS views under ``App\\Main\\Views`` while every
other release uses ``App\\Main\\views``.  This module holds that one special
case and nothing more; it is not a general version-compatibility layer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

ABP_PACKAGE_MARKER = "Abp"
LEGACY_ABP_VERSION = "1.0.1.5"

_VIEWS_RE = re.compile("views", re.IGNORECASE)


class VersionAwarePathRule:
    """Rewrites ``views`` to ``Views`` when the legacy ABP package is installed."""

    def adjust(self, path: str, installed_versions: Iterable[str]) -> str:
        """Return *path* with its views segment cased for the installed ABP.

        *installed_versions* are package directory names such as
        ``Abp.1.0.1.5``.  Only the first occurrence of ``views`` is rewritten,
        and only when a legacy package is found.
        """
        for package in installed_versions:
            if _is_legacy_abp(package):
                return _VIEWS_RE.sub("Views", path, count=1)
        return path


def _is_legacy_abp(package: str) -> bool:
    if ABP_PACKAGE_MARKER not in package:
        return False
    # Fixed offset: "Abp.1.0.1.5" -> "1.0.1.5"
    version = package[len(ABP_PACKAGE_MARKER) + 1:]
    return version == LEGACY_ABP_VERSION
