"""ABP Helper configuration.

Typed settings for a scaffold run.  Uses a Pydantic v2 model so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global ABP Helper configuration.

    Created once by the CLI entry point and handed to the host adapters.
    """

    solution_dir: Path = Field(default=Path("."), description="Directory holding the .sln")
    application_name: str | None = Field(
        default=None,
        description="Overrides the name derived from the .sln file",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Directory with replacement .j2 templates",
    )
    packages_dir_name: str = Field(default="packages", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def packages_path(self) -> Path:
        """NuGet ``packages`` directory of the solution."""
        return self.solution_dir / self.packages_dir_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<solution_dir>/abphelper.json``.

        Returns:
            The path the file was written to.
        """
        target = path or (self.solution_dir / "abphelper.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ABPH_SOLUTION_DIR, ABPH_APP_NAME, ABPH_TEMPLATE_DIR,
            ABPH_PACKAGES_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ABPH_SOLUTION_DIR"):
            kwargs["solution_dir"] = Path(os.environ["ABPH_SOLUTION_DIR"])
        if os.environ.get("ABPH_APP_NAME"):
            kwargs["application_name"] = os.environ["ABPH_APP_NAME"]
        if os.environ.get("ABPH_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["ABPH_TEMPLATE_DIR"])
        if os.environ.get("ABPH_PACKAGES_DIR"):
            kwargs["packages_dir_name"] = os.environ["ABPH_PACKAGES_DIR"]
        return cls(**kwargs)
