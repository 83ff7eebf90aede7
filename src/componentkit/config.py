"""Project layout configuration read from the host project's ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import PreconditionError

__all__ = ["DEFAULT_CONFIG_NAME", "ProjectPaths"]


DEFAULT_CONFIG_NAME = "package.json"


class ProjectPaths(BaseModel):
    """Locations of the aggregate files and output roots of a host project.

    Attributes
    ----------
    scripts_index:
        The aggregate script entry file (``paths.scripts``). It must exist for
        the directory to be recognised as a component project.
    styles_index:
        The aggregate style file (``paths.styles``) receiving one ``@import``
        line per styled component. It must exist as well.
    styles_root, scripts_root, markup_root:
        Directories under which a folder per component is created
        (``paths.lessPath``, ``paths.jsPath`` and ``paths.htlPath``).
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    scripts_index: Path = Field(..., alias="scripts")
    styles_index: Path = Field(..., alias="styles")
    styles_root: Path = Field(..., alias="lessPath")
    scripts_root: Path = Field(..., alias="jsPath")
    markup_root: Path = Field(..., alias="htlPath")

    @classmethod
    def from_mapping(cls, paths: Mapping[str, Any], *, root: str | Path | None = None) -> "ProjectPaths":
        """Build the configuration from a ``paths`` mapping.

        Relative entries are resolved against ``root`` (the current directory
        when omitted).
        """

        try:
            config = cls.model_validate(dict(paths))
        except ValidationError as exc:
            missing = ", ".join(str(error["loc"][0]) for error in exc.errors())
            raise PreconditionError(f"invalid project paths configuration: {missing}") from exc
        return config.resolved(root)

    @classmethod
    def from_package_json(cls, path: str | Path, *, root: str | Path | None = None) -> "ProjectPaths":
        """Load the ``paths`` object of the ``package.json`` at ``path``."""

        config_path = Path(path)
        try:
            document = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise PreconditionError(
                f"Are you sure you are in the right location? Could not find {config_path}"
            ) from exc
        except (OSError, ValueError) as exc:
            raise PreconditionError(f"could not read {config_path}: {exc}") from exc

        paths = document.get("paths") if isinstance(document, dict) else None
        if not isinstance(paths, dict):
            raise PreconditionError(f"{config_path} has no 'paths' object")

        base = Path(root) if root is not None else config_path.parent
        return cls.from_mapping(paths, root=base)

    def resolved(self, root: str | Path | None = None) -> "ProjectPaths":
        base = Path(root) if root is not None else Path.cwd()
        return self.model_copy(
            update={
                name: base / value
                for name, value in self.model_dump().items()
                if not Path(value).is_absolute()
            }
        )

    def verify(self) -> "ProjectPaths":
        """Ensure the aggregate files exist, raising :class:`PreconditionError`."""

        for required in (self.scripts_index, self.styles_index):
            if not required.exists():
                raise PreconditionError(
                    f"Are you sure you are in the right location? Could not find {required}"
                )
        return self
