"""Write the starter files of a component into the host project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectPaths
from .errors import WriteError
from .index import StyleIndex
from .models import ComponentSpec
from .template import TemplateRenderingError
from .templates import TemplateLibrary

__all__ = ["ComponentScaffolder", "MaterializeReport"]


LOGGER = logging.getLogger(__name__)

STYLE_EXTENSION = ".less"
SCRIPT_EXTENSION = ".js"
MARKUP_EXTENSION = ".html"
MARKUP_METADATA_PATH = Path("_cq_dialog") / ".content.xml"


@dataclass(slots=True)
class MaterializeReport:
    """Outcome of :meth:`ComponentScaffolder.materialize`."""

    written: list[Path] = field(default_factory=list)
    index_updated: bool = False


class ComponentScaffolder:
    """Render the component templates into the directories of ``paths``."""

    def __init__(
        self,
        paths: ProjectPaths,
        templates: TemplateLibrary | None = None,
        *,
        force: bool = False,
    ) -> None:
        self.paths = paths
        self.templates = templates or TemplateLibrary()
        self.force = force

    def _write(self, step: str, template_id: str, destination: Path, spec: ComponentSpec) -> Path:
        try:
            if destination.exists() and not self.force:
                raise FileExistsError(f"{destination} already exists")
            rendered = self.templates.render(template_id, spec.context())
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            raise WriteError(step, destination, exc.strerror or str(exc)) from exc
        except (TemplateRenderingError, UnicodeDecodeError) as exc:
            raise WriteError(step, destination, str(exc)) from exc
        LOGGER.info("Created %s", destination)
        return destination

    def write_style_file(self, spec: ComponentSpec) -> Path | None:
        if spec.style_file_name is None:
            return None
        destination = self.paths.styles_root / spec.folder_name / f"{spec.style_file_name}{STYLE_EXTENSION}"
        return self._write("write_style_file", "style", destination, spec)

    def write_script_file(self, spec: ComponentSpec) -> Path:
        """Write the script file.

        The file is written whether or not a script was requested; the answer
        only decides whether ``script_file_name`` is set.
        """

        base_name = spec.script_file_name or spec.camel_name
        destination = self.paths.scripts_root / spec.folder_name / f"{base_name}{SCRIPT_EXTENSION}"
        return self._write("write_script_file", "script", destination, spec)

    def write_markup_file(self, spec: ComponentSpec) -> Path:
        destination = self.paths.markup_root / spec.folder_name / f"{spec.markup_name}{MARKUP_EXTENSION}"
        return self._write("write_markup_file", "markup", destination, spec)

    def write_markup_metadata_file(self, spec: ComponentSpec) -> Path:
        destination = self.paths.markup_root / spec.folder_name / MARKUP_METADATA_PATH
        return self._write("write_markup_metadata_file", "markup_metadata", destination, spec)

    def update_style_index(self, spec: ComponentSpec) -> bool:
        """Add the component's import to the aggregate style file.

        Returns ``True`` when the file changed. Components without styles
        leave the index untouched.
        """

        if spec.style_file_name is None:
            return False
        index = StyleIndex(self.paths.styles_index)
        try:
            return index.add(spec.folder_name, spec.style_file_name)
        except OSError as exc:
            raise WriteError("update_style_index", index.path, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise WriteError("update_style_index", index.path, str(exc)) from exc

    def materialize(self, spec: ComponentSpec) -> MaterializeReport:
        """Run every step in order; the first failure aborts the rest."""

        report = MaterializeReport()
        for step in (
            self.write_style_file,
            self.write_script_file,
            self.write_markup_file,
            self.write_markup_metadata_file,
        ):
            written = step(spec)
            if written is not None:
                report.written.append(written)
        report.index_updated = self.update_style_index(spec)
        return report
