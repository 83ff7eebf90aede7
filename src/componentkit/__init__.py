"""Interactive scaffolding of new web components.

The package asks for a component name in lowerCamelCase and dashed form,
derives the identifiers used by the generated files, writes the markup,
dialog, script and style starters into the host project and registers the
style file in the project's aggregate style index.
"""

from __future__ import annotations

from .config import ProjectPaths
from .errors import (
    ComponentKitError,
    NameValidationError,
    PreconditionError,
    UserCancellation,
    WriteError,
)
from .generator import ComponentGenerator, GeneratorState
from .index import StyleIndex, append_import, import_line, line_terminator
from .models import ComponentSpec, derive
from .prompts import InputCollector, Prompter, QuestionaryPrompter, summarize
from .scaffold import ComponentScaffolder, MaterializeReport
from .template import TemplateRenderer, TemplateRenderingError
from .templates import TemplateLibrary

__all__ = [
    "ComponentGenerator",
    "ComponentKitError",
    "ComponentScaffolder",
    "ComponentSpec",
    "GeneratorState",
    "InputCollector",
    "MaterializeReport",
    "NameValidationError",
    "PreconditionError",
    "ProjectPaths",
    "Prompter",
    "QuestionaryPrompter",
    "StyleIndex",
    "TemplateLibrary",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UserCancellation",
    "WriteError",
    "append_import",
    "derive",
    "import_line",
    "line_terminator",
    "summarize",
]

__version__ = "0.1.0"
