"""Built-in component templates and the library that selects between them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .template import TemplateRenderer

__all__ = ["TEMPLATE_FILES", "TemplateLibrary"]


STYLE_TEMPLATE = """// {{ display_title|title }}
.{{ style_selector_name }} {

}
"""

SCRIPT_TEMPLATE = """/**
 * {{ display_title|title }} component behaviour.
 */
(function ($) {
  'use strict';

  var SELECTOR = '.{{ style_selector_name }}';

  function init(element) {
    // component setup goes here
  }

  $(function () {
    $(SELECTOR).each(function () {
      init(this);
    });
  });
})(jQuery);
"""

MARKUP_TEMPLATE = """<template data-sly-template.{{ markup_entry_point_name }}="${@ model}">
  <div class="{{ style_selector_name }}">
  </div>
</template>
"""

MARKUP_METADATA_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<jcr:root xmlns:sling="http://sling.apache.org/jcr/sling/1.0" xmlns:cq="http://www.day.com/jcr/cq/1.0" xmlns:jcr="http://www.jcp.org/jcr/1.0" xmlns:nt="http://www.jcp.org/jcr/nt/1.0"
    jcr:primaryType="nt:unstructured"
    jcr:title="{{ display_title|title }}"
    sling:resourceType="cq/gui/components/authoring/dialog">
    <content
        jcr:primaryType="nt:unstructured"
        sling:resourceType="granite/ui/components/foundation/container">
        <items jcr:primaryType="nt:unstructured"/>
    </content>
</jcr:root>
"""

BUILTIN_TEMPLATES: dict[str, str] = {
    "style": STYLE_TEMPLATE,
    "script": SCRIPT_TEMPLATE,
    "markup": MARKUP_TEMPLATE,
    "markup_metadata": MARKUP_METADATA_TEMPLATE,
}

# File names looked up in an override directory.
TEMPLATE_FILES: dict[str, str] = {
    "style": "component.less",
    "script": "component.js",
    "markup": "component.html",
    "markup_metadata": "content.xml",
}


@dataclass(slots=True)
class TemplateLibrary:
    """Render component templates by identifier.

    When ``directory`` is set, a file named after the template (see
    :data:`TEMPLATE_FILES`) replaces the built-in text for that template.
    """

    renderer: TemplateRenderer
    directory: Path | None

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        directory: str | Path | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.directory = Path(directory) if directory is not None else None

    def override(self, template_id: str) -> Path | None:
        """Return the override file for ``template_id`` when one exists."""

        if self.directory is None:
            return None
        candidate = self.directory / TEMPLATE_FILES[template_id]
        return candidate if candidate.is_file() else None

    def render(self, template_id: str, context: Mapping[str, Any]) -> str:
        if template_id not in BUILTIN_TEMPLATES:
            raise KeyError(f"unknown template '{template_id}'")
        override = self.override(template_id)
        if override is not None:
            return self.renderer.render_file(override, context)
        return self.renderer.render_string(BUILTIN_TEMPLATES[template_id], context)
