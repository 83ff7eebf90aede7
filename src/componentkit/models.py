"""The validated description of a single component scaffold request."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import display_title, entry_point_name, validate_camel_name, validate_dashed_name

__all__ = ["ComponentSpec", "derive"]


class ComponentSpec(BaseModel):
    """Names and options describing one component to scaffold.

    Instances are normally built with :func:`derive`, which fills in every
    derived field from the four operator answers.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    camel_name: str = Field(..., description="Component name in lowerCamelCase.")
    dashed_name: str = Field(..., description="Component name in lowercase-with-dashes.")
    include_styles: bool = Field(..., description="Whether a style file is generated.")
    include_script: bool = Field(..., description="Whether the operator asked for a script.")
    folder_name: str = Field(..., description="Directory created under every output root.")
    style_selector_name: str = Field(..., description="CSS selector used by the generated files.")
    script_file_name: Optional[str] = Field(None, description="Script base name, set only when scripted.")
    display_title: str = Field(..., description="Human readable title used in dialog metadata.")
    markup_name: str = Field(..., description="Base name of the markup file.")
    markup_entry_point_name: str = Field(..., description="Name of the generated markup template.")
    style_file_name: Optional[str] = Field(None, description="Style base name, set only when styled.")

    @field_validator("camel_name")
    @classmethod
    def _check_camel_name(cls, value: str) -> str:
        return validate_camel_name(value)

    @field_validator("dashed_name")
    @classmethod
    def _check_dashed_name(cls, value: str) -> str:
        return validate_dashed_name(value)

    def context(self) -> Dict[str, Any]:
        """Return a dictionary compatible with the templating helpers."""

        return self.model_dump()


def derive(
    camel_name: str,
    dashed_name: str,
    *,
    include_styles: bool,
    include_script: bool,
) -> ComponentSpec:
    """Build a :class:`ComponentSpec` from already validated operator answers."""

    return ComponentSpec(
        camel_name=camel_name,
        dashed_name=dashed_name,
        include_styles=include_styles,
        include_script=include_script,
        folder_name=camel_name,
        style_selector_name=dashed_name,
        script_file_name=camel_name if include_script else None,
        display_title=display_title(dashed_name),
        markup_name=camel_name,
        markup_entry_point_name=entry_point_name(camel_name),
        style_file_name=camel_name if include_styles else None,
    )
