"""Name validation and derivation helpers for component identifiers."""

from __future__ import annotations

import re

from .errors import NameValidationError

__all__ = [
    "CAMEL_NAME_PATTERN",
    "DASHED_NAME_PATTERN",
    "capitalize_first",
    "display_title",
    "entry_point_name",
    "is_camel_name",
    "is_dashed_name",
    "validate_camel_name",
    "validate_dashed_name",
]


CAMEL_NAME_PATTERN = re.compile(r"^[a-z]+([A-Z0-9][a-z0-9]+[A-Za-z0-9])*$")
DASHED_NAME_PATTERN = re.compile(r"^[a-z-]+$")


def is_camel_name(value: str) -> bool:
    return CAMEL_NAME_PATTERN.fullmatch(value) is not None


def is_dashed_name(value: str) -> bool:
    return DASHED_NAME_PATTERN.fullmatch(value) is not None


def validate_camel_name(value: str) -> str:
    """Return ``value`` unchanged or raise :class:`NameValidationError`."""

    if not is_camel_name(value):
        raise NameValidationError(
            value, f"Invalid name [{value}], name must be lowerCamelCase."
        )
    return value


def validate_dashed_name(value: str) -> str:
    """Return ``value`` unchanged or raise :class:`NameValidationError`."""

    if not is_dashed_name(value):
        raise NameValidationError(
            value, f"Invalid name [{value}], all lowercase and dashes."
        )
    return value


def capitalize_first(value: str) -> str:
    """Upper-case the first character only, unlike :meth:`str.capitalize`."""

    return value[:1].upper() + value[1:]


def display_title(dashed_name: str) -> str:
    """Return the human readable title for a dashed name.

    >>> display_title("hero-banner")
    'hero banner'
    """

    return " ".join(dashed_name.split("-"))


def entry_point_name(camel_name: str) -> str:
    return f"render{capitalize_first(camel_name)}"
