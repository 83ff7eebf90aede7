"""Idempotent updates of the aggregate style file."""

from __future__ import annotations

import logging
from pathlib import Path

__all__ = ["IMPORT_DIRECTIVE", "StyleIndex", "append_import", "import_line", "line_terminator"]


LOGGER = logging.getLogger(__name__)

IMPORT_DIRECTIVE = "@import"


def import_line(folder_name: str, style_file_name: str, newline: str = "\n") -> str:
    """Return the import line, terminator included, for one style file."""

    return f'{IMPORT_DIRECTIVE} "{folder_name}/{style_file_name}";{newline}'


def line_terminator(text: str) -> str:
    """Return ``"\\r\\n"`` for CRLF text and ``"\\n"`` otherwise."""

    return "\r\n" if "\r\n" in text else "\n"


def append_import(existing: str, line: str) -> str:
    """Return ``existing`` with ``line`` appended unless it is already present.

    When ``existing`` does not end with a line break, the terminator of
    ``line`` is inserted first.
    """

    if line in existing:
        return existing
    if existing and not existing.endswith("\n"):
        existing += line[len(line.rstrip("\r\n")):] or "\n"
    return existing + line


class StyleIndex:
    """File adapter around :func:`append_import`.

    The file is read and written without newline translation, and the
    import line uses the terminator already found in the file.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        with self._path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def add(self, folder_name: str, style_file_name: str) -> bool:
        """Register one style file, returning ``False`` when it was present."""

        current = self.read()
        line = import_line(folder_name, style_file_name, line_terminator(current))
        updated = append_import(current, line)
        if updated == current:
            LOGGER.info("Skipping %s update", self._path)
            return False

        LOGGER.info("Updating %s", self._path)
        with self._path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)
        return True
