from __future__ import annotations

import json
from pathlib import Path

import pytest

from componentkit.config import ProjectPaths
from componentkit.errors import PreconditionError


def test_from_package_json_resolves_against_project(project_root: Path):
    paths = ProjectPaths.from_package_json(project_root / "package.json")
    assert paths.scripts_index == project_root / "ui" / "src" / "app.js"
    assert paths.styles_index == project_root / "ui" / "src" / "app.less"
    assert paths.styles_root == project_root / "ui" / "src" / "components"
    assert paths.scripts_root == project_root / "ui" / "src" / "components"
    assert paths.markup_root == project_root / "apps" / "site" / "components"


def test_from_mapping_keeps_absolute_paths(tmp_path: Path):
    absolute = tmp_path / "styles.less"
    paths = ProjectPaths.from_mapping(
        {
            "scripts": "app.js",
            "styles": str(absolute),
            "jsPath": "js",
            "lessPath": "less",
            "htlPath": "htl",
        },
        root=tmp_path / "root",
    )
    assert paths.styles_index == absolute
    assert paths.scripts_index == tmp_path / "root" / "app.js"


def test_from_mapping_reports_missing_keys():
    with pytest.raises(PreconditionError, match="htlPath"):
        ProjectPaths.from_mapping({"scripts": "a", "styles": "b", "jsPath": "c", "lessPath": "d"})


def test_missing_package_json(tmp_path: Path):
    with pytest.raises(PreconditionError, match="Could not find"):
        ProjectPaths.from_package_json(tmp_path / "package.json")


def test_package_json_without_paths(tmp_path: Path):
    config = tmp_path / "package.json"
    config.write_text(json.dumps({"name": "site"}), encoding="utf-8")
    with pytest.raises(PreconditionError, match="no 'paths' object"):
        ProjectPaths.from_package_json(config)


def test_package_json_with_invalid_json(tmp_path: Path):
    config = tmp_path / "package.json"
    config.write_text("{not json", encoding="utf-8")
    with pytest.raises(PreconditionError, match="could not read"):
        ProjectPaths.from_package_json(config)


def test_verify_names_missing_script_entry(project_paths: ProjectPaths):
    assert project_paths.verify() is project_paths

    project_paths.scripts_index.unlink()
    with pytest.raises(PreconditionError) as excinfo:
        project_paths.verify()
    assert str(project_paths.scripts_index) in str(excinfo.value)


def test_verify_names_missing_style_index(project_paths: ProjectPaths):
    project_paths.styles_index.unlink()
    with pytest.raises(PreconditionError, match="app.less"):
        project_paths.verify()
