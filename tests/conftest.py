from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from componentkit.config import ProjectPaths  # noqa: E402

PACKAGE_PATHS = {
    "scripts": "ui/src/app.js",
    "styles": "ui/src/app.less",
    "jsPath": "ui/src/components",
    "lessPath": "ui/src/components",
    "htlPath": "apps/site/components",
    "javaPath": "core/src/main/java",
}


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """A host project with its ``package.json`` and aggregate files."""

    root = tmp_path / "site"
    (root / "ui" / "src").mkdir(parents=True)
    (root / "ui" / "src" / "app.js").write_text("", encoding="utf-8")
    (root / "ui" / "src" / "app.less").write_text('@import "base/base";\n', encoding="utf-8")
    (root / "package.json").write_text(
        json.dumps({"name": "site", "paths": PACKAGE_PATHS}), encoding="utf-8"
    )
    return root


@pytest.fixture()
def project_paths(project_root: Path) -> ProjectPaths:
    return ProjectPaths.from_package_json(project_root / "package.json")
