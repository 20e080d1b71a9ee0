"""Shared pytest fixtures for the registry test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


# ---------------------------------------------------------------------------
# Definition file templates
# ---------------------------------------------------------------------------

_MODULE_TEMPLATE = """\
from scaffoldkit.manifest import ModuleManifest

manifest = ModuleManifest(
    id="{module_id}",
    name="{name}",
    description="{name} module",
    requires={requires},
    template_dir="templates/modules/{module_id}",
)
"""

_DICT_MODULE_TEMPLATE = """\
manifest = {{
    "id": "{module_id}",
    "name": "{name}",
    "description": "{name} module",
    "requires": [],
    "templateDir": "templates/modules/{module_id}",
    "contributions": {{"pubspecDependencies": {{"dio": "^5.7.0"}}, "envVars": ["API_BASE_URL"]}},
}}
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def definitions_dir(tmp_path: Path) -> Path:
    """A definitions dir with valid, malformed and stray entries."""
    root = tmp_path / "definitions"
    root.mkdir()

    core = root / "core"
    core.mkdir()
    (core / "module.py").write_text(_MODULE_TEMPLATE.format(module_id="core", name="Core", requires="[]"))

    auth = root / "auth"
    auth.mkdir()
    (auth / "module.py").write_text(_MODULE_TEMPLATE.format(module_id="auth", name="Auth", requires='["core"]'))

    api = root / "api"
    api.mkdir()
    (api / "module.py").write_text(_DICT_MODULE_TEMPLATE.format(module_id="api", name="API"))

    theme = root / "theme"
    theme.mkdir()
    (theme / "module.yaml").write_text(
        yaml.dump(
            {
                "id": "theme",
                "name": "Theme",
                "templateDir": "templates/modules/theme",
                "contributions": {"pubspecDependencies": {"google_fonts": "^6.2.1"}},
            }
        )
    )

    # Malformed entries, all silently excluded.
    no_export = root / "no_export"
    no_export.mkdir()
    (no_export / "module.py").write_text("value = 1\n")

    bad_id = root / "bad_id"
    bad_id.mkdir()
    (bad_id / "module.py").write_text('manifest = {"id": 42, "name": "Bad"}\n')

    broken = root / "broken"
    broken.mkdir()
    (broken / "module.py").write_text("raise RuntimeError('boom')\n")

    (root / "empty").mkdir()
    (root / "README.md").write_text("not a module\n")

    return root
