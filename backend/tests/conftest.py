"""
Pytest fixtures and configuration for the rendergate test suite.
"""

import copy
import json
from pathlib import Path

import pytest

from rendergate.config import PACKAGE_DIR, Settings
from rendergate.validators.ruleset import load_ruleset

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load(name: str) -> dict:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def manifest() -> dict:
    """A renderer manifest that passes every contract and taste rule."""
    return _load("manifest.valid.json")


@pytest.fixture
def invalid_manifest() -> dict:
    """Schema-valid manifest with contract and taste violations."""
    return _load("manifest.invalid.json")


@pytest.fixture
def registry() -> dict:
    return _load("registry.valid.json")


@pytest.fixture
def constitution() -> dict:
    return _load("visual-constitution.json")


@pytest.fixture
def intent() -> dict:
    return _load("design-intent.json")


@pytest.fixture
def contract_schema() -> dict:
    return json.loads((PACKAGE_DIR / "contracts" / "renderer-contract.schema.json").read_text(encoding="utf-8"))


@pytest.fixture
def registry_schema() -> dict:
    return json.loads((PACKAGE_DIR / "contracts" / "renderer-registry.schema.json").read_text(encoding="utf-8"))


@pytest.fixture
def ruleset():
    """The bundled taste ruleset."""
    return load_ruleset()


@pytest.fixture
def mutate():
    """Deep-copy a document and apply a change to the copy."""
    def _mutate(document: dict, change) -> dict:
        clone = copy.deepcopy(document)
        change(clone)
        return clone
    return _mutate


@pytest.fixture
def workspace(tmp_path, manifest, registry, constitution, intent) -> Path:
    """A project directory laid out like a real build, with valid documents."""
    layout = {
        "renderers/manifest.json": manifest,
        "config/renderer-registry.json": registry,
        "config/visual-constitution.json": constitution,
        "config/design-intent.json": intent,
    }
    for relative, document in layout.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return tmp_path


@pytest.fixture
def workspace_settings(workspace) -> Settings:
    """Settings pointing every default path into the workspace."""
    return Settings(
        RENDERER_MANIFEST_PATH=workspace / "renderers/manifest.json",
        RENDERER_REGISTRY_PATH=workspace / "config/renderer-registry.json",
        VISUAL_CONSTITUTION_PATH=workspace / "config/visual-constitution.json",
        DESIGN_INTENT_PATH=workspace / "config/design-intent.json",
        RENDERER_REPORT_PATH=workspace / "validation/renderer-report.json",
        TASTE_REPORT_PATH=workspace / "validation/taste-report.json",
    )
