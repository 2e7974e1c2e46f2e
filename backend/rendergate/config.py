"""Gate configuration via environment variables (prefix RENDERGATE_)."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Gate settings loaded from environment variables."""

    # Input documents
    RENDERER_MANIFEST_PATH: Path = Path("renderers/manifest.json")
    RENDERER_REGISTRY_PATH: Path = Path("config/renderer-registry.json")
    VISUAL_CONSTITUTION_PATH: Path = Path("config/visual-constitution.json")
    DESIGN_INTENT_PATH: Path = Path("config/design-intent.json")

    # Schemas and rule metadata
    CONTRACT_SCHEMA_PATH: Path = PACKAGE_DIR / "contracts" / "renderer-contract.schema.json"
    REGISTRY_SCHEMA_PATH: Path = PACKAGE_DIR / "contracts" / "renderer-registry.schema.json"
    TASTE_RULESET_PATH: Path = PACKAGE_DIR / "rules" / "taste" / "ruleset.json"

    # Reports
    RENDERER_REPORT_PATH: Path = Path("validation/renderer-report.json")
    TASTE_REPORT_PATH: Path = Path("validation/taste-report.json")

    # Taste evaluation
    TASTE_FAIL_FAST: bool = True
    TASTE_VERBOSE: bool = False

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RENDERGATE_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
