"""Stage runners — locate documents, evaluate, persist the report.

Each runner raises a GateSetupError before evaluation when a document is
missing or unreadable; otherwise it always writes a report and returns it.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from rendergate.config import Settings, get_settings
from rendergate.files import read_json, read_model, write_json
from rendergate.models.documents import DesignIntentTaste, RendererOutputManifest, VisualConstitution
from rendergate.validators.contract_engine import RendererContractValidator
from rendergate.validators.models import RendererValidationReport, TasteReport
from rendergate.validators.ruleset import load_ruleset
from rendergate.validators.taste_engine import TasteEvaluator

logger = structlog.get_logger()

PathLike = Union[str, Path]


def run_renderer_validate(
    manifest: Optional[PathLike] = None,
    registry: Optional[PathLike] = None,
    report: Optional[PathLike] = None,
    contract_schema: Optional[PathLike] = None,
    registry_schema: Optional[PathLike] = None,
    settings: Optional[Settings] = None,
) -> tuple[RendererValidationReport, Path]:
    """Validate the renderer manifest and registry and write the report.

    Returns:
        The report and the path it was written to
    """
    settings = settings or get_settings()
    manifest_path = Path(manifest or settings.RENDERER_MANIFEST_PATH)
    registry_path = Path(registry or settings.RENDERER_REGISTRY_PATH)
    report_path = Path(report or settings.RENDERER_REPORT_PATH)
    contract_schema_path = Path(contract_schema or settings.CONTRACT_SCHEMA_PATH)
    registry_schema_path = Path(registry_schema or settings.REGISTRY_SCHEMA_PATH)

    manifest_doc = read_json(manifest_path, "Renderer manifest", "Provide --manifest <path>.")
    registry_doc = read_json(registry_path, "Renderer registry", "Provide --registry <path>.")
    contract_schema_doc = read_json(contract_schema_path, "Renderer contract schema")
    registry_schema_doc = read_json(registry_schema_path, "Renderer registry schema")

    result = RendererContractValidator().validate(
        manifest_doc, registry_doc, contract_schema_doc, registry_schema_doc
    )
    write_json(report_path, result)
    logger.info("report_written", stage="renderer-validate", path=str(report_path), status=result.status)
    return result, report_path


def run_taste(
    manifest: Optional[PathLike] = None,
    constitution: Optional[PathLike] = None,
    intent: Optional[PathLike] = None,
    report: Optional[PathLike] = None,
    ruleset: Optional[PathLike] = None,
    fail_fast: Optional[bool] = None,
    verbose: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> tuple[TasteReport, Path]:
    """Evaluate taste rules for the renderer manifest and write the report.

    Returns:
        The report and the path it was written to
    """
    settings = settings or get_settings()
    manifest_path = Path(manifest or settings.RENDERER_MANIFEST_PATH)
    constitution_path = Path(constitution or settings.VISUAL_CONSTITUTION_PATH)
    intent_path = Path(intent or settings.DESIGN_INTENT_PATH)
    report_path = Path(report or settings.TASTE_REPORT_PATH)
    ruleset_path = Path(ruleset or settings.TASTE_RULESET_PATH)

    manifest_doc = read_model(manifest_path, "Renderer manifest", RendererOutputManifest)
    constitution_doc = read_model(constitution_path, "Visual constitution", VisualConstitution)
    intent_doc = read_model(intent_path, "Design intent", DesignIntentTaste)
    ruleset_doc = load_ruleset(ruleset_path)

    result = TasteEvaluator(ruleset_doc).evaluate(
        manifest_doc,
        constitution_doc,
        intent_doc,
        fail_fast=settings.TASTE_FAIL_FAST if fail_fast is None else fail_fast,
        verbose=settings.TASTE_VERBOSE if verbose is None else verbose,
    )
    write_json(report_path, result)
    logger.info("report_written", stage="taste", path=str(report_path), status=result.status)
    return result, report_path
