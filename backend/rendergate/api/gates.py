"""Gate API — renderer contract validation and taste evaluation over HTTP."""

import structlog
from fastapi import APIRouter

from rendergate.config import get_settings
from rendergate.files import read_json
from rendergate.models.requests import RendererValidateRequest, TasteEvaluateRequest
from rendergate.validators.contract_engine import RendererContractValidator
from rendergate.validators.models import RendererValidationReport, TasteReport
from rendergate.validators.ruleset import load_ruleset
from rendergate.validators.taste_engine import TasteEvaluator

logger = structlog.get_logger()

router = APIRouter()


@router.post("/renderer/validate", response_model=RendererValidationReport, response_model_exclude_none=True)
async def validate_renderer(request: RendererValidateRequest):
    """Validate a renderer manifest and registry against the configured contract schemas."""
    settings = get_settings()
    contract_schema = read_json(settings.CONTRACT_SCHEMA_PATH, "Renderer contract schema")
    registry_schema = read_json(settings.REGISTRY_SCHEMA_PATH, "Renderer registry schema")

    report = RendererContractValidator().validate(
        request.manifest, request.registry, contract_schema, registry_schema
    )
    logger.info("renderer_validate_request", status=report.status)
    return report


@router.post("/taste/evaluate", response_model=TasteReport, response_model_exclude_none=True)
async def evaluate_taste(request: TasteEvaluateRequest):
    """Evaluate taste rules with the configured ruleset."""
    settings = get_settings()
    ruleset = load_ruleset(settings.TASTE_RULESET_PATH)

    report = TasteEvaluator(ruleset).evaluate(
        request.manifest,
        request.constitution,
        request.intent,
        fail_fast=settings.TASTE_FAIL_FAST if request.fail_fast is None else request.fail_fast,
        verbose=settings.TASTE_VERBOSE if request.verbose is None else request.verbose,
    )
    logger.info("taste_evaluate_request", status=report.status)
    return report
