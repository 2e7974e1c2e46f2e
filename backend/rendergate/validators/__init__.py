"""Renderer gates — deterministic contract and taste validation.

Usage:
    from rendergate.validators import RendererContractValidator, TasteEvaluator, load_ruleset

    report = RendererContractValidator().validate(manifest, registry, contract_schema, registry_schema)
    taste = TasteEvaluator(load_ruleset()).evaluate(manifest, constitution, intent)
"""

from rendergate.validators.contract_engine import RendererContractValidator, validate_renderer
from rendergate.validators.models import (
    ContractRuleId,
    RendererIdentity,
    RendererValidationReport,
    ReportStatus,
    RuleResult,
    TasteReport,
    TasteRuleId,
    TasteRuleMeta,
    TasteRuleResult,
)
from rendergate.validators.ruleset import TasteRuleset, load_ruleset
from rendergate.validators.schema_validator import SchemaIssue, SchemaValidator
from rendergate.validators.taste_engine import TasteEvaluator, TasteOptions, evaluate_taste

__all__ = [
    "RendererContractValidator",
    "validate_renderer",
    "TasteEvaluator",
    "TasteOptions",
    "evaluate_taste",
    "TasteRuleset",
    "load_ruleset",
    "SchemaValidator",
    "SchemaIssue",
    "ContractRuleId",
    "TasteRuleId",
    "RendererIdentity",
    "RendererValidationReport",
    "ReportStatus",
    "RuleResult",
    "TasteReport",
    "TasteRuleMeta",
    "TasteRuleResult",
]
