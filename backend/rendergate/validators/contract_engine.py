"""Renderer Contract Validator — schema gate followed by the semantic contract rules.

Usage:
    validator = RendererContractValidator()
    report = validator.validate(manifest_doc, registry_doc, contract_schema, registry_schema)
    if report.status == "failed":
        # Inspect report.errors
"""

import time
from typing import Any, Optional

import structlog

from rendergate.models.documents import RendererOutputManifest, RendererRegistry
from rendergate.validators.base import BaseRule
from rendergate.validators.contract_rules import ContractContext, default_contract_rules
from rendergate.validators.models import (
    ContractRuleId,
    RendererIdentity,
    RendererValidationReport,
    RuleResult,
    rule_result,
)
from rendergate.validators.schema_validator import (
    DocumentResult,
    RejectedDocument,
    SchemaValidator,
)

logger = structlog.get_logger()


def _schema_rule(rule_id: str, subject: str, result: DocumentResult) -> RuleResult:
    if isinstance(result, RejectedDocument):
        return rule_result(
            rule_id,
            False,
            f"{subject} fails the {subject.lower()} schema validation.",
            result.check.first_error,
        )
    return rule_result(rule_id, True, f"{subject} matches the {subject.lower()} schema.")


class RendererContractValidator:
    """Runs the two schema checks and the six semantic contract rules.

    Design principles:
        - Deterministic: same documents → same rules and status
        - Both schema checks always run, so callers see every structural problem at once
        - Semantic rules never short-circuit on an earlier failure
    """

    def __init__(self, rules: Optional[list[BaseRule[ContractContext]]] = None):
        self.rules = rules if rules is not None else default_contract_rules()

    def validate(
        self,
        manifest_document: Any,
        registry_document: Any,
        contract_schema: dict,
        registry_schema: dict,
    ) -> RendererValidationReport:
        """Validate a renderer manifest and registry.

        Args:
            manifest_document: Untyped renderer output manifest
            registry_document: Untyped renderer registry
            contract_schema: JSON Schema for the manifest
            registry_schema: JSON Schema for the registry

        Returns:
            RendererValidationReport; identity is the unknown sentinel when a schema check fails
        """
        start_time = time.perf_counter()

        manifest_result = SchemaValidator(contract_schema, "Renderer contract schema").validate_as(
            manifest_document, RendererOutputManifest
        )
        registry_result = SchemaValidator(registry_schema, "Renderer registry schema").validate_as(
            registry_document, RendererRegistry
        )

        rules: list[RuleResult] = [
            _schema_rule(ContractRuleId.MANIFEST_SCHEMA.value, "Renderer manifest", manifest_result),
            _schema_rule(ContractRuleId.REGISTRY_SCHEMA.value, "Renderer registry", registry_result),
        ]

        if isinstance(manifest_result, RejectedDocument) or isinstance(registry_result, RejectedDocument):
            for rejected in (manifest_result, registry_result):
                if isinstance(rejected, RejectedDocument):
                    logger.debug("schema_rejected", errors=rejected.check.formatted())
            report = RendererValidationReport.build(rules, RendererIdentity.unknown())
            self._log(report, start_time)
            return report

        manifest: RendererOutputManifest = manifest_result.document
        context = ContractContext(manifest=manifest, registry=registry_result.document)

        for rule in self.rules:
            outcome = rule.check(context)
            rules.append(rule_result(rule.rule_id, outcome.passed, outcome.message, outcome.counterexample))

        renderer = RendererIdentity(
            name=manifest.renderer.name,
            version=manifest.renderer.version,
            target=manifest.renderer.target,
        )
        report = RendererValidationReport.build(rules, renderer)
        self._log(report, start_time)
        return report

    @staticmethod
    def _log(report: RendererValidationReport, start_time: float) -> None:
        logger.info(
            "renderer_validation_complete",
            status=report.status,
            renderer=f"{report.renderer.name}@{report.renderer.version}",
            target=report.renderer.target,
            rules=len(report.rules),
            failed_rules=[rule.id for rule in report.errors],
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )


def validate_renderer(
    manifest_document: Any,
    registry_document: Any,
    contract_schema: dict,
    registry_schema: dict,
) -> RendererValidationReport:
    """Validate with the default rule chain."""
    return RendererContractValidator().validate(
        manifest_document, registry_document, contract_schema, registry_schema
    )
