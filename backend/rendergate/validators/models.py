"""Rule and report models — the shared result shapes of both gates.

All evaluation is deterministic: same documents → same rules, errors and status.
Only ``generated_at`` differs between runs.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ReportStatus(str, Enum):
    """Overall gate outcome."""

    PASSED = "passed"
    FAILED = "failed"


class ContractRuleId(str, Enum):
    """Rule ids of the renderer contract gate, in evaluation order."""

    MANIFEST_SCHEMA = "renderer-manifest.schema"
    REGISTRY_SCHEMA = "renderer-registry.schema"
    CONTRACT_DECLARED = "renderer-contract.declared.rule"
    REGISTRATION = "renderer-registration.rule"
    CONTRACT_REGISTRY = "renderer-contract.registry.rule"
    TOKEN_USAGE_DECLARED = "token-usage.declared.rule"
    CONSTITUTION_COMPLIANCE = "constitution-compliance.rule"
    DETERMINISTIC_OUTPUT = "deterministic-output.rule"


class TasteRuleId(str, Enum):
    """Rule ids of the taste gate, in evaluation order.

    Naming convention: AREA.CHECK.rule — the same strings key the ruleset catalog.
    """

    TYPOGRAPHY_MAX_SIZES = "typography.max-sizes.rule"
    TYPOGRAPHY_HIERARCHY = "typography.hierarchy.rule"
    SPACING_ALLOWED_VALUES = "spacing.allowed-values.rule"
    SPACING_VARIANCE = "spacing.variance.rule"
    COLOR_ALLOWED = "color.allowed.rule"
    COLOR_CONTRAST = "color.contrast.rule"
    DENSITY_LIMIT = "density.limit.rule"
    CONSISTENCY_ALLOWED = "consistency.allowed.rule"
    CONSISTENCY_VARIANCE = "consistency.variance.rule"
    PATTERNS_INTENT = "patterns.intent.rule"


class RendererIdentity(BaseModel):
    """Renderer identity echoed into every report."""

    name: str
    version: str
    target: str

    model_config = {"frozen": True}

    @classmethod
    def unknown(cls) -> "RendererIdentity":
        """Sentinel used when the manifest cannot be trusted."""
        return cls(name="unknown", version="unknown", target="unknown")


class TasteRuleMeta(BaseModel):
    """Human-facing metadata for one taste rule, loaded from the ruleset."""

    id: str
    description: str
    clause: str
    intent_reference: str
    remediation: str

    model_config = {"frozen": True}

    @classmethod
    def placeholder(cls, rule_id: str) -> "TasteRuleMeta":
        """Metadata stand-in for rule ids the ruleset does not know."""
        return cls(
            id=rule_id,
            description="Rule metadata not found; update ruleset.",
            clause="unspecified",
            intent_reference="unspecified",
            remediation="Review rule definition.",
        )


class RuleOutcome(BaseModel):
    """What a single check decided, before metadata is attached."""

    passed: bool
    message: str
    counterexample: Optional[str] = None

    model_config = {"frozen": True}


class RuleResult(BaseModel):
    """Outcome of one contract rule."""

    id: str
    passed: bool
    message: str
    counterexample: Optional[str] = None  # Offending value, present only on failure

    model_config = {"frozen": True}


class TasteRuleResult(RuleResult):
    """Outcome of one taste rule, carrying the ruleset metadata."""

    description: str
    clause: str
    intent_reference: str
    remediation: str


def rule_result(
    rule_id: str,
    passed: bool,
    message: str,
    counterexample: Optional[str] = None,
) -> RuleResult:
    """Build a contract RuleResult. The counterexample is dropped on pass."""
    return RuleResult(
        id=rule_id,
        passed=passed,
        message=message,
        counterexample=None if passed else counterexample,
    )


def taste_rule_result(
    meta: TasteRuleMeta,
    passed: bool,
    message: str,
    counterexample: Optional[str] = None,
) -> TasteRuleResult:
    """Build a TasteRuleResult with metadata copied from the ruleset entry."""
    return TasteRuleResult(
        id=meta.id,
        passed=passed,
        message=message,
        counterexample=None if passed else counterexample,
        description=meta.description,
        clause=meta.clause,
        intent_reference=meta.intent_reference,
        remediation=meta.remediation,
    )


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RendererValidationReport(BaseModel):
    """Report of the renderer contract gate."""

    status: ReportStatus
    generated_at: str
    renderer: RendererIdentity
    rules: list[RuleResult] = Field(default_factory=list)
    errors: list[RuleResult] = Field(default_factory=list)

    model_config = {"frozen": True, "use_enum_values": True}

    @classmethod
    def build(cls, rules: list[RuleResult], renderer: RendererIdentity) -> "RendererValidationReport":
        """Build a report; errors are the failing rules in evaluation order."""
        errors = [rule for rule in rules if not rule.passed]
        return cls(
            status=ReportStatus.PASSED if not errors else ReportStatus.FAILED,
            generated_at=utc_timestamp(),
            renderer=renderer,
            rules=list(rules),
            errors=errors,
        )

    @property
    def passed(self) -> bool:
        return self.status == ReportStatus.PASSED


class TasteReport(BaseModel):
    """Report of the taste gate."""

    status: ReportStatus
    generated_at: str
    renderer: RendererIdentity
    ruleset_version: str
    rules: list[TasteRuleResult] = Field(default_factory=list)
    errors: list[TasteRuleResult] = Field(default_factory=list)

    model_config = {"frozen": True, "use_enum_values": True}

    @classmethod
    def build(
        cls,
        rules: list[TasteRuleResult],
        renderer: RendererIdentity,
        ruleset_version: str,
    ) -> "TasteReport":
        """Build a report; errors are the failing rules in evaluation order."""
        errors = [rule for rule in rules if not rule.passed]
        return cls(
            status=ReportStatus.PASSED if not errors else ReportStatus.FAILED,
            generated_at=utc_timestamp(),
            renderer=renderer,
            ruleset_version=ruleset_version,
            rules=list(rules),
            errors=errors,
        )

    @property
    def passed(self) -> bool:
        return self.status == ReportStatus.PASSED
