"""
Tests for the shared rule and report models.
"""

import re

import pytest
from pydantic import ValidationError

from rendergate.validators.models import (
    RendererIdentity,
    RendererValidationReport,
    ReportStatus,
    TasteReport,
    TasteRuleMeta,
    rule_result,
    taste_rule_result,
    utc_timestamp,
)


@pytest.fixture
def renderer():
    return RendererIdentity(name="web-renderer", version="2.3.0", target="web")


class TestRuleBuilders:
    def test_counterexample_kept_on_failure(self):
        result = rule_result("token-usage.declared.rule", False, "Undeclared tokens.", "color.brand")
        assert result.counterexample == "color.brand"

    def test_counterexample_dropped_on_pass(self):
        result = rule_result("token-usage.declared.rule", True, "Fine.", "ignored")
        assert result.counterexample is None

    def test_taste_result_copies_metadata(self):
        meta = TasteRuleMeta(
            id="color.allowed.rule",
            description="Allowed tokens only.",
            clause="constitution.color.allowed_tokens",
            intent_reference="design-intent.color.palette",
            remediation="Map colors to tokens.",
        )
        result = taste_rule_result(meta, False, "Color token 'x' is not allowed.", "Color token 'x' is not allowed.")

        assert result.id == "color.allowed.rule"
        assert result.clause == "constitution.color.allowed_tokens"
        assert result.intent_reference == "design-intent.color.palette"
        assert result.remediation == "Map colors to tokens."

    def test_placeholder_metadata(self):
        meta = TasteRuleMeta.placeholder("mystery.rule")
        assert meta.id == "mystery.rule"
        assert meta.description == "Rule metadata not found; update ruleset."
        assert meta.clause == "unspecified"
        assert meta.intent_reference == "unspecified"
        assert meta.remediation == "Review rule definition."


class TestReports:
    def test_errors_are_failing_subsequence_in_order(self, renderer):
        rules = [
            rule_result("a", True, "ok"),
            rule_result("b", False, "bad", "b1"),
            rule_result("c", True, "ok"),
            rule_result("d", False, "bad", "d1"),
        ]
        report = RendererValidationReport.build(rules, renderer)

        assert [rule.id for rule in report.rules] == ["a", "b", "c", "d"]
        assert [rule.id for rule in report.errors] == ["b", "d"]
        assert report.status == "failed"
        assert not report.passed

    def test_status_passed_when_no_errors(self, renderer):
        report = RendererValidationReport.build([rule_result("a", True, "ok")], renderer)
        assert report.status == ReportStatus.PASSED
        assert report.errors == []
        assert report.passed

    def test_empty_rule_list_passes(self, renderer):
        report = TasteReport.build([], renderer, "v1")
        assert report.status == "passed"
        assert report.ruleset_version == "v1"

    def test_reports_are_frozen(self, renderer):
        report = RendererValidationReport.build([rule_result("a", True, "ok")], renderer)
        with pytest.raises(ValidationError):
            report.status = "failed"

    def test_json_omits_missing_counterexample(self, renderer):
        report = RendererValidationReport.build(
            [rule_result("a", True, "ok"), rule_result("b", False, "bad", "why")],
            renderer,
        )
        payload = report.model_dump(mode="json", exclude_none=True)

        assert "counterexample" not in payload["rules"][0]
        assert payload["rules"][1]["counterexample"] == "why"
        assert payload["status"] == "failed"
        assert payload["renderer"] == {"name": "web-renderer", "version": "2.3.0", "target": "web"}

    def test_unknown_identity(self):
        unknown = RendererIdentity.unknown()
        assert (unknown.name, unknown.version, unknown.target) == ("unknown", "unknown", "unknown")


def test_timestamp_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())
