"""
Tests for the renderer contract gate.

Covers the schema gate (both checks always run, unknown identity on failure)
and each of the six semantic rules.
"""

import pytest

from rendergate.validators.contract_engine import RendererContractValidator, validate_renderer
from rendergate.validators.models import ContractRuleId

SEMANTIC_ORDER = [
    "renderer-contract.declared.rule",
    "renderer-registration.rule",
    "renderer-contract.registry.rule",
    "token-usage.declared.rule",
    "constitution-compliance.rule",
    "deterministic-output.rule",
]


@pytest.fixture
def validate(contract_schema, registry_schema):
    def _validate(manifest, registry):
        return RendererContractValidator().validate(manifest, registry, contract_schema, registry_schema)
    return _validate


def _rule(report, rule_id):
    return next(rule for rule in report.rules if rule.id == rule_id)


class TestValidManifest:
    def test_passes_all_rules(self, validate, manifest, registry):
        report = validate(manifest, registry)

        assert report.status == "passed"
        assert report.errors == []
        assert [rule.id for rule in report.rules] == [
            "renderer-manifest.schema",
            "renderer-registry.schema",
            *SEMANTIC_ORDER,
        ]
        assert all(rule.counterexample is None for rule in report.rules)

    def test_identity_from_manifest(self, validate, manifest, registry):
        report = validate(manifest, registry)
        assert report.renderer.name == "web-renderer"
        assert report.renderer.version == "2.3.0"
        assert report.renderer.target == "web"

    def test_repeat_evaluation_is_identical(self, validate, invalid_manifest, registry):
        first = validate(invalid_manifest, registry)
        second = validate(invalid_manifest, registry)

        assert first.rules == second.rules
        assert first.errors == second.errors
        assert first.status == second.status

    def test_module_level_helper(self, manifest, registry, contract_schema, registry_schema):
        report = validate_renderer(manifest, registry, contract_schema, registry_schema)
        assert report.status == "passed"

    def test_empty_rule_list_runs_schema_checks_only(self, manifest, registry, contract_schema, registry_schema):
        report = RendererContractValidator(rules=[]).validate(manifest, registry, contract_schema, registry_schema)

        assert [rule.id for rule in report.rules] == ["renderer-manifest.schema", "renderer-registry.schema"]
        assert report.renderer.name == "web-renderer"


class TestSchemaGate:
    def test_invalid_manifest_stops_after_schema_checks(self, validate, manifest, registry, mutate):
        broken = mutate(manifest, lambda m: m.pop("outputs"))
        report = validate(broken, registry)

        assert report.status == "failed"
        assert len(report.rules) == 2
        assert [rule.id for rule in report.errors] == ["renderer-manifest.schema"]
        assert (report.renderer.name, report.renderer.version, report.renderer.target) == (
            "unknown",
            "unknown",
            "unknown",
        )
        assert "outputs" in report.errors[0].counterexample

    def test_invalid_registry_stops_after_schema_checks(self, validate, manifest, registry, mutate):
        broken = mutate(registry, lambda r: r["renderers"][0].pop("contract_id"))
        report = validate(manifest, broken)

        assert len(report.rules) == 2
        assert report.rules[0].passed
        assert not report.rules[1].passed
        assert report.rules[1].counterexample.startswith("renderers.0 ")
        assert report.renderer.name == "unknown"

    def test_both_schemas_checked_without_short_circuit(self, validate):
        report = validate({}, {})

        assert len(report.rules) == 2
        assert [rule.id for rule in report.errors] == ["renderer-manifest.schema", "renderer-registry.schema"]

    def test_extra_property_message(self, validate, manifest, registry, mutate):
        broken = mutate(manifest, lambda m: m["renderer"].update({"owner": "team-web"}))
        report = validate(broken, registry)

        assert report.errors[0].counterexample == "renderer.owner is not allowed"

    def test_non_object_documents(self, validate):
        report = validate("not a manifest", ["not", "a", "registry"])
        assert report.status == "failed"
        assert len(report.rules) == 2


class TestSemanticRules:
    def test_declared_contract_mismatch(self, validate, manifest, registry, mutate):
        changed = mutate(manifest, lambda m: m["renderer"].update({"declares_contract": "renderer-contract.v0"}))
        rule = _rule(validate(changed, registry), ContractRuleId.CONTRACT_DECLARED)

        assert not rule.passed
        assert rule.counterexample == "declares_contract=renderer-contract.v0, contract.id=renderer-contract.v1"

    def test_unregistered_renderer_fails_both_registry_rules(self, validate, manifest, registry, mutate):
        changed = mutate(manifest, lambda m: m["renderer"].update({"version": "9.9.9"}))
        report = validate(changed, registry)

        registration = _rule(report, "renderer-registration.rule")
        contract_registry = _rule(report, "renderer-contract.registry.rule")
        assert not registration.passed
        assert registration.counterexample == "web-renderer@9.9.9 target=web"
        assert not contract_registry.passed
        assert contract_registry.counterexample == "Renderer entry missing from registry."
        assert "mismatch" not in contract_registry.message
        assert report.renderer.version == "9.9.9"

    def test_registry_contract_mismatch(self, validate, manifest, registry, mutate):
        changed = mutate(registry, lambda r: r["renderers"][0].update({"contract_id": "renderer-contract.v2"}))
        report = validate(manifest, changed)

        assert _rule(report, "renderer-registration.rule").passed
        rule = _rule(report, "renderer-contract.registry.rule")
        assert not rule.passed
        assert rule.message == "Renderer registry contract does not match the manifest contract."
        assert rule.counterexample == "registry.contract_id=renderer-contract.v2, manifest.contract.id=renderer-contract.v1"

    def test_target_is_part_of_registration(self, validate, manifest, registry, mutate):
        changed = mutate(manifest, lambda m: m["renderer"].update({"target": "ios"}))
        assert not _rule(validate(changed, registry), "renderer-registration.rule").passed

    def test_undeclared_tokens(self, validate, invalid_manifest, registry):
        rule = _rule(validate(invalid_manifest, registry), "token-usage.declared.rule")
        assert not rule.passed
        assert rule.counterexample == "color.brand.legacy"

    def test_constitution_violations(self, validate, manifest, registry, mutate):
        changed = mutate(
            manifest,
            lambda m: m["outputs"]["constitution"].update({"violations": ["spacing.off-scale", "color.raw-hex"]}),
        )
        rule = _rule(validate(changed, registry), "constitution-compliance.rule")
        assert not rule.passed
        assert rule.counterexample == "spacing.off-scale"

    def test_semantic_rules_do_not_short_circuit(self, validate, invalid_manifest, registry, mutate):
        changed = mutate(invalid_manifest, lambda m: m["renderer"].update({"declares_contract": "other"}))
        report = validate(changed, registry)

        assert [rule.id for rule in report.rules[2:]] == SEMANTIC_ORDER
        assert {rule.id for rule in report.errors} == {
            "renderer-contract.declared.rule",
            "token-usage.declared.rule",
            "deterministic-output.rule",
        }


class TestDeterminism:
    @pytest.mark.parametrize(
        "deterministic, markers, passed",
        [
            (True, [], True),
            (False, [], False),
            (True, ["Math.random"], False),
            (False, ["Date.now"], False),
        ],
    )
    def test_flag_and_markers(self, validate, manifest, registry, mutate, deterministic, markers, passed):
        changed = mutate(
            manifest,
            lambda m: m["outputs"]["determinism"].update({"deterministic": deterministic, "markers": markers}),
        )
        rule = _rule(validate(changed, registry), "deterministic-output.rule")
        assert rule.passed is passed

    def test_explicitly_nondeterministic_message(self, validate, manifest, registry, mutate):
        changed = mutate(manifest, lambda m: m["outputs"]["determinism"].update({"deterministic": False}))
        rule = _rule(validate(changed, registry), "deterministic-output.rule")

        assert "explicitly marked nondeterministic" in rule.message
        assert rule.counterexample == "deterministic=false"

    def test_markers_message(self, validate, manifest, registry, mutate):
        changed = mutate(manifest, lambda m: m["outputs"]["determinism"].update({"markers": ["Math.random"]}))
        rule = _rule(validate(changed, registry), "deterministic-output.rule")

        assert "markers" in rule.message
        assert "explicitly" not in rule.message
        assert rule.counterexample == "Math.random"
