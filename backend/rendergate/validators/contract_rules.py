"""Contract rules — semantic checks run on a schema-valid manifest and registry."""

from pydantic import BaseModel

from rendergate.models.documents import RendererOutputManifest, RendererRegistry
from rendergate.validators.base import BaseRule
from rendergate.validators.models import ContractRuleId, RuleOutcome


class ContractContext(BaseModel):
    """Typed documents the contract rules read."""

    manifest: RendererOutputManifest
    registry: RendererRegistry

    model_config = {"frozen": True}


class ContractDeclaredRule(BaseRule[ContractContext]):
    """The renderer must declare the contract its manifest is built against."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.CONTRACT_DECLARED.value

    def check(self, context: ContractContext) -> RuleOutcome:
        declared = context.manifest.renderer.declares_contract
        contract_id = context.manifest.contract.id
        if declared == contract_id:
            return self._pass("Renderer declares the active renderer contract.")
        return self._fail(
            "Renderer declares a contract that does not match the manifest contract.",
            f"declares_contract={declared}, contract.id={contract_id}",
        )


class RegistrationRule(BaseRule[ContractContext]):
    """The renderer must be registered for its name, version and target."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.REGISTRATION.value

    def check(self, context: ContractContext) -> RuleOutcome:
        renderer = context.manifest.renderer
        entry = context.registry.find(renderer.name, renderer.version, renderer.target)
        if entry is not None:
            return self._pass("Renderer is registered for this target and version.")
        return self._fail(
            "Renderer is not registered; add it to the renderer registry.",
            f"{renderer.name}@{renderer.version} target={renderer.target}",
        )


class RegistryContractRule(BaseRule[ContractContext]):
    """The registry entry must point at the same contract as the manifest."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.CONTRACT_REGISTRY.value

    def check(self, context: ContractContext) -> RuleOutcome:
        renderer = context.manifest.renderer
        contract_id = context.manifest.contract.id
        entry = context.registry.find(renderer.name, renderer.version, renderer.target)
        if entry is None:
            return self._fail(
                "Renderer registry has no entry for this renderer; cannot confirm its contract.",
                "Renderer entry missing from registry.",
            )
        if entry.contract_id == contract_id:
            return self._pass("Renderer registry contract matches the manifest contract.")
        return self._fail(
            "Renderer registry contract does not match the manifest contract.",
            f"registry.contract_id={entry.contract_id}, manifest.contract.id={contract_id}",
        )


class TokenUsageDeclaredRule(BaseRule[ContractContext]):
    """Every design token the output uses must be declared."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.TOKEN_USAGE_DECLARED.value

    def check(self, context: ContractContext) -> RuleOutcome:
        undeclared = context.manifest.outputs.token_usage.undeclared
        if not undeclared:
            return self._pass("Token usage is fully declared.")
        return self._fail(
            "Undeclared token usage detected; declare all tokens or remove undeclared usage.",
            undeclared[0],
        )


class ConstitutionComplianceRule(BaseRule[ContractContext]):
    """The renderer must report no constitution violations."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.CONSTITUTION_COMPLIANCE.value

    def check(self, context: ContractContext) -> RuleOutcome:
        violations = context.manifest.outputs.constitution.violations
        if not violations:
            return self._pass("No constitution violations reported.")
        return self._fail(
            "Renderer reports constitution violations; resolve them before compiling.",
            violations[0],
        )


class DeterministicOutputRule(BaseRule[ContractContext]):
    """Output must be flagged deterministic and carry no nondeterminism markers."""

    @property
    def rule_id(self) -> str:
        return ContractRuleId.DETERMINISTIC_OUTPUT.value

    def check(self, context: ContractContext) -> RuleOutcome:
        determinism = context.manifest.outputs.determinism
        markers = determinism.markers

        if determinism.deterministic is True and not markers:
            return self._pass("Renderer output is marked deterministic and free of nondeterminism markers.")

        if markers:
            message = "Renderer output carries nondeterminism markers; remove them before compiling."
            if determinism.deterministic is not True:
                message = (
                    "Renderer output is explicitly nondeterministic and carries nondeterminism markers; "
                    "remove markers and set deterministic=true."
                )
            return self._fail(message, markers[0])

        return self._fail(
            "Renderer output is explicitly marked nondeterministic; set deterministic=true.",
            "deterministic=false",
        )


def default_contract_rules() -> list[BaseRule[ContractContext]]:
    """Semantic contract rules in execution order."""
    return [
        ContractDeclaredRule(),
        RegistrationRule(),
        RegistryContractRule(),
        TokenUsageDeclaredRule(),
        ConstitutionComplianceRule(),
        DeterministicOutputRule(),
    ]
