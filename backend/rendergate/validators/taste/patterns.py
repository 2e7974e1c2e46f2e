"""Pattern rule — declared (pattern, intent) usage against constitution and design intent."""

from rendergate.validators.base import BaseRule
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext


def permitted_intents(context: TasteContext, pattern: str) -> list[str]:
    """Intents allowed for a pattern.

    The design intent's mapping for the pattern replaces the constitution's
    mapping outright; the two are never merged.
    """
    overrides = context.intent.allowed_patterns
    if overrides is not None and pattern in overrides:
        return list(overrides[pattern])
    policy = context.constitution.patterns
    if policy is not None and policy.intents is not None and pattern in policy.intents:
        return list(policy.intents[pattern])
    return []


class PatternsIntentRule(BaseRule[TasteContext]):
    """Stops at the first violating usage and reports only that one."""

    @property
    def rule_id(self) -> str:
        return TasteRuleId.PATTERNS_INTENT.value

    def check(self, context: TasteContext) -> RuleOutcome:
        policy = context.constitution.patterns

        for usage in context.taste.patterns.usage:
            if policy is None:
                return self._fail_with("Constitution patterns not provided; cannot authorize usage.")
            if usage.pattern not in policy.allowed:
                return self._fail_with(f"Pattern '{usage.pattern}' is not allowed by constitution.")
            allowed = permitted_intents(context, usage.pattern)
            if usage.intent not in allowed:
                return self._fail_with(
                    f"Pattern '{usage.pattern}' not permitted for intent '{usage.intent}'. "
                    f"Allowed: {', '.join(allowed)}"
                )

        return self._pass("Pattern usage aligns with intent and constitution.")
