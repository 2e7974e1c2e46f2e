"""Density rule — interactions per view against the design intent's limit."""

from rendergate.validators.base import BaseRule
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext

MISSING_DENSITY_LIMIT = "Design intent missing density limit."


class DensityLimitRule(BaseRule[TasteContext]):
    """A design intent without a density limit is a violation, not a skip."""

    @property
    def rule_id(self) -> str:
        return TasteRuleId.DENSITY_LIMIT.value

    def check(self, context: TasteContext) -> RuleOutcome:
        limit = context.intent.density_limit
        if limit is None:
            return self._fail_with(MISSING_DENSITY_LIMIT)

        actual = context.taste.density.interactions_per_view
        if actual <= limit:
            return self._pass("Interaction density within intent limits.")
        return self._fail_with(f"Interactions per view {actual} exceeds intent limit {limit}.")
