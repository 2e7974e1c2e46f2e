"""Spacing rules — enumerated values and spread."""

from rendergate.validators.base import BaseRule, first_missing, format_value, value_range
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext


class SpacingAllowedValuesRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.SPACING_ALLOWED_VALUES.value

    def check(self, context: TasteContext) -> RuleOutcome:
        invalid = first_missing(context.taste.spacing.values, context.constitution.spacing.allowed_values)
        if invalid is None:
            return self._pass("Spacing values are enumerated in the constitution.")
        return self._fail_with(f"Spacing value {format_value(invalid)} not allowed.")


class SpacingVarianceRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.SPACING_VARIANCE.value

    def check(self, context: TasteContext) -> RuleOutcome:
        variance = value_range(context.taste.spacing.values)
        allowed = context.constitution.spacing.max_variance
        if variance <= allowed:
            return self._pass("Spacing variance within allowed range.")
        return self._fail_with(
            f"Spacing variance {format_value(variance)} exceeds allowed {format_value(allowed)}."
        )
