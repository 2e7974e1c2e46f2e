"""Color rules — token allow-list and contrast floor."""

from rendergate.validators.base import BaseRule, first_missing, format_value
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext


class ColorAllowedRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.COLOR_ALLOWED.value

    def check(self, context: TasteContext) -> RuleOutcome:
        invalid = first_missing(context.taste.color.tokens, context.constitution.color.allowed_tokens)
        if invalid is None:
            return self._pass("All colors mapped to allowed tokens.")
        return self._fail_with(f"Color token '{invalid}' is not allowed.")


class ColorContrastRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.COLOR_CONTRAST.value

    def check(self, context: TasteContext) -> RuleOutcome:
        floor = context.constitution.color.contrast_floor
        failing = next((entry for entry in context.taste.color.contrast if entry.ratio < floor), None)
        if failing is None:
            return self._pass("All contrast ratios meet the floor.")
        return self._fail_with(
            f"Contrast ratio {format_value(failing.ratio)} for {failing.pair} below floor {format_value(floor)}."
        )
