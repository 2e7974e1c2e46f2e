"""Consistency rules — radius, elevation and motion against their constitution bands.

Axes are checked in a fixed order and each rule reports the first failing axis.
"""

from typing import Optional, Sequence, Union

from rendergate.models.documents import ConsistencyBand
from rendergate.validators.base import BaseRule, format_value, value_range
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext

AXES = ("radius", "elevation", "motion")

Value = Union[int, float, str]


def _axis_pairs(context: TasteContext) -> list[tuple[str, ConsistencyBand, Sequence[Value]]]:
    declared = context.taste.consistency
    bands = context.constitution.consistency
    return [(axis, getattr(bands, axis), getattr(declared, axis)) for axis in AXES]


def _is_numeric(value: Value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_allowed_values(band: ConsistencyBand, values: Sequence[Value]) -> Optional[str]:
    """Describe the first value outside the band's allowed set, or None.

    Values compare by their JSON rendering, so 4 and 4.0 are the same value.
    """
    allowed = list(dict.fromkeys(format_value(value) for value in band.allowed_values))
    allowed_set = set(allowed)
    for value in values:
        if format_value(value) not in allowed_set:
            return f"{format_value(value)} not in allowed set: {', '.join(allowed)}"
    return None


def check_variance(band: ConsistencyBand, values: Sequence[Value]) -> Optional[str]:
    """Describe a variance violation, or None.

    Numeric axes compare max - min with max_variance. String axes only fail
    when max_variance is exactly 0 and more than one distinct value appears.
    """
    if band.max_variance is None or not values:
        return None

    max_variance = band.max_variance
    if _is_numeric(values[0]):
        variance = value_range([value for value in values if _is_numeric(value)])
        if variance > max_variance:
            return f"variance {format_value(variance)} exceeds max_variance {format_value(max_variance)}"
        return None

    distinct = {format_value(value) for value in values}
    if len(distinct) > 1 and max_variance == 0:
        return f"multiple values present but max_variance is {format_value(max_variance)}"
    return None


class ConsistencyAllowedRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.CONSISTENCY_ALLOWED.value

    def check(self, context: TasteContext) -> RuleOutcome:
        for axis, band, values in _axis_pairs(context):
            problem = check_allowed_values(band, values)
            if problem:
                return self._fail_with(f"{axis}: {problem}")
        return self._pass("Consistency values align with allowed sets.")


class ConsistencyVarianceRule(BaseRule[TasteContext]):
    @property
    def rule_id(self) -> str:
        return TasteRuleId.CONSISTENCY_VARIANCE.value

    def check(self, context: TasteContext) -> RuleOutcome:
        for axis, band, values in _axis_pairs(context):
            problem = check_variance(band, values)
            if problem:
                return self._fail_with(f"{axis}: {problem}")
        return self._pass("Consistency variance within limits.")
