"""Typography rules — font size count, role ranges and hierarchy order."""

from rendergate.validators.base import BaseRule, format_value
from rendergate.validators.models import RuleOutcome, TasteRuleId
from rendergate.validators.taste.context import TasteContext


class TypographyMaxSizesRule(BaseRule[TasteContext]):
    """The number of distinct font sizes must stay within the constitution's maximum."""

    @property
    def rule_id(self) -> str:
        return TasteRuleId.TYPOGRAPHY_MAX_SIZES.value

    def check(self, context: TasteContext) -> RuleOutcome:
        sizes = {role.size for role in context.taste.typography.roles}
        allowed = context.constitution.typography.max_font_sizes
        if len(sizes) <= allowed:
            return self._pass("Typography size count within allowed maximum.")
        return self._fail_with(f"Used {len(sizes)} font sizes; allowed maximum is {allowed}.")


class TypographyHierarchyRule(BaseRule[TasteContext]):
    """Declared roles must be known, in range, and ordered as the hierarchy says.

    The hierarchy lists role names from largest to smallest. Only adjacent
    pairs where both roles are declared are compared.
    """

    @property
    def rule_id(self) -> str:
        return TasteRuleId.TYPOGRAPHY_HIERARCHY.value

    def check(self, context: TasteContext) -> RuleOutcome:
        typography = context.constitution.typography
        declared = context.taste.typography.roles

        for role in declared:
            definition = typography.role(role.role)
            if definition is None:
                return self._fail_with(f"Role '{role.role}' is not defined in constitution.")
            if role.size < definition.min or role.size > definition.max:
                return self._fail_with(
                    f"Role '{role.role}' size {format_value(role.size)} outside "
                    f"{format_value(definition.min)}-{format_value(definition.max)}."
                )

        hierarchy = typography.hierarchy
        if len(hierarchy) > 1:
            size_by_role = {}
            for name in hierarchy:
                match = next((role for role in declared if role.role == name), None)
                if match is not None:
                    size_by_role[name] = match.size

            for larger, smaller in zip(hierarchy, hierarchy[1:]):
                if larger not in size_by_role or smaller not in size_by_role:
                    continue
                if size_by_role[larger] < size_by_role[smaller]:
                    return self._fail_with(
                        f"{larger} ({format_value(size_by_role[larger])}) should not be smaller than "
                        f"{smaller} ({format_value(size_by_role[smaller])})."
                    )

        return self._pass("Typography roles satisfy hierarchy ranges.")
