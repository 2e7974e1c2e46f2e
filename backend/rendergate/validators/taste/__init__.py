"""Taste rules — typography, spacing, color, density, consistency and pattern usage."""

from rendergate.validators.base import BaseRule
from rendergate.validators.taste.color import ColorAllowedRule, ColorContrastRule
from rendergate.validators.taste.consistency import ConsistencyAllowedRule, ConsistencyVarianceRule
from rendergate.validators.taste.context import TasteContext
from rendergate.validators.taste.density import DensityLimitRule
from rendergate.validators.taste.patterns import PatternsIntentRule
from rendergate.validators.taste.spacing import SpacingAllowedValuesRule, SpacingVarianceRule
from rendergate.validators.taste.typography import TypographyHierarchyRule, TypographyMaxSizesRule


def default_taste_rules() -> list[BaseRule[TasteContext]]:
    """Create the taste rule chain in execution order.

    The pattern rule stays last: nothing follows it, so fail-fast never cuts it short.
    """
    return [
        TypographyMaxSizesRule(),
        TypographyHierarchyRule(),
        SpacingAllowedValuesRule(),
        SpacingVarianceRule(),
        ColorAllowedRule(),
        ColorContrastRule(),
        DensityLimitRule(),
        ConsistencyAllowedRule(),
        ConsistencyVarianceRule(),
        PatternsIntentRule(),
    ]


__all__ = [
    "TasteContext",
    "default_taste_rules",
    "TypographyMaxSizesRule",
    "TypographyHierarchyRule",
    "SpacingAllowedValuesRule",
    "SpacingVarianceRule",
    "ColorAllowedRule",
    "ColorContrastRule",
    "DensityLimitRule",
    "ConsistencyAllowedRule",
    "ConsistencyVarianceRule",
    "PatternsIntentRule",
]
