"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit. The engines hold an
ordered list of rules and fold them through one evaluation loop.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar, Union

from rendergate.validators.models import RuleOutcome

ContextT = TypeVar("ContextT")

Number = Union[int, float]


class BaseRule(ABC, Generic[ContextT]):
    """Abstract base for all gate rules.

    Contract:
        - check() is deterministic: same context → same outcome
        - check() never raises for a policy violation; it returns passed=False
        - No I/O, no randomness, no mutation of the context
    """

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Rule id reported in results and used to look up metadata."""
        ...

    @abstractmethod
    def check(self, context: ContextT) -> RuleOutcome:
        """Evaluate the rule against an evaluation context."""
        ...

    # ── Helper Methods ──

    def _pass(self, message: str) -> RuleOutcome:
        return RuleOutcome(passed=True, message=message)

    def _fail(self, message: str, counterexample: Optional[str] = None) -> RuleOutcome:
        return RuleOutcome(passed=False, message=message, counterexample=counterexample)

    def _fail_with(self, message: str) -> RuleOutcome:
        """Fail with the message doubling as counterexample."""
        return RuleOutcome(passed=False, message=message, counterexample=message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.rule_id}>"


def format_value(value) -> str:
    """Render a declared value the way it appears in the JSON documents (16, not 16.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def first_missing(values: Iterable, allowed: Iterable):
    """First value not present in ``allowed``, or None."""
    allowed_set = set(allowed)
    for value in values:
        if value not in allowed_set:
            return value
    return None


def value_range(values: list[Number]) -> Number:
    """max - min over values; 0 when empty."""
    if not values:
        return 0
    return max(values) - min(values)
