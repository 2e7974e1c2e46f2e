"""Taste ruleset — human-facing rule metadata keyed by rule id.

The catalog is advisory: a missing entry yields placeholder metadata and never
fails an evaluation.
"""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from rendergate.errors import DocumentParseError
from rendergate.files import read_json
from rendergate.validators.models import TasteRuleMeta

BUNDLED_RULESET_PATH = Path(__file__).resolve().parent.parent / "rules" / "taste" / "ruleset.json"


class TasteRuleset(BaseModel):
    """Versioned catalog of taste rule metadata."""

    version: str
    rules: list[TasteRuleMeta] = Field(default_factory=list)

    model_config = {"frozen": True}

    def as_mapping(self) -> dict[str, TasteRuleMeta]:
        """Rule id → metadata; the first entry wins for duplicated ids."""
        mapping: dict[str, TasteRuleMeta] = {}
        for meta in self.rules:
            mapping.setdefault(meta.id, meta)
        return mapping

    def meta_for(self, rule_id: str) -> TasteRuleMeta:
        return self.as_mapping().get(rule_id, TasteRuleMeta.placeholder(rule_id))


def load_ruleset(path: Union[str, Path, None] = None) -> TasteRuleset:
    """Load a ruleset file; defaults to the bundled catalog.

    Raises:
        DocumentNotFoundError: the file does not exist
        DocumentParseError: the file is not a valid ruleset
    """
    resolved = Path(path) if path is not None else BUNDLED_RULESET_PATH
    data = read_json(resolved, "Taste ruleset")
    try:
        return TasteRuleset.model_validate(data)
    except ValidationError as e:
        raise DocumentParseError("Taste ruleset", resolved, str(e)) from e
