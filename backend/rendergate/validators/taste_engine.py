"""Taste Evaluator — folds the ordered taste rules into a TasteReport.

Usage:
    evaluator = TasteEvaluator(load_ruleset(path))
    report = evaluator.evaluate(manifest, constitution, intent, fail_fast=True, verbose=False)
"""

import time
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import structlog
from pydantic import BaseModel

from rendergate.models.documents import DesignIntentTaste, RendererOutputManifest, VisualConstitution
from rendergate.validators.base import BaseRule
from rendergate.validators.models import RendererIdentity, TasteReport, TasteRuleResult, taste_rule_result
from rendergate.validators.ruleset import TasteRuleset, load_ruleset
from rendergate.validators.taste import TasteContext, default_taste_rules

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


class TasteOptions(BaseModel):
    """Evaluation options; ruleset_path None means the bundled ruleset."""

    ruleset_path: Optional[Path] = None
    fail_fast: bool = True
    verbose: bool = False


def _coerce(document: Union[ModelT, dict, Any], model: type[ModelT]) -> ModelT:
    if isinstance(document, model):
        return document
    return model.model_validate(document)


class TasteEvaluator:
    """Evaluates a manifest's taste block against a constitution and a design intent.

    Design principles:
        - Deterministic: same documents → same rules and status
        - One loop owns the stop decision; rules never return early on their own behalf
        - Missing ruleset metadata is filled with a placeholder, never an error
    """

    def __init__(self, ruleset: TasteRuleset, rules: Optional[list[BaseRule[TasteContext]]] = None):
        self.ruleset = ruleset
        self.rules = rules if rules is not None else default_taste_rules()
        self._metadata = ruleset.as_mapping()

    def evaluate(
        self,
        manifest: Union[RendererOutputManifest, dict],
        constitution: Union[VisualConstitution, dict],
        intent: Union[DesignIntentTaste, dict],
        fail_fast: bool = True,
        verbose: bool = False,
    ) -> TasteReport:
        """Run the taste rules in order.

        With fail_fast and not verbose, evaluation stops after the first failing
        rule and the report holds only the rules evaluated so far. Verbose runs
        every rule regardless of fail_fast.
        """
        start_time = time.perf_counter()

        context = TasteContext(
            manifest=_coerce(manifest, RendererOutputManifest),
            constitution=_coerce(constitution, VisualConstitution),
            intent=_coerce(intent, DesignIntentTaste),
        )
        stop_on_failure = fail_fast and not verbose

        results: list[TasteRuleResult] = []
        for rule in self.rules:
            outcome = rule.check(context)
            meta = self._metadata.get(rule.rule_id)
            if meta is None:
                logger.warning("taste_rule_metadata_missing", rule_id=rule.rule_id, ruleset=self.ruleset.version)
                meta = self.ruleset.meta_for(rule.rule_id)
            results.append(taste_rule_result(meta, outcome.passed, outcome.message, outcome.counterexample))

            if not outcome.passed and stop_on_failure:
                logger.info("taste_evaluation_stopped", rule_id=rule.rule_id, evaluated=len(results))
                break

        renderer = context.manifest.renderer
        report = TasteReport.build(
            results,
            RendererIdentity(name=renderer.name, version=renderer.version, target=renderer.target),
            self.ruleset.version,
        )

        logger.info(
            "taste_evaluation_complete",
            status=report.status,
            renderer=f"{renderer.name}@{renderer.version}",
            ruleset_version=report.ruleset_version,
            rules=len(report.rules),
            failed_rules=[rule.id for rule in report.errors],
            fail_fast=fail_fast,
            verbose=verbose,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return report


def evaluate_taste(
    manifest: Union[RendererOutputManifest, dict],
    constitution: Union[VisualConstitution, dict],
    intent: Union[DesignIntentTaste, dict],
    options: Optional[TasteOptions] = None,
) -> TasteReport:
    """Load the ruleset named by ``options`` and evaluate."""
    options = options or TasteOptions()
    ruleset = load_ruleset(options.ruleset_path)
    return TasteEvaluator(ruleset).evaluate(
        manifest,
        constitution,
        intent,
        fail_fast=options.fail_fast,
        verbose=options.verbose,
    )
