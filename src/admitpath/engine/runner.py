from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from admitpath.features.conditions import evaluate_condition
from admitpath.features.derived import compute_derived
from admitpath.models.records import Rule, Ruleset, StudentInput
from admitpath.state.context import EngineState, EvaluationContext, new_context

logger = logging.getLogger(__name__)


def rules_for_stage(ruleset: Ruleset, stage: str) -> List[Rule]:
    # same-stage order is the order in ruleset.rules; never re-sorted
    return [r for r in ruleset.rules if r.stage == stage]


def apply_rule(state: EngineState, rule: Rule, context: EvaluationContext) -> EngineState:
    """
    Reducer step: (state, rule) -> state'. The condition sees the state as
    left by every earlier rule, including earlier rules of the same stage.
    """
    if not evaluate_condition(context.with_state(state), rule.when):
        return state
    logger.debug("rule fired: stage=%s id=%s", rule.stage, rule.id)
    if rule.then is None:
        return state
    return state.apply_effect(rule.then)


def run_rules(
    ruleset: Ruleset,
    student: Union[StudentInput, Mapping[str, Any]],
) -> EvaluationContext:
    if not isinstance(student, StudentInput):
        student = StudentInput.model_validate(student)

    input_facts = student.model_dump()
    context = new_context(input_facts, compute_derived(input_facts))

    state = context.state
    for stage in ruleset.execution_order:
        stage_rules = rules_for_stage(ruleset, stage)
        if not stage_rules:
            logger.debug("stage %s has no rules", stage)
        for rule in stage_rules:
            state = apply_rule(state, rule, context)

    return context.with_state(state)
