from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping

from admitpath.models.records import Effect
from admitpath.state.accumulator import CATEGORIES, OutputAccumulator
from admitpath.state.suppression import SuppressionState


@dataclass(frozen=True)
class EngineState:
    outputs: OutputAccumulator = field(default_factory=OutputAccumulator)
    suppress: SuppressionState = field(default_factory=SuppressionState)

    def apply_effect(self, effect: Effect) -> "EngineState":
        outputs = self.outputs
        for category in CATEGORIES:
            outputs = outputs.push(category, getattr(effect, f"add_{category}", None))
        return EngineState(outputs=outputs, suppress=self.suppress.apply(effect.set_suppress))

    def as_dict(self) -> Dict[str, Any]:
        return {"outputs": self.outputs.as_dict(), "suppress": self.suppress.as_dict()}


@dataclass(frozen=True)
class EvaluationContext:
    """input and derived are read-only views; state is replaced, never mutated."""

    input: Mapping[str, Any]
    derived: Mapping[str, Any]
    state: EngineState = field(default_factory=EngineState)

    def namespace(self, root: str) -> Any:
        if root == "state":
            return self.state.as_dict()
        return getattr(self, root)

    def with_state(self, state: EngineState) -> "EvaluationContext":
        return replace(self, state=state)


def new_context(input_facts: Mapping[str, Any], derived: Mapping[str, Any]) -> EvaluationContext:
    return EvaluationContext(
        input=MappingProxyType(dict(input_facts)),
        derived=MappingProxyType(dict(derived)),
    )
