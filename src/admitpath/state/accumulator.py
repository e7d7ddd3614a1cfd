from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

CATEGORIES = ("locked", "viable", "actions", "stop", "notes")


class OutputAccumulator:
    """
    One ordered, duplicate-free sequence per output category.
    First occurrence keeps its position. push() returns a new accumulator.
    """

    def __init__(self, outputs: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        self._outputs: Dict[str, Tuple[str, ...]] = {c: () for c in CATEGORIES}
        for category, items in (outputs or {}).items():
            self._check(category)
            self._outputs[category] = _uniq((), items)

    @staticmethod
    def _check(category: str) -> None:
        if category not in CATEGORIES:
            raise ValueError(f"unknown output category: {category}")

    def push(self, category: str, items: Optional[Iterable[str]]) -> "OutputAccumulator":
        self._check(category)
        if not items:
            return self
        merged = dict(self._outputs)
        merged[category] = _uniq(self._outputs[category], items)
        return OutputAccumulator(merged)

    def get(self, category: str) -> List[str]:
        self._check(category)
        return list(self._outputs[category])

    def as_dict(self) -> Dict[str, List[str]]:
        return {c: list(v) for c, v in self._outputs.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputAccumulator):
            return NotImplemented
        return self._outputs == other._outputs


def _uniq(existing: Tuple[str, ...], items: Iterable[str]) -> Tuple[str, ...]:
    out = list(existing)
    for it in items:
        if it not in out:
            out.append(it)
    return tuple(out)
