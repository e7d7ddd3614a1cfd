from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

SUPPRESSION_FLAGS = (
    "cc",
    "ap",
    "middle_college",
    "testing",
    "internships",
    "extracurriculars",
    "essays",
)


class SuppressionState:
    """
    Monotonic suppression flags. A flag only ever goes False -> True;
    patches asking for False are ignored. apply() returns a new state.
    """

    def __init__(self, flags: Optional[Mapping[str, Any]] = None) -> None:
        self._flags: Dict[str, bool] = {k: False for k in SUPPRESSION_FLAGS}
        for k, v in (flags or {}).items():
            if v is True:
                self._flags[k] = True

    def apply(self, patch: Optional[Mapping[str, Any]]) -> "SuppressionState":
        if not patch:
            return self
        merged = dict(self._flags)
        for k, v in patch.items():
            if v is True:
                merged[k] = True
        return SuppressionState(merged)

    def is_set(self, flag: str) -> bool:
        return self._flags.get(flag, False)

    def active(self) -> List[str]:
        return [k for k, v in self._flags.items() if v]

    def as_dict(self) -> Dict[str, bool]:
        return dict(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuppressionState):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"SuppressionState(active={self.active()!r})"
