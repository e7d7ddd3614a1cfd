from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from admitpath.models.records import OutputConstraints
from admitpath.state.context import EngineState

logger = logging.getLogger(__name__)

DEFAULT_MAX = {
    "locked": 7,
    "viable": 6,
    "actions": 5,
    "stop": 5,
    "notes": 8,
}

# Coarse substring match on the rendered line ("ap" also hits "apply").
SUPPRESSION_KEYWORDS: Dict[str, tuple] = {
    "testing": ("test",),
    "cc": ("cc",),
    "ap": ("ap", "honors"),
    "internships": ("intern",),
    "extracurriculars": ("ec", "club"),
    "middle_college": ("middle college",),
}


def max_for(constraints: Optional[OutputConstraints], category: str) -> int:
    # zero or missing falls back to the default
    value = getattr(constraints, f"max_{category}", None) if constraints else None
    return value or DEFAULT_MAX[category]


def is_suppressed_line(line: str, active_flags: Iterable[str]) -> bool:
    s = line.lower()
    for flag in active_flags:
        if any(kw in s for kw in SUPPRESSION_KEYWORDS.get(flag, ())):
            return True
    return False


def filter_suppressed(lines: List[str], active_flags: List[str]) -> List[str]:
    kept = []
    for line in lines:
        if is_suppressed_line(line, active_flags):
            logger.debug("suppressed action: %r", line)
            continue
        kept.append(line)
    return kept


def shape(state: EngineState, constraints: Optional[OutputConstraints] = None) -> Dict[str, List[str]]:
    """
    Post-process accumulated outputs into bounded lists:
      - locked / viable truncated
      - actions filtered by active suppression flags, then truncated
      - stop truncated
      - notes deduplicated (stable) and truncated
    """
    outputs = state.outputs

    locked = outputs.get("locked")[: max_for(constraints, "locked")]
    viable = outputs.get("viable")[: max_for(constraints, "viable")]

    active = state.suppress.active()
    actions = filter_suppressed(outputs.get("actions"), active)
    actions = actions[: max_for(constraints, "actions")]
    stop = outputs.get("stop")[: max_for(constraints, "stop")]

    notes = list(dict.fromkeys(outputs.get("notes")))[: max_for(constraints, "notes")]

    return {
        "locked": locked,
        "viable": viable,
        "actions": actions,
        "stop": stop,
        "notes": notes,
    }
