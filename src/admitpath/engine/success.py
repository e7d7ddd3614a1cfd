from __future__ import annotations

from typing import Any, List

from admitpath.features.conditions import resolve_field
from admitpath.models.records import Ruleset
from admitpath.models.types import GpaBand, TemplateKey, TimeWindow

# Bands where the community-college route is structurally primary
CC_PRIMARY_BANDS = {GpaBand.C.value, GpaBand.D.value, GpaBand.E.value}

ACCESS_UC_CAMPUS = "UCM"
FLOOR_GUARDED_UC_CAMPUSES = ["UCR", "UCSC", "UCSD", "UCLA"]

FALLBACK_SUCCESS_TEXT = "Define success based on the primary viable pathway."


def _as_list(v: Any) -> List[Any]:
    return list(v) if isinstance(v, (list, tuple)) else []


def select_success_template(context: Any) -> TemplateKey:
    """
    First matching branch wins; the order below is part of the contract.
    Runs after all rules, reads input and derived facts only.
    """
    window = resolve_field(context, "derived.time_window")
    if window == TimeWindow.CLOSED.value:
        return TemplateKey.CLOSED_WINDOW

    band = resolve_field(context, "derived.gpa_band")
    systems = _as_list(resolve_field(context, "input.systems_considered"))
    campuses = _as_list(resolve_field(context, "input.campus_targets_uc"))

    if band in CC_PRIMARY_BANDS:
        if "cc_transfer" in systems:
            return TemplateKey.CC_TO_UC
        return TemplateKey.CC_TRANSFER_REFUSED

    if "uc" in systems:
        # UCM is checked before the wider campus set
        if ACCESS_UC_CAMPUS in campuses:
            return TemplateKey.ACCESS_UC
        if any(c in campuses for c in FLOOR_GUARDED_UC_CAMPUSES):
            return TemplateKey.FLOOR_GUARDED_UC
        if window == TimeWindow.EARLY.value:
            return TemplateKey.MID_UC_EARLY
        return TemplateKey.MID_UC_LATE

    return TemplateKey.CSU


def success_text(ruleset: Ruleset, key: TemplateKey) -> str:
    return ruleset.success_templates.get(key.value) or FALLBACK_SUCCESS_TEXT
