from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from admitpath.models.types import GpaBand, TimeWindow

# highest threshold wins
GPA_BANDS: List[Tuple[float, GpaBand]] = [
    (3.80, GpaBand.A),
    (3.50, GpaBand.B),
    (3.20, GpaBand.C),
    (2.80, GpaBand.D),
]

CLOSED_MONTH_BUCKET = "october_or_later"


def gpa_band(gpa: Any) -> GpaBand:
    if isinstance(gpa, bool) or not isinstance(gpa, (int, float)):
        return GpaBand.E
    for threshold, band in GPA_BANDS:
        if gpa >= threshold:
            return band
    return GpaBand.E


def time_window(grade_level: Any, month_bucket: Any) -> TimeWindow:
    if grade_level in (9, 10):
        return TimeWindow.EARLY
    if grade_level == 11:
        return TimeWindow.LATE
    if grade_level == 12:
        if month_bucket == CLOSED_MONTH_BUCKET:
            return TimeWindow.CLOSED
        return TimeWindow.FINAL
    return TimeWindow.EARLY


def compute_derived(input_facts: Mapping[str, Any]) -> Dict[str, str]:
    """
    Facts computed once per evaluation, exposed to rules as derived.*.
    Values are the plain strings rules compare against.
    """
    return {
        "gpa_band": gpa_band(input_facts.get("gpa_unweighted")).value,
        "time_window": time_window(
            input_facts.get("grade_level"),
            input_facts.get("grade_month_bucket"),
        ).value,
    }
