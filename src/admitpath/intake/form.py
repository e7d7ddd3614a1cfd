from __future__ import annotations

import math
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml

from admitpath.models.records import StudentInput

GPA_MIN = 2.0
GPA_MAX = 4.0

WILLINGNESS_FLAGS = (
    "willing_prioritize_gpa_over_rigor",
    "willing_summer_academics",
    "willing_reduce_ecs",
    "open_to_cc_pathways",
)


def to_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    return str(v).lower() == "true"


def clamp(n: float, lo: float, hi: float) -> float:
    if math.isnan(n):
        return lo
    return max(lo, min(hi, n))


def _parse_int(v: Any) -> Optional[int]:
    if v is None or v == "":
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def _parse_float(v: Any) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan


def _multi(v: Any) -> List[str]:
    if not v:
        return []
    if isinstance(v, (list, tuple)):
        return [str(x) for x in v]
    return [str(v)]


def read_input(raw: Mapping[str, Any]) -> StudentInput:
    """
    Normalize a raw form-like mapping into an input record the way the
    intake form does: GPA clamped to [2.0, 4.0], month bucket kept only at
    grade 12, "true"/"false" strings coerced, blank optionals become None.
    """
    grade_level = _parse_int(raw.get("grade_level"))

    return StudentInput(
        grade_level=grade_level,
        grade_month_bucket=raw.get("grade_month_bucket") if grade_level == 12 else None,
        gpa_unweighted=clamp(_parse_float(raw.get("gpa_unweighted")), GPA_MIN, GPA_MAX),
        gpa_trend=raw.get("gpa_trend"),
        grade_concentration=raw.get("grade_concentration"),
        major_bucket=raw.get("major_bucket"),
        systems_considered=_multi(raw.get("systems_considered")),
        **{flag: to_bool(raw.get(flag, False)) for flag in WILLINGNESS_FLAGS},
        summer_travel_weeks=_parse_int(raw.get("summer_travel_weeks")),
        campus_targets_uc=_multi(raw.get("campus_targets_uc")),
        academic_anomaly_timing=raw.get("academic_anomaly_timing") or None,
        ec_leadership_recognition=raw.get("ec_leadership_recognition") or None,
        senior_course_signals=_multi(raw.get("senior_course_signals")),
    )


def load_input_file(path: Union[str, Path]) -> StudentInput:
    # YAML loader also reads JSON documents
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Input file {path} is not a mapping")
    return read_input(raw)
