from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from admitpath.models.types import FeedbackRating, GpaBand, TemplateKey, TimeWindow

class StudentInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    grade_level: Optional[int] = None
    grade_month_bucket: Optional[str] = None  # only meaningful at grade 12
    gpa_unweighted: Optional[float] = None

    gpa_trend: Optional[str] = None
    grade_concentration: Optional[str] = None
    major_bucket: Optional[str] = None
    systems_considered: List[str] = Field(default_factory=list)

    # None when the caller never answered; intake.form defaults them to False
    willing_prioritize_gpa_over_rigor: Optional[bool] = None
    willing_summer_academics: Optional[bool] = None
    willing_reduce_ecs: Optional[bool] = None
    open_to_cc_pathways: Optional[bool] = None

    summer_travel_weeks: Optional[int] = None

    # optional routing
    campus_targets_uc: List[str] = Field(default_factory=list)
    academic_anomaly_timing: Optional[str] = None
    ec_leadership_recognition: Optional[str] = None
    senior_course_signals: List[str] = Field(default_factory=list)

    @field_validator("systems_considered", "campus_targets_uc", "senior_course_signals", mode="before")
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        return [] if v is None else v

class Effect(BaseModel):
    model_config = ConfigDict(extra="allow")

    add_locked: Optional[List[str]] = None
    add_viable: Optional[List[str]] = None
    add_actions: Optional[List[str]] = None
    add_stop: Optional[List[str]] = None
    add_notes: Optional[List[str]] = None
    # kept untyped: only a literal True sets a flag
    set_suppress: Optional[Dict[str, Any]] = None

class Rule(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    stage: str
    when: Optional[Any] = None
    then: Optional[Effect] = None

class OutputConstraints(BaseModel):
    model_config = ConfigDict(extra="allow")

    max_locked: Optional[int] = None
    max_viable: Optional[int] = None
    max_actions: Optional[int] = None
    max_stop: Optional[int] = None
    max_notes: Optional[int] = None

class Ruleset(BaseModel):
    model_config = ConfigDict(extra="allow")

    engine_version: str = "unknown"
    execution_order: List[str] = Field(default_factory=list)
    rules: List[Rule] = Field(default_factory=list)
    output_constraints: OutputConstraints = Field(default_factory=OutputConstraints)
    success_templates: Dict[str, str] = Field(default_factory=dict)

    @field_validator("execution_order", "rules", mode="before")
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        # a null section behaves like an absent one
        return [] if v is None else v

    @field_validator("output_constraints", "success_templates", mode="before")
    @classmethod
    def _null_mapping(cls, v: Any) -> Any:
        return {} if v is None else v

class Presentation(BaseModel):
    locked: List[str]
    viable: List[str]
    actions: List[str]
    stop: List[str]
    notes: List[str]
    template_key: TemplateKey
    success_text: str
    gpa_band: GpaBand
    time_window: TimeWindow
    engine_version: str = "unknown"

class FeedbackPayload(BaseModel):
    engine_version: str
    timestamp: str  # ISO-8601, UTC
    rating: FeedbackRating
    comment: str = ""

class FeedbackResult(BaseModel):
    ok: bool
    queued: bool = False
    mailto_url: Optional[str] = None
