from admitpath.engine.evaluate import evaluate
from admitpath.models.records import Ruleset
from admitpath.models.types import GpaBand, TemplateKey, TimeWindow
from admitpath.storage.ruleset import load_ruleset

def test_empty_execution_order_end_to_end():
    rs = Ruleset.model_validate(
        {
            "engine_version": "t",
            "execution_order": [],
            "rules": [{"stage": "s", "then": {"add_locked": ["x"]}}],
            "output_constraints": {},
            "success_templates": {},
        }
    )
    out = evaluate(
        rs,
        {
            "grade_level": 11,
            "gpa_unweighted": 3.9,
            "systems_considered": ["uc"],
            "campus_targets_uc": ["UCSD"],
        },
    )
    assert out.locked == out.viable == out.actions == out.stop == out.notes == []
    assert out.template_key == TemplateKey.FLOOR_GUARDED_UC
    assert out.gpa_band == GpaBand.A
    assert out.time_window == TimeWindow.LATE
    assert out.success_text == "Define success based on the primary viable pathway."

def test_bundled_ruleset_uc_profile():
    rs = load_ruleset()
    out = evaluate(
        rs,
        {
            "grade_level": 11,
            "gpa_unweighted": 3.9,
            "gpa_trend": "up",
            "major_bucket": "stem",
            "systems_considered": ["uc", "csu"],
            "campus_targets_uc": ["UCLA"],
            "open_to_cc_pathways": False,
        },
    )
    assert out.template_key == TemplateKey.FLOOR_GUARDED_UC
    assert out.success_text == rs.success_templates["floor_guarded_uc"]
    assert out.locked == []
    assert out.viable == [
        "UC freshman admission at mid and high selectivity campuses",
        "CSU freshman admission",
    ]
    assert out.actions == [
        "Consider AP or honors coursework in your strongest subject",
        "Take on one club leadership role and stay with it",
        "Draft your UC personal insight questions",
        "Finish math through precalculus before senior year",
    ]
    assert out.stop == ["Applying to impacted engineering majors at every campus"]
    assert out.notes == ["UC and CSU do not consider SAT/ACT scores for admission."]
    assert out.engine_version == "0.4.0"

def test_bundled_ruleset_closed_window():
    rs = load_ruleset()
    out = evaluate(
        rs,
        {
            "grade_level": 12,
            "grade_month_bucket": "october_or_later",
            "gpa_unweighted": 3.0,
            "systems_considered": ["cc_transfer", "csu"],
            "open_to_cc_pathways": True,
        },
    )
    assert out.template_key == TemplateKey.CLOSED_WINDOW
    assert out.gpa_band == GpaBand.D
    assert out.locked == [
        "Fall freshman applications for this cycle",
        "Freshman admission to UCLA and UC Berkeley",
        "Freshman admission to UCSD",
    ]
    assert out.viable == [
        "Community college with a Transfer Admission Guarantee",
        "CSU freshman admission",
    ]
    # club action is filtered by the extracurriculars flag
    assert out.actions == []

def test_bundled_ruleset_never_fires_retired_stage():
    rs = load_ruleset()
    out = evaluate(rs, {"grade_level": 9, "gpa_unweighted": 3.9})
    assert "Enroll in middle college" not in out.actions
    assert out.template_key == TemplateKey.CSU

def test_null_routing_lists_are_treated_as_empty():
    rs = Ruleset.model_validate({"execution_order": []})
    out = evaluate(
        rs,
        {"grade_level": 11, "gpa_unweighted": 3.9, "systems_considered": ["uc"], "campus_targets_uc": None},
    )
    assert out.template_key == TemplateKey.MID_UC_LATE

    out = evaluate(
        rs,
        {"grade_level": 11, "gpa_unweighted": 3.9, "systems_considered": None, "senior_course_signals": None},
    )
    assert out.template_key == TemplateKey.CSU

def test_unanswered_willingness_flag_does_not_match_false():
    rs = Ruleset.model_validate(
        {
            "execution_order": ["s"],
            "rules": [
                {"stage": "s", "when": {"field": "input.open_to_cc_pathways", "eq": False}, "then": {"add_notes": ["no cc"]}},
                {"stage": "s", "when": {"field": "input.open_to_cc_pathways", "exists": False}, "then": {"add_notes": ["unanswered"]}},
            ],
        }
    )
    out = evaluate(rs, {"grade_level": 11, "gpa_unweighted": 3.9})
    assert out.notes == ["unanswered"]

    out = evaluate(rs, {"grade_level": 11, "gpa_unweighted": 3.9, "open_to_cc_pathways": False})
    assert out.notes == ["no cc"]
