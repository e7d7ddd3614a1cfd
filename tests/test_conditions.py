from admitpath.features.conditions import (
    UNDEFINED,
    AllOf,
    Always,
    Leaf,
    Unknown,
    evaluate_condition,
    parse_condition,
    resolve_field,
)

def ctx(**inp):
    return {
        "input": inp,
        "derived": {"gpa_band": "B", "time_window": "late"},
        "state": {"suppress": {"ap": False, "cc": True}, "outputs": {"notes": []}},
    }

def test_resolve_field_walks_namespaces():
    c = ctx(major_bucket="stem")
    assert resolve_field(c, "input.major_bucket") == "stem"
    assert resolve_field(c, "derived.gpa_band") == "B"
    assert resolve_field(c, "state.suppress.cc") is True

def test_resolve_field_missing_segment_is_undefined():
    c = ctx(major_bucket=None)
    assert resolve_field(c, "input.nope") is UNDEFINED
    assert resolve_field(c, "input.major_bucket.deeper") is UNDEFINED
    assert resolve_field(c, "state.suppress.ap.x.y") is UNDEFINED

def test_resolve_field_rejects_unknown_root():
    c = ctx()
    c["secrets"] = {"token": "x"}
    assert resolve_field(c, "secrets.token") is UNDEFINED
    assert resolve_field(c, None) is UNDEFINED

def test_absent_condition_is_true():
    assert evaluate_condition(ctx(), None) is True
    assert isinstance(parse_condition(None), Always)

def test_eq_is_strict():
    c = ctx(grade_level=11, open_to_cc_pathways=True)
    assert evaluate_condition(c, {"field": "input.grade_level", "eq": 11})
    assert not evaluate_condition(c, {"field": "input.grade_level", "eq": "11"})
    assert evaluate_condition(c, {"field": "input.open_to_cc_pathways", "eq": True})
    assert not evaluate_condition(c, {"field": "input.open_to_cc_pathways", "eq": 1})

def test_in_requires_sequence_operand():
    c = ctx()
    assert evaluate_condition(c, {"field": "derived.gpa_band", "in": ["A", "B"]})
    assert not evaluate_condition(c, {"field": "derived.gpa_band", "in": ["C"]})
    assert not evaluate_condition(c, {"field": "derived.gpa_band", "in": "AB"})

def test_gte_numeric_only():
    c = ctx(gpa_unweighted=3.5, gpa_text="3.9", flag=True)
    assert evaluate_condition(c, {"field": "input.gpa_unweighted", "gte": 3.5})
    assert not evaluate_condition(c, {"field": "input.gpa_unweighted", "gte": 3.6})
    assert not evaluate_condition(c, {"field": "input.gpa_text", "gte": 3.0})
    assert not evaluate_condition(c, {"field": "input.flag", "gte": 0})
    assert not evaluate_condition(c, {"field": "input.missing", "gte": 0})

def test_contains_requires_sequence_value():
    c = ctx(systems_considered=["uc", "csu"], major_bucket="uc")
    assert evaluate_condition(c, {"field": "input.systems_considered", "contains": "uc"})
    assert not evaluate_condition(c, {"field": "input.systems_considered", "contains": "cc_transfer"})
    assert not evaluate_condition(c, {"field": "input.major_bucket", "contains": "uc"})

def test_exists_treats_empty_sequence_as_absent():
    c = ctx(campus_targets_uc=[], ec_leadership_recognition=None, gpa_trend="up")
    assert evaluate_condition(c, {"field": "input.gpa_trend", "exists": True})
    assert evaluate_condition(c, {"field": "input.campus_targets_uc", "exists": False})
    assert evaluate_condition(c, {"field": "input.ec_leadership_recognition", "exists": False})
    assert evaluate_condition(c, {"field": "input.never_set", "exists": False})
    assert not evaluate_condition(c, {"field": "input.never_set", "exists": True})

def test_undefined_fails_every_operator_but_exists_false():
    c = ctx()
    for op, operand in [("eq", None), ("in", [None]), ("gte", 0), ("contains", None)]:
        assert not evaluate_condition(c, {"field": "input.never_set", op: operand})

def test_all_and_any_nest():
    c = ctx(grade_level=11, major_bucket="stem")
    cond = {
        "all": [
            {"field": "input.grade_level", "eq": 11},
            {"any": [
                {"field": "input.major_bucket", "eq": "arts"},
                {"field": "state.suppress.cc", "eq": True},
            ]},
        ]
    }
    assert evaluate_condition(c, cond)
    assert evaluate_condition(c, {"all": []})
    assert not evaluate_condition(c, {"any": []})

def test_unknown_shapes_are_false():
    c = ctx(grade_level=11)
    assert not evaluate_condition(c, {"field": "input.grade_level", "lt": 12})
    assert not evaluate_condition(c, {"all": "input.grade_level"})
    assert not evaluate_condition(c, "input.grade_level == 11")
    assert not evaluate_condition(c, 42)
    assert isinstance(parse_condition({"foo": 1}), Unknown)

def test_parse_condition_builds_variants():
    cond = parse_condition({"all": [{"field": "input.x", "eq": 1}, None]})
    assert cond == AllOf((Leaf("input.x", "eq", 1), Always()))
