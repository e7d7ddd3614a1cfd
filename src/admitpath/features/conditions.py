from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

# Condition forms:
#   {field, eq|in|gte|contains|exists: operand}
#   {all: [cond...]}, {any: [cond...]}
#   null -> always true; anything else -> false

ROOTS = ("input", "derived", "state")

# probe order when a leaf carries more than one operator
OPERATORS = ("exists", "eq", "in", "gte", "contains")


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class Always:
    pass


@dataclass(frozen=True)
class Leaf:
    field: Any
    operator: str
    operand: Any


@dataclass(frozen=True)
class AllOf:
    conditions: Tuple["Condition", ...]


@dataclass(frozen=True)
class AnyOf:
    conditions: Tuple["Condition", ...]


@dataclass(frozen=True)
class Unknown:
    raw: Any


Condition = Union[Always, Leaf, AllOf, AnyOf, Unknown]
_VARIANTS = (Always, Leaf, AllOf, AnyOf, Unknown)


def parse_condition(raw: Any) -> Condition:
    if raw is None:
        return Always()
    if isinstance(raw, _VARIANTS):
        return raw
    if not isinstance(raw, Mapping):
        return Unknown(raw)

    for key, variant in (("all", AllOf), ("any", AnyOf)):
        nested = raw.get(key)
        if isinstance(nested, (list, tuple)):
            return variant(tuple(parse_condition(c) for c in nested))
        if nested:
            return Unknown(raw)

    for op in OPERATORS:
        if op in raw:
            return Leaf(field=raw.get("field"), operator=op, operand=raw[op])
    return Unknown(raw)


def _step(cur: Any, segment: str) -> Any:
    if isinstance(cur, Mapping):
        return cur.get(segment, UNDEFINED)
    if isinstance(cur, (list, tuple)) and segment.isdigit():
        idx = int(segment)
        return cur[idx] if idx < len(cur) else UNDEFINED
    return UNDEFINED


def resolve_field(context: Any, path: Any) -> Any:
    """
    Walk a dotted path such as input.major_bucket, derived.gpa_band or
    state.suppress.cc. Returns UNDEFINED as soon as a segment is missing.
    """
    if not isinstance(path, str) or not path:
        return UNDEFINED
    root, *rest = path.split(".")
    if root not in ROOTS:
        return UNDEFINED

    if isinstance(context, Mapping):
        cur = context.get(root, UNDEFINED)
    else:
        cur = context.namespace(root)

    for segment in rest:
        if cur is None or cur is UNDEFINED:
            return UNDEFINED
        cur = _step(cur, segment)
    return cur


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def strict_equal(a: Any, b: Any) -> bool:
    if a is UNDEFINED or b is UNDEFINED:
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


def _is_present(value: Any) -> bool:
    if value is UNDEFINED or value is None:
        return False
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return False
    return True


def _compare(value: Any, operator: str, operand: Any) -> bool:
    if operator == "exists":
        present = _is_present(value)
        return present if operand else not present
    if operator == "eq":
        return strict_equal(value, operand)
    if operator == "in":
        if not isinstance(operand, (list, tuple)):
            return False
        return any(strict_equal(value, x) for x in operand)
    if operator == "gte":
        if not _is_number(value) or not _is_number(operand):
            return False
        return value >= operand
    if operator == "contains":
        if not isinstance(value, (list, tuple)):
            return False
        return any(strict_equal(x, operand) for x in value)
    return False


def evaluate_condition(context: Any, condition: Any) -> bool:
    """Total: unknown shapes evaluate to False, nothing raises."""
    cond = parse_condition(condition)

    if isinstance(cond, Always):
        return True
    if isinstance(cond, AllOf):
        return all(evaluate_condition(context, c) for c in cond.conditions)
    if isinstance(cond, AnyOf):
        return any(evaluate_condition(context, c) for c in cond.conditions)
    if isinstance(cond, Leaf):
        return _compare(resolve_field(context, cond.field), cond.operator, cond.operand)
    return False
