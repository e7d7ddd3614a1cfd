from __future__ import annotations

from typing import Optional

from admitpath.engine.evaluate import evaluate
from admitpath.intake.form import load_input_file
from admitpath.render.text import render_text
from admitpath.storage.ruleset import load_ruleset, rules_path


def run(input_path: str, rules: Optional[str] = None, as_json: bool = False) -> None:
    ruleset = load_ruleset(rules)
    student = load_input_file(input_path)

    presentation = evaluate(ruleset, student)

    if as_json:
        print(presentation.model_dump_json(indent=2))
        return

    print(f"Rules: {rules_path(rules)}")
    print(render_text(presentation, student))
