from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from admitpath.engine.constraints import shape
from admitpath.engine.runner import run_rules
from admitpath.engine.success import select_success_template, success_text
from admitpath.models.records import Presentation, Ruleset, StudentInput

logger = logging.getLogger(__name__)


def evaluate(
    ruleset: Ruleset,
    student: Union[StudentInput, Mapping[str, Any]],
) -> Presentation:
    context = run_rules(ruleset, student)
    shaped = shape(context.state, ruleset.output_constraints)

    key = select_success_template(context)
    logger.debug(
        "evaluated: gpa_band=%s time_window=%s template=%s",
        context.derived["gpa_band"],
        context.derived["time_window"],
        key.value,
    )

    return Presentation(
        **shaped,
        template_key=key,
        success_text=success_text(ruleset, key),
        gpa_band=context.derived["gpa_band"],
        time_window=context.derived["time_window"],
        engine_version=ruleset.engine_version,
    )
