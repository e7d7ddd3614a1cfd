from __future__ import annotations

from typing import List, Optional

from admitpath.models.records import Presentation, StudentInput

EMPTY_MESSAGES = {
    "locked": (
        "No new pathways are closing at this point. "
        "What’s listed elsewhere reflects the current planning reality."
    ),
    "viable": (
        "No new pathways emerged beyond what is already expected. "
        "This confirms your current understanding."
    ),
    "actions": "No additional high-impact actions surfaced beyond standard application execution.",
    "stop": "No common time-sinks stand out here. Focus on clean execution of the viable plan.",
    "notes": "No additional context is required for this scenario.",
}

SECTION_TITLES = [
    ("locked", "Pathways now locked"),
    ("viable", "Still viable"),
    ("actions", "High-impact actions"),
    ("stop", "Stop spending time on"),
]

UC_EXPLAINER = (
    "About UC campuses: selectivity differs sharply between campuses, "
    "so the campuses you target change what success looks like."
)


def show_uc_explainer(student: Optional[StudentInput]) -> bool:
    if student is None:
        return False
    return "uc" in student.systems_considered or len(student.campus_targets_uc) > 0


def _section(title: str, items: List[str], empty_text: str) -> List[str]:
    lines = [title]
    if not items:
        lines.append(f"  ({empty_text})")
        return lines
    lines.extend(f"  - {it}" for it in items)
    return lines


def render_text(presentation: Presentation, student: Optional[StudentInput] = None) -> str:
    p = presentation
    lines: List[str] = [
        f"Engine version: {p.engine_version}",
        f"GPA band: {p.gpa_band.value} | Time window: {p.time_window.value}",
        "",
    ]

    for category, title in SECTION_TITLES:
        lines.extend(_section(title, getattr(p, category), EMPTY_MESSAGES[category]))
        lines.append("")

    lines.append("What success looks like")
    lines.append(f"  {p.success_text}")
    lines.append("")

    lines.extend(_section("Context notes", p.notes, EMPTY_MESSAGES["notes"]))

    if show_uc_explainer(student):
        lines.append("")
        lines.append(UC_EXPLAINER)

    return "\n".join(lines)
