from __future__ import annotations

from pathlib import Path
from typing import Optional

from admitpath.notify.feedback import build_payload, submit_feedback
from admitpath.storage.db import connect, init_schema, list_feedback
from admitpath.storage.ruleset import load_ruleset


def run(
    rating: str,
    comment: Optional[str] = None,
    rules: Optional[str] = None,
    data_dir: str = "data",
) -> None:
    ruleset = load_ruleset(rules)
    payload = build_payload(rating, comment, ruleset.engine_version)

    result = submit_feedback(payload, data_dir=data_dir)

    if result.mailto_url:
        print(f"Open this link to send feedback: {result.mailto_url}")
    elif result.queued:
        print(f"Saved locally in {Path(data_dir).resolve()} (no endpoint configured yet).")
    elif result.ok:
        print("Sent. Thank you.")
    else:
        print("Failed to send. (Endpoint not configured?)")


def show(data_dir: str = "data") -> None:
    conn = connect(Path(data_dir))
    try:
        init_schema(conn)
        rows = list_feedback(conn)
    finally:
        conn.close()

    if not rows:
        print("No queued feedback.")
        return
    for r in rows:
        comment = f" | {r['comment']}" if r["comment"] else ""
        print(f"#{r['id']} {r['timestamp']} {r['rating']} (engine {r['engine_version']}){comment}")
