from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import requests

from admitpath.models.records import FeedbackPayload, FeedbackResult
from admitpath.models.types import FeedbackRating
from admitpath.storage.db import connect, enqueue_feedback, init_schema

COMMENT_LIMIT = 1200
POST_TIMEOUT_SECONDS = 10


def build_payload(
    rating: Union[str, FeedbackRating],
    comment: Optional[str],
    engine_version: str,
    now: Optional[datetime] = None,
) -> FeedbackPayload:
    # no student inputs are sent
    ts = (now or datetime.now(timezone.utc)).isoformat()
    return FeedbackPayload(
        engine_version=engine_version or "unknown",
        timestamp=ts,
        rating=FeedbackRating(rating),
        comment=(comment or "").strip()[:COMMENT_LIMIT],
    )


def mailto_url(address: str, payload: FeedbackPayload) -> str:
    if not address.startswith("mailto:"):
        address = f"mailto:{address}"
    subject = quote(f"Decision Engine Feedback ({payload.rating.value})")
    body = quote(
        f"Engine: {payload.engine_version}\n"
        f"Time: {payload.timestamp}\n"
        f"Rating: {payload.rating.value}\n\n"
        f"Comment:\n{payload.comment}\n"
    )
    return f"{address}?subject={subject}&body={body}"


def submit_feedback(payload: FeedbackPayload, data_dir: str = "data") -> FeedbackResult:
    """
    Endpoint POST if ADMITPATH_FEEDBACK_ENDPOINT is set, else a mailto link
    if ADMITPATH_FEEDBACK_MAILTO is set, else queue in the local sqlite db.
    """
    endpoint = os.getenv("ADMITPATH_FEEDBACK_ENDPOINT")
    if endpoint:
        resp = requests.post(
            endpoint,
            data=payload.model_dump_json(),
            headers={"Content-Type": "application/json"},
            timeout=POST_TIMEOUT_SECONDS,
        )
        return FeedbackResult(ok=resp.ok)

    mailto = os.getenv("ADMITPATH_FEEDBACK_MAILTO")
    if mailto:
        return FeedbackResult(ok=True, mailto_url=mailto_url(mailto, payload))

    conn = connect(Path(data_dir))
    try:
        init_schema(conn)
        enqueue_feedback(conn, payload)
    finally:
        conn.close()
    return FeedbackResult(ok=True, queued=True)
