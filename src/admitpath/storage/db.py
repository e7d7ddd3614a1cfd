from __future__ import annotations
import sqlite3
from pathlib import Path
from typing import Any, Dict, List

from admitpath.models.records import FeedbackPayload

DB_NAME = "admitpath.sqlite3"

def db_path(data_dir: Path) -> Path:
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_NAME

def connect(data_dir: Path) -> sqlite3.Connection:
    path = db_path(data_dir)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn

def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS feedback_queue (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            engine_version TEXT NOT NULL,
            timestamp TEXT NOT NULL,
            rating TEXT NOT NULL,
            comment TEXT
        );
        """
    )
    conn.commit()

def enqueue_feedback(conn: sqlite3.Connection, payload: FeedbackPayload) -> int:
    cur = conn.execute(
        """
        INSERT INTO feedback_queue(engine_version, timestamp, rating, comment)
        VALUES (?, ?, ?, ?)
        """,
        (
            payload.engine_version,
            payload.timestamp,
            payload.rating.value,
            payload.comment,
        ),
    )
    conn.commit()
    return int(cur.lastrowid)

def list_feedback(conn: sqlite3.Connection) -> List[Dict[str, Any]]:
    rows = conn.execute(
        """
        SELECT id, engine_version, timestamp, rating, comment
        FROM feedback_queue
        ORDER BY id ASC
        """
    ).fetchall()
    return [dict(r) for r in rows]
