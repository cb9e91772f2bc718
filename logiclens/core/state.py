"""
ⒸAngelaMos | 2026
state.py
"""
import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import orjson

from logiclens.models import CounterSet


SCHEMA = """
CREATE TABLE IF NOT EXISTS export_history (
    id TEXT PRIMARY KEY,
    source TEXT NOT NULL,
    report_path TEXT NOT NULL,
    exported_at TIMESTAMP NOT NULL,
    stats TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exported_at ON export_history(exported_at);
"""


@dataclass(frozen=True)
class ExportRecord:
    """
    One written report
    """
    id: str
    source: str
    report_path: str
    exported_at: datetime
    stats: CounterSet


class ExportHistory:
    """
    Bounded log of exported reports kept in SQLite
    Only the most recent max_entries rows survive each insert
    """
    def __init__(self, db_path: Path, max_entries: int = 10) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.db_path = db_path
        self.max_entries = max_entries
        self.db_path.parent.mkdir(parents = True, exist_ok = True)
        self._init_db()

    def _init_db(self) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.executescript(SCHEMA)
            conn.commit()

    def _get_conn(self) -> sqlite3.Connection:
        """
        Get a database connection with row factory
        """
        conn = sqlite3.connect(self.db_path, timeout = 10)
        conn.row_factory = sqlite3.Row
        return conn

    def record(
        self,
        source: str,
        report_path: str,
        stats: CounterSet,
        exported_at: datetime | None = None,
    ) -> ExportRecord:
        """
        Append an export and drop entries beyond the bound
        """
        entry = ExportRecord(
            id = str(uuid.uuid4()),
            source = source,
            report_path = report_path,
            exported_at = exported_at or datetime.now(),
            stats = stats,
        )

        with self._get_conn() as conn:
            conn.execute(
                """
                INSERT INTO export_history (id, source, report_path, exported_at, stats)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.source,
                    entry.report_path,
                    entry.exported_at.isoformat(),
                    orjson.dumps(stats.to_dict()).decode("utf-8"),
                ),
            )
            conn.execute(
                """
                DELETE FROM export_history WHERE id NOT IN (
                    SELECT id FROM export_history
                    ORDER BY exported_at DESC, rowid DESC LIMIT ?
                )
                """,
                (self.max_entries,
                 ),
            )
            conn.commit()

        return entry

    def recent(self, limit: int | None = None) -> list[ExportRecord]:
        """
        Exports newest first
        """
        with self._get_conn() as conn:
            rows = conn.execute(
                """
                SELECT * FROM export_history
                ORDER BY exported_at DESC, rowid DESC LIMIT ?
                """,
                (limit if limit is not None else self.max_entries,
                 ),
            ).fetchall()

        return [
            ExportRecord(
                id = row["id"],
                source = row["source"],
                report_path = row["report_path"],
                exported_at = datetime.fromisoformat(row["exported_at"]),
                stats = CounterSet.model_validate(orjson.loads(row["stats"])),
            ) for row in rows
        ]

    def clear(self) -> int:
        with self._get_conn() as conn:
            deleted = conn.execute("DELETE FROM export_history").rowcount
            conn.commit()
        return deleted
