from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Worker, WorkerId
from .repository import WorkerRepository


def _row_to_worker(r: Dict[str, Any]) -> Worker:
    salary = r.get("salary")
    return Worker(
        worker_id=int(r["worker_id"]),
        name=r["name"],
        salary=float(salary) if salary is not None else None,
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
    )


class MySQLWorkerRepository(WorkerRepository):
    """Workers without their attendance; records are read per month via the attendance repository."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT worker_id, name, salary, shift_id FROM workers ORDER BY name")
            return [_row_to_worker(r) for r in fetchall(cur)]

    def get_by_id(self, worker_id: WorkerId) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT worker_id, name, salary, shift_id FROM workers WHERE worker_id=%s", (worker_id,))
            r = fetchone(cur)
            return _row_to_worker(r) if r else None

    def existing_ids(self, worker_ids: Sequence[WorkerId]) -> set:
        ids = list(dict.fromkeys(worker_ids))
        if not ids:
            return set()
        placeholders = ", ".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT worker_id FROM workers WHERE worker_id IN ({placeholders})", tuple(ids))
            found = {int(r["worker_id"]) for r in fetchall(cur)}
        return {i for i in ids if _as_int(i) in found}


def _as_int(value: WorkerId) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
