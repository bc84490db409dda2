from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..workers.model import WorkerId
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_worker_month(self, worker_id: WorkerId, *, year: int, month: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, record_date, check_in, check_out, method
                FROM attendance_records
                WHERE worker_id=%s AND YEAR(record_date)=%s AND MONTH(record_date)=%s
                ORDER BY attendance_id
                """,
                (worker_id, int(year), int(month)),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    record_date=r["record_date"],
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                    method=AttendanceMethod(r["method"]) if r.get("method") else None,
                )
                for r in rows
            ]
