from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.enums import HolidayScope
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _row_to_holiday(r: Dict[str, Any], employees: List[int]) -> Holiday:
    return Holiday(
        holiday_id=int(r["holiday_id"]),
        name=r["name"],
        holiday_date=r["holiday_date"],
        applies_to=HolidayScope(r["applies_to"]),
        employees=tuple(employees),
        description=r.get("description") or "",
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, *, year: int, month: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, name, holiday_date, description, applies_to
                FROM holidays
                WHERE YEAR(holiday_date)=%s AND MONTH(holiday_date)=%s
                ORDER BY holiday_date, holiday_id
                """,
                (int(year), int(month)),
            )
            rows = fetchall(cur)
            cur.execute(
                """
                SELECT he.holiday_id, he.worker_id
                FROM holiday_employees he
                JOIN holidays h ON h.holiday_id = he.holiday_id
                WHERE YEAR(h.holiday_date)=%s AND MONTH(h.holiday_date)=%s
                """,
                (int(year), int(month)),
            )
            employees: Dict[int, List[int]] = defaultdict(list)
            for link in fetchall(cur):
                employees[int(link["holiday_id"])].append(int(link["worker_id"]))
            return [_row_to_holiday(r, employees[int(r["holiday_id"])]) for r in rows]

    def get_by_id(self, holiday_id: Union[int, str]) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_id, name, holiday_date, description, applies_to FROM holidays WHERE holiday_id=%s",
                (holiday_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            cur.execute("SELECT worker_id FROM holiday_employees WHERE holiday_id=%s", (holiday_id,))
            return _row_to_holiday(r, [int(x["worker_id"]) for x in fetchall(cur)])

    def create(self, holiday: Holiday) -> int:
        scope = HolidayScope(holiday.applies_to)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holidays (name, holiday_date, description, applies_to)
                VALUES (%s, %s, %s, %s)
                """,
                (holiday.name, holiday.holiday_date, holiday.description or "", scope.value),
            )
            holiday_id = int(cur.lastrowid)
            if scope == HolidayScope.SPECIFIC and holiday.employees:
                cur.executemany(
                    "INSERT INTO holiday_employees (holiday_id, worker_id) VALUES (%s, %s)",
                    [(holiday_id, worker_id) for worker_id in holiday.employees],
                )
            return holiday_id

    def delete(self, holiday_id: Union[int, str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (holiday_id,))
            return cur.rowcount > 0
