from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Shift, TimeWindow
from .repository import ShiftRepository

_COLUMNS = """
    shift_id, shift_name, working_from, working_to,
    lunch_from, lunch_to, lunch_enabled, break_from, break_to, break_enabled
"""


def _window(start: Any, end: Any, enabled: Any = True) -> Optional[TimeWindow]:
    if start is None and end is None:
        return None
    return TimeWindow(start=start, end=end, enabled=bool(enabled))


def _row_to_shift(r: Dict[str, Any]) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        name=r["shift_name"],
        working_time=_window(r["working_from"], r["working_to"]),
        lunch_time=_window(r.get("lunch_from"), r.get("lunch_to"), r.get("lunch_enabled", 1)),
        break_time=_window(r.get("break_from"), r.get("break_to"), r.get("break_enabled", 1)),
    )


def _params(shift: Shift) -> tuple:
    lunch = shift.lunch_time or TimeWindow(None, None, False)
    brk = shift.break_time or TimeWindow(None, None, False)
    return (
        shift.name,
        shift.working_time.start,
        shift.working_time.end,
        lunch.start,
        lunch.end,
        int(lunch.enabled),
        brk.start,
        brk.end,
        int(brk.enabled),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts ORDER BY shift_id")
            return [_row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: Union[int, str]) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

    def create(self, shift: Shift) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts (shift_name, working_from, working_to,
                                    lunch_from, lunch_to, lunch_enabled,
                                    break_from, break_to, break_enabled)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                _params(shift),
            )
            return int(cur.lastrowid)

    def update(self, shift: Shift) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET shift_name=%s, working_from=%s, working_to=%s,
                    lunch_from=%s, lunch_to=%s, lunch_enabled=%s,
                    break_from=%s, break_to=%s, break_enabled=%s
                WHERE shift_id=%s
                """,
                _params(shift) + (shift.shift_id,),
            )
            return cur.rowcount > 0

    def delete(self, shift_id: Union[int, str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (shift_id,))
            return cur.rowcount > 0
