from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Tuple, Union

from ..common.datetime_utils import to_date
from ..core.enums import HolidayScope
from ..workers.model import WorkerId, WorkerRef, same_worker


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a named day off for everyone or for listed workers."""

    name: str
    holiday_date: Optional[date]
    applies_to: Union[HolidayScope, str] = HolidayScope.ALL
    employees: Tuple[WorkerRef, ...] = field(default_factory=tuple)
    description: str = ""
    holiday_id: Optional[Union[int, str]] = None

    def applies_to_worker(self, worker_id: Optional[WorkerId]) -> bool:
        scope = self.applies_to.value if isinstance(self.applies_to, HolidayScope) else self.applies_to
        if scope == HolidayScope.ALL.value:
            return True
        if scope == HolidayScope.SPECIFIC.value:
            return any(same_worker(emp, worker_id) for emp in self.employees or ())
        return False

    def falls_in(self, year: int, month: int) -> bool:
        return self.holiday_date is not None and (self.holiday_date.year, self.holiday_date.month) == (year, month)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Holiday":
        return cls(
            name=str(data.get("name") or ""),
            holiday_date=to_date(data.get("date")),
            applies_to=data.get("appliesTo") or "",
            employees=tuple(data.get("employees") or ()),
            description=str(data.get("description") or ""),
            holiday_id=data.get("_id", data.get("id")),
        )
