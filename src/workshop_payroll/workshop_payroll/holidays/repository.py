from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from .model import Holiday


class HolidayRepository(Protocol):
    def list_for_month(self, *, year: int, month: int) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_id(self, holiday_id: Union[int, str]) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, holiday: Holiday) -> int:
        raise NotImplementedError

    def delete(self, holiday_id: Union[int, str]) -> bool:
        raise NotImplementedError
