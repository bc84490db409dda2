from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: Union[int, str]) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, shift: Shift) -> int:
        raise NotImplementedError

    def update(self, shift: Shift) -> bool:
        raise NotImplementedError

    def delete(self, shift_id: Union[int, str]) -> bool:
        raise NotImplementedError
