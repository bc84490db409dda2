from __future__ import annotations

from typing import Protocol, Sequence

from ..workers.model import WorkerId
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_worker_month(self, worker_id: WorkerId, *, year: int, month: int) -> Sequence[AttendanceRecord]:
        """Records of one worker dated inside (year, month), in capture order."""

        raise NotImplementedError
