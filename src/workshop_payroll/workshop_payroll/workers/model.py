from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from ..attendance.model import AttendanceRecord

WorkerId = Union[int, str]


@dataclass(frozen=True)
class WorkerSummary:
    """Populated worker reference (id plus display name)."""

    worker_id: WorkerId
    name: str = ""


WorkerRef = Union[WorkerId, WorkerSummary]


def worker_ref_id(ref: Any) -> Optional[WorkerId]:
    """Extract the worker id from a raw id, a WorkerSummary or a populated document."""
    if ref is None:
        return None
    if isinstance(ref, WorkerSummary):
        return ref.worker_id
    if isinstance(ref, Mapping):
        return ref.get("_id", ref.get("id"))
    return ref


def same_worker(ref: Any, worker_id: Optional[WorkerId]) -> bool:
    if worker_id is None:
        return False
    ref_id = worker_ref_id(ref)
    if ref_id is None:
        return False
    return ref_id == worker_id or str(ref_id) == str(worker_id)


@dataclass(frozen=True)
class Worker:
    """Domain entity: a workshop employee on monthly salary."""

    worker_id: WorkerId
    name: str
    salary: Optional[float] = None
    shift_id: Optional[WorkerId] = None
    attendance_records: Tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> WorkerSummary:
        return WorkerSummary(worker_id=self.worker_id, name=self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Worker":
        records = tuple(AttendanceRecord.from_dict(r) for r in data.get("attendanceRecords") or ())
        return cls(
            worker_id=data.get("_id", data.get("id")),
            name=str(data.get("name") or ""),
            salary=data.get("salary"),
            shift_id=worker_ref_id(data.get("batch")),
            attendance_records=records,
        )
