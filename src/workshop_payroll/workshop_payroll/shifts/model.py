from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import minutes_since_midnight


@dataclass(frozen=True)
class TimeWindow:
    """A same-day wall-clock window given as "HH:MM" strings."""

    start: Optional[str]
    end: Optional[str]
    enabled: bool = True

    @property
    def minutes(self) -> int:
        # Not clamped: an inverted or overnight window comes out negative.
        return minutes_since_midnight(self.end) - minutes_since_midnight(self.start)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["TimeWindow"]:
        if not data:
            return None
        enabled = data.get("enabled")
        return cls(
            start=data.get("from"),
            end=data.get("to"),
            enabled=True if enabled is None else bool(enabled),
        )

    def to_dict(self) -> dict:
        return {"from": self.start, "to": self.end, "enabled": self.enabled}


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work schedule ("batch") assigned to workers."""

    shift_id: Optional[Union[int, str]]
    name: str
    working_time: Optional[TimeWindow]
    lunch_time: Optional[TimeWindow] = None
    break_time: Optional[TimeWindow] = None

    @property
    def lunch_enabled(self) -> bool:
        return self.lunch_time is not None and self.lunch_time.enabled

    @property
    def break_enabled(self) -> bool:
        return self.break_time is not None and self.break_time.enabled

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shift":
        return cls(
            shift_id=data.get("_id", data.get("id")),
            name=str(data.get("name") or ""),
            working_time=TimeWindow.from_dict(data.get("workingTime")),
            lunch_time=TimeWindow.from_dict(data.get("lunchTime")),
            break_time=TimeWindow.from_dict(data.get("breakTime")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "name": self.name,
            "workingTime": self.working_time.to_dict() if self.working_time else None,
            "lunchTime": self.lunch_time.to_dict() if self.lunch_time else None,
            "breakTime": self.break_time.to_dict() if self.break_time else None,
        }
