from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker, WorkerId


class WorkerRepository(Protocol):
    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def get_by_id(self, worker_id: WorkerId) -> Optional[Worker]:
        raise NotImplementedError

    def existing_ids(self, worker_ids: Sequence[WorkerId]) -> set:
        """Return the subset of ``worker_ids`` that belong to known workers."""

        raise NotImplementedError
