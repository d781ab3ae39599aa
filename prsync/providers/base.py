"""Abstract base class for task trackers."""

from abc import ABC, abstractmethod

from prsync.models import Task, UpdatePayload


class TaskTracker(ABC):
    @abstractmethod
    async def get_task(self, task_id: str) -> Task: ...

    @abstractmethod
    async def update_task(self, task_id: str, payload: UpdatePayload) -> Task: ...
