"""Asana REST API provider."""

import logging

import httpx
from pydantic import ValidationError

from prsync.errors import TaskFetchError, TaskUpdateError
from prsync.models import Task, UpdatePayload
from prsync.providers.base import TaskTracker
from prsync.settings import PrsyncSettings

LOGGER = logging.getLogger("prsync.providers.asana")

# Only the fields the pipeline reads
TASK_OPT_FIELDS = (
    "name,custom_fields.gid,custom_fields.name,custom_fields.enum_options.gid,custom_fields.enum_options.name"
)

# Transport failures, non-JSON bodies and bodies without a task under "data"
_RESPONSE_ERRORS = (httpx.HTTPError, KeyError, TypeError, ValueError, ValidationError)


class AsanaTracker(TaskTracker):
    def __init__(self, settings: PrsyncSettings) -> None:
        if not settings.asana_token:
            raise RuntimeError("asana_token is required")
        self._base_url = settings.asana_base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {settings.asana_token.get_secret_value()}",
                "Accept": "application/json",
            },
            timeout=settings.request_timeout,
        )

    async def __aenter__(self) -> "AsanaTracker":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        LOGGER.debug("%s %s", method, path)
        response = await self._client.request(method, f"{self._base_url}{path}", **kwargs)
        response.raise_for_status()
        return response.json()["data"]

    async def get_task(self, task_id: str) -> Task:
        try:
            data = await self._request("GET", f"/tasks/{task_id}", params={"opt_fields": TASK_OPT_FIELDS})
            return Task.model_validate(data)
        except _RESPONSE_ERRORS as exc:
            raise TaskFetchError(task_id, exc) from exc

    async def update_task(self, task_id: str, payload: UpdatePayload) -> Task:
        try:
            data = await self._request("PUT", f"/tasks/{task_id}", json={"data": payload.as_request_body()})
            return Task.model_validate(data)
        except _RESPONSE_ERRORS as exc:
            raise TaskUpdateError(task_id, exc) from exc
