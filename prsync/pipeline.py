"""One run: pull request event in, task status updates out."""

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import TypeVar

from prsync.errors import MissingDescriptionError, MissingPullRequestError, NoTaskLinksError, PrsyncError
from prsync.event import PullRequestEvent
from prsync.fields import reconcile_status_field
from prsync.links import extract_task_ids
from prsync.models import UpdatePayload
from prsync.providers.base import TaskTracker
from prsync.reporting import ActionReporter
from prsync.settings import PrsyncSettings
from prsync.status import resolve_status

LOGGER = logging.getLogger("prsync.pipeline")

NO_RELEVANT_ACTION = "No relevant action detected, skipping status update."

T = TypeVar("T")


async def gather_all_or_fail(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Wait for every awaitable; the first exception raised propagates.

    Awaitables that already finished are not undone and the rest are not cancelled.
    """
    return await asyncio.gather(*aws)


async def run_pipeline(
    event: PullRequestEvent,
    settings: PrsyncSettings,
    tracker: TaskTracker,
    reporter: ActionReporter,
) -> None:
    """Sync the linked tasks' status for one event. Failures go to ``reporter``."""
    try:
        await _sync(event, settings, tracker, reporter)
    except PrsyncError as exc:
        reporter.report_failure(str(exc))


async def _sync(
    event: PullRequestEvent,
    settings: PrsyncSettings,
    tracker: TaskTracker,
    reporter: ActionReporter,
) -> None:
    pull_request = event.pull_request
    if pull_request is None:
        raise MissingPullRequestError()
    if not pull_request.body:
        raise MissingDescriptionError()

    task_ids = extract_task_ids(pull_request.body)
    if not task_ids:
        raise NoTaskLinksError()
    LOGGER.debug("PR #%s links tasks %s", pull_request.number, task_ids)

    # All linked tasks are assumed to share the first task's field schema.
    first_task = await tracker.get_task(task_ids[0])
    status_field = reconcile_status_field(first_task.custom_fields)

    status = resolve_status(event.context(), settings.allow_list)
    if status is None:
        reporter.report_info(NO_RELEVANT_ACTION)
        return

    payload = UpdatePayload(field_id=status_field.field_id, option_id=status_field.option_id_for(status))
    LOGGER.debug("Applying %s to %d task(s)", payload, len(task_ids))
    await gather_all_or_fail(tracker.update_task(task_id, payload) for task_id in task_ids)

    reporter.report_info(f"Task status updated to {status} ({payload.option_id})")
