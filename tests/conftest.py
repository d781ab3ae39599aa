"""Shared test fixtures."""

import pytest

from prsync.errors import TaskUpdateError
from prsync.event import PullRequestEvent
from prsync.models import CustomField, EnumOption, Task, UpdatePayload
from prsync.providers.base import TaskTracker
from prsync.reporting import ActionReporter
from prsync.settings import PrsyncSettings

STATUS_FIELD = CustomField(
    id="field_status",
    name="Dev Status",
    options=[
        EnumOption(id="opt_todo", label="📋 To Do"),
        EnumOption(id="opt_review", label="🍕 code Review"),
        EnumOption(id="opt_qa", label="🍕 ready for QA extra text"),
        EnumOption(id="opt_done", label="✅ Done"),
    ],
)


class FakeTracker(TaskTracker):
    """In-memory tracker recording every call."""

    def __init__(self, task: Task | None = None, fail_update_for: set[str] | None = None) -> None:
        self.task = task or Task(id="1", custom_fields=[STATUS_FIELD])
        self.fail_update_for = fail_update_for or set()
        self.fetched: list[str] = []
        self.updates: list[tuple[str, UpdatePayload]] = []

    async def get_task(self, task_id: str) -> Task:
        self.fetched.append(task_id)
        return self.task

    async def update_task(self, task_id: str, payload: UpdatePayload) -> Task:
        if task_id in self.fail_update_for:
            raise TaskUpdateError(task_id, "Client error '403 Forbidden'")
        self.updates.append((task_id, payload))
        return self.task


def make_event(
    event_name: str = "pull_request",
    action: str | None = "opened",
    body: str | None = "Fixes https://app.asana.com/0/111/222/f",
    login: str = "octocat",
    review_state: str | None = None,
    with_pull_request: bool = True,
) -> PullRequestEvent:
    payload: dict = {"event_name": event_name, "action": action}
    if with_pull_request:
        payload["pull_request"] = {"number": 7, "body": body, "user": {"login": login}}
    if review_state is not None:
        payload["review"] = {"state": review_state}
    return PullRequestEvent.model_validate(payload)


@pytest.fixture
def settings() -> PrsyncSettings:
    return PrsyncSettings(  # type: ignore[call-arg]
        _env_file=None,
        asana_token="asana_test_token",
        whitelist_github_users="approvedUser, release-bot",
    )


@pytest.fixture
def reporter() -> ActionReporter:
    return ActionReporter()


@pytest.fixture
def tracker() -> FakeTracker:
    return FakeTracker()
