"""GitHub event payload loading."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from prsync.models import EventContext


class User(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str


class PullRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    number: int
    body: str | None = None
    user: User


class Review(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    state: str | None = None


class PullRequestEvent(BaseModel):
    """The subset of a GitHub webhook payload the pipeline reads, plus the event name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    event_name: str
    action: str | None = None
    pull_request: PullRequest | None = None
    review: Review | None = None

    def context(self) -> EventContext:
        if self.pull_request is None:
            raise ValueError("event has no pull request")
        return EventContext(
            event_name=self.event_name,
            action=self.action,
            author_login=self.pull_request.user.login,
            review_state=self.review.state if self.review else None,
        )


def load_event(path: Path, event_name: str) -> PullRequestEvent:
    """Read the webhook payload GitHub Actions writes to GITHUB_EVENT_PATH."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    return PullRequestEvent.model_validate({**payload, "event_name": event_name})
