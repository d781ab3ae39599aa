"""Decide which status a pull request event moves its tasks to."""

from collections.abc import Collection

from prsync.models import CODE_REVIEW, READY_FOR_QA, EventContext

_REOPENING_ACTIONS = {"opened", "reopened"}


def resolve_status(ctx: EventContext, allow_list: Collection[str]) -> str | None:
    """Return the canonical status for the event, or None when nothing applies.

    Allow-listed authors always go straight to READY FOR QA.
    """
    if ctx.author_login in allow_list:
        return READY_FOR_QA
    if ctx.event_name == "pull_request" and ctx.action in _REOPENING_ACTIONS:
        return CODE_REVIEW
    if ctx.event_name == "pull_request_review" and ctx.review_state == "approved":
        return READY_FOR_QA
    return None
