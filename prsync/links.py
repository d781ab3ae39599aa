"""Find Asana task links in pull request descriptions."""

import re

# https://app.asana.com/1/1200203178379976/project/<project>/task/<task>
_PROJECT_TASK_LINK = re.compile(
    r"https?://app\.asana\.com/\d+/\d+/project/(?P<project>\d+)/task/(?P<task_id>\d+)",
    re.IGNORECASE,
)

# https://app.asana.com/0/<project>/<task>/f
_FOCUS_LINK = re.compile(
    r"https?://app\.asana\.com/0/(?P<project>\d+)/(?P<task_id>\d+)/f",
    re.IGNORECASE,
)

LINK_PATTERNS = (_PROJECT_TASK_LINK, _FOCUS_LINK)


def extract_task_ids(text: str | None) -> list[str]:
    """Return every task id linked from ``text``.

    Matches are grouped by link format (project/task links first, then ``/f``
    links), each group in text order. Duplicates are kept.
    """
    if not text:
        return []
    return [match["task_id"] for pattern in LINK_PATTERNS for match in pattern.finditer(text)]
