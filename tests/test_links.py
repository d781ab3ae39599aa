"""Tests for prsync.links."""

from prsync.links import extract_task_ids

PROJECT_LINK = "https://app.asana.com/1/1200203178379976/project/1205000000000001/task/1208000000000011"
FOCUS_LINK = "https://app.asana.com/0/1205000000000001/1208000000000022/f"


def test_empty_text() -> None:
    assert extract_task_ids("") == []
    assert extract_task_ids(None) == []


def test_no_links() -> None:
    text = "Refactor the login flow.\nSee https://github.com/org/repo/issues/12 and https://app.asana.com/0/home"
    assert extract_task_ids(text) == []


def test_project_task_link() -> None:
    assert extract_task_ids(f"Task: {PROJECT_LINK}?focus=true") == ["1208000000000011"]


def test_focus_link() -> None:
    assert extract_task_ids(f"Task: {FOCUS_LINK}") == ["1208000000000022"]


def test_case_insensitive() -> None:
    text = "HTTPS://APP.ASANA.COM/0/1/2/F"
    assert extract_task_ids(text) == ["2"]


def test_project_links_come_before_focus_links() -> None:
    text = "\n".join(
        [
            "https://app.asana.com/0/9/300/f",
            "https://app.asana.com/1/5/project/9/task/100",
            "https://app.asana.com/0/9/400/f",
            "https://app.asana.com/1/5/project/9/task/200",
        ]
    )
    assert extract_task_ids(text) == ["100", "200", "300", "400"]


def test_duplicates_preserved() -> None:
    text = f"{FOCUS_LINK}\nAgain: {FOCUS_LINK}"
    assert extract_task_ids(text) == ["1208000000000022", "1208000000000022"]


def test_several_links_on_one_line() -> None:
    text = "Tasks https://app.asana.com/0/9/300/f and https://app.asana.com/0/9/400/f"
    assert extract_task_ids(text) == ["300", "400"]


def test_focus_link_requires_trailing_f() -> None:
    assert extract_task_ids("https://app.asana.com/0/9/300") == []
