"""Tests for prsync.reporting."""

import pytest

from prsync.reporting import ActionReporter, escape_data


def test_escape_data() -> None:
    assert escape_data("100% done\r\nnext") == "100%25 done%0D%0Anext"


def test_failure_is_one_annotation(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ActionReporter()
    reporter.report_failure("Failed to get task 2: Client error '404 Not Found'\nFor more information check: x")

    assert reporter.failed
    assert capsys.readouterr().out == (
        "::error::Failed to get task 2: Client error '404 Not Found'%0AFor more information check: x\n"
    )
    # The unescaped text is kept for callers
    assert reporter.messages == ["Failed to get task 2: Client error '404 Not Found'\nFor more information check: x"]


def test_info_does_not_fail(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ActionReporter()
    reporter.report_info("No relevant action detected, skipping status update.")

    assert not reporter.failed
    assert capsys.readouterr().out == "No relevant action detected, skipping status update.\n"
