"""Run outcome reporting in GitHub Actions workflow-command format."""

import typer


def escape_data(message: str) -> str:
    """Escape a workflow-command message so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionReporter:
    def __init__(self) -> None:
        self.failed = False
        self.messages: list[str] = []

    def report_failure(self, message: str) -> None:
        """Mark the run failed; the CLI exits non-zero when it finishes."""
        self.failed = True
        self.messages.append(message)
        typer.echo(f"::error::{escape_data(message)}")

    def report_info(self, message: str) -> None:
        self.messages.append(message)
        typer.echo(message)
