"""prsync CLI — all commands."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.logging import RichHandler
from rich.table import Table

from prsync.errors import PrsyncError
from prsync.event import PullRequestEvent, load_event
from prsync.fields import reconcile_status_field
from prsync.links import extract_task_ids
from prsync.models import StatusField
from prsync.pipeline import run_pipeline
from prsync.providers.asana import AsanaTracker
from prsync.reporting import ActionReporter, escape_data
from prsync.settings import PrsyncSettings, get_settings

app = typer.Typer(help="prsync: move Asana tasks linked from GitHub pull requests", no_args_is_help=True)

VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP calls and pipeline decisions")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


# ---------------------------------------------------------------------------
# Async helpers
# ---------------------------------------------------------------------------


async def _run(event: PullRequestEvent, settings: PrsyncSettings, reporter: ActionReporter) -> None:
    async with AsanaTracker(settings) as tracker:
        await run_pipeline(event, settings, tracker, reporter)


async def _inspect(task_id: str, settings: PrsyncSettings) -> StatusField:
    async with AsanaTracker(settings) as tracker:
        task = await tracker.get_task(task_id)
    return reconcile_status_field(task.custom_fields)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("run")
def run_cmd(
    event_path: Annotated[
        Path,
        typer.Option("--event-path", envvar="GITHUB_EVENT_PATH", help="Webhook payload JSON file"),
    ],
    event_name: Annotated[
        str,
        typer.Option("--event-name", envvar="GITHUB_EVENT_NAME", help="e.g. pull_request, pull_request_review"),
    ],
    verbose: VerboseOpt = False,
) -> None:
    """Update the status of every task linked from the pull request description."""
    _configure_logging(verbose)
    settings = get_settings()

    try:
        event = load_event(event_path, event_name)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        message = f"Could not read event payload {event_path}: {exc}"
        typer.echo(f"::error::{escape_data(message)}")
        raise typer.Exit(1)

    reporter = ActionReporter()
    asyncio.run(_run(event, settings, reporter))
    if reporter.failed:
        raise typer.Exit(1)


@app.command("extract")
def extract_cmd(
    text: Annotated[str | None, typer.Argument(help="Text to scan, e.g. a PR description")] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read text from a file instead ('-' for stdin)"),
    ] = None,
) -> None:
    """List the Asana task ids linked from some text."""
    if file is not None:
        text = sys.stdin.read() if str(file) == "-" else file.read_text(encoding="utf-8")
    task_ids = extract_task_ids(text)
    if not task_ids:
        rprint("[red]No task id found in the description. Or link is missing.[/red]")
        raise typer.Exit(1)

    table = Table(title="Linked tasks")
    table.add_column("#", style="dim")
    table.add_column("Task ID", style="cyan")
    for i, task_id in enumerate(task_ids, start=1):
        table.add_row(str(i), task_id)

    rprint(table)


@app.command("inspect-task")
def inspect_task(
    task_id: Annotated[str, typer.Argument(help="Asana task gid")],
    verbose: VerboseOpt = False,
) -> None:
    """Show the status field and option ids prsync would use for a task."""
    _configure_logging(verbose)
    settings = get_settings()
    try:
        status_field = asyncio.run(_inspect(task_id, settings))
    except PrsyncError as exc:
        rprint(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Task {task_id}")
    table.add_column("Status", style="bold")
    table.add_column("Option ID")
    for name, option_id in status_field.options.items():
        table.add_row(name, option_id)

    rprint(f"Status field: [cyan]{status_field.field_id}[/cyan]")
    rprint(table)


@app.command("config-show")
def config_show() -> None:
    """Show resolved configuration (masks credentials)."""
    settings = get_settings(require_token=False)

    def mask(val: str | None) -> str:
        if val is None:
            return "[dim](not set)[/dim]"
        if len(val) <= 5:
            return "***"
        return f"...{val[-5:]}"

    table = Table(title="prsync Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("asana_token", mask(settings.asana_token.get_secret_value() if settings.asana_token else None))
    table.add_row("asana_base_url", settings.asana_base_url)
    table.add_row("request_timeout", str(settings.request_timeout))
    table.add_row("whitelist_github_users", ", ".join(sorted(settings.allow_list)) or "[dim](none)[/dim]")

    rprint(table)
