"""
Petit client en ligne de commande au-dessus de TodoController.

    python -m scripts.todos                    # affiche la liste
    python -m scripts.todos add "Buy milk" --due 2025-01-01
    python -m scripts.todos toggle <id>
    python -m scripts.todos delete <id>
"""

import asyncio
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

import click

from app.client.api import TodoApiClient
from app.client.controller import ERROR, TodoController
from app.client.presentation import render_tasks
from app.core.config import settings
from app.core.logging import setup_logging

Action = Callable[[TodoController], Awaitable[None]]


def _open_client(base_url: str) -> TodoApiClient:
    return TodoApiClient(base_url)


def _echo_notification(level: str, message: str) -> None:
    click.echo(f"[{level}] {message}", err=level == ERROR)


async def _run(base_url: str, action: Optional[Action] = None) -> None:
    async with _open_client(base_url) as api:
        ctrl = TodoController(api, notify=_echo_notification)
        await ctrl.fetch_all()
        if action is not None:
            await action(ctrl)
        click.echo(render_tasks(ctrl.todos, show_ids=True))


@click.group(invoke_without_command=True)
@click.option("--base-url", default=None, help="Base URL of the API (defaults to API_BASE_URL).")
@click.pass_context
def cli(ctx: click.Context, base_url: Optional[str]) -> None:
    """Todo client: without a command, lists the tasks."""
    ctx.obj = base_url or settings.API_BASE_URL
    if ctx.invoked_subcommand is None:
        asyncio.run(_run(ctx.obj))


@cli.command("add")
@click.argument("title")
@click.option("--due", type=click.DateTime(), default=None, help="Due date (taken as UTC).")
@click.pass_obj
def add(base_url: str, title: str, due: Optional[datetime]) -> None:
    """Create a task."""
    if due is not None and due.tzinfo is None:
        due = due.replace(tzinfo=timezone.utc)
    asyncio.run(_run(base_url, lambda ctrl: ctrl.add(title, due)))


@cli.command("toggle")
@click.argument("todo_id")
@click.pass_obj
def toggle(base_url: str, todo_id: str) -> None:
    """Flip the completion state of a task."""
    asyncio.run(_run(base_url, lambda ctrl: ctrl.toggle(todo_id)))


@cli.command("delete")
@click.argument("todo_id")
@click.pass_obj
def delete(base_url: str, todo_id: str) -> None:
    """Delete a task."""
    asyncio.run(_run(base_url, lambda ctrl: ctrl.delete(todo_id)))


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    cli()
