# tests/test_cli.py

from __future__ import annotations

import httpx
import pytest
from click.testing import CliRunner
from sqlmodel import Session, select

from app.client.api import TodoApiClient
from app.client.presentation import EMPTY_MESSAGE
from app.db.models.todos import Todo
from app.db.seed import ensure_anonymous_user
from app.main import app
from scripts import todos as todos_cli


@pytest.fixture()
def runner(session: Session, monkeypatch) -> CliRunner:
    ensure_anonymous_user(session)

    def _asgi_client(base_url: str) -> TodoApiClient:
        transport = httpx.ASGITransport(app=app)
        return TodoApiClient(client=httpx.AsyncClient(transport=transport, base_url="http://test/api"))

    monkeypatch.setattr(todos_cli, "_open_client", _asgi_client)
    return CliRunner()


def test_list_without_command_shows_empty_message(runner):
    result = runner.invoke(todos_cli.cli, [])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == EMPTY_MESSAGE


def test_add_toggle_delete(runner, session: Session):
    result = runner.invoke(todos_cli.cli, ["add", "Buy milk", "--due", "2099-01-01"])
    assert result.exit_code == 0, result.output
    todo = session.exec(select(Todo)).one()
    assert f"[ ] Buy milk  ({todo.id})" in result.output
    assert "Due 2099-01-01" in result.output

    result = runner.invoke(todos_cli.cli, ["toggle", todo.id])
    assert result.exit_code == 0, result.output
    assert f"[x] Buy milk  ({todo.id})" in result.output

    result = runner.invoke(todos_cli.cli, ["delete", todo.id])
    assert result.exit_code == 0, result.output
    assert "[success] Task deleted" in result.output
    assert EMPTY_MESSAGE in result.output
