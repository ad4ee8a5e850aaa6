"""Pytest fixtures for the agenda API and client."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from agenda.main import app
from agenda.store import JsonStore, get_store


@pytest.fixture
def agenda_file(tmp_path: Path) -> Path:
    return tmp_path / "agenda.json"


@pytest.fixture
def store(agenda_file: Path) -> JsonStore:
    return JsonStore(agenda_file)


@pytest.fixture
def client(store: JsonStore):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def write_agenda(agenda_file: Path):
    """Seed the agenda file with the given task dicts."""

    def _write(tasks):
        agenda_file.write_text(json.dumps({"tasks": tasks}, indent=2), encoding="utf-8")

    return _write
