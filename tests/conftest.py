"""Shared test fixtures for the knowledge manager test suite.

Design:
- isolated_config: autouse, points the config file into tmp_path and runs
  every test from tmp_path so the backup file never touches the checkout
- controller: KnowledgeController with a backup file in tmp_path
- events: records every dispatched event
"""

from pathlib import Path
from typing import List

import pytest

from controller import KnowledgeController
from knowledge_base.config.manager import CONFIG_ENV_VAR
from knowledge_base.events import Event, EventDispatcher, EventType


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_file = tmp_path / "knowledge_config.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    monkeypatch.chdir(tmp_path)
    return config_file


@pytest.fixture
def backup_path(tmp_path: Path) -> Path:
    return tmp_path / "knowledge_backup.txt"


@pytest.fixture
def events() -> List[Event]:
    return []


@pytest.fixture
def dispatcher(events: List[Event]) -> EventDispatcher:
    dispatcher = EventDispatcher()
    for event_type in EventType:
        dispatcher.add_listener(event_type, events.append)
    return dispatcher


@pytest.fixture
def controller(dispatcher: EventDispatcher, backup_path: Path) -> KnowledgeController:
    return KnowledgeController(event_dispatcher=dispatcher, backup_path=backup_path)


def event_types(events: List[Event]) -> List[EventType]:
    return [event.event_type for event in events]
