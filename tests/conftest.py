from __future__ import annotations

from pathlib import Path

import pytest

from core.store import EventStore
from tests.helpers import LISTING_HTML


@pytest.fixture
def listing_html() -> str:
    return LISTING_HTML


@pytest.fixture
def events_path(tmp_path: Path) -> Path:
    path = tmp_path / "events.json"
    path.write_text("{}", encoding="utf-8")
    return path


@pytest.fixture
def store(events_path: Path) -> EventStore:
    return EventStore.load(events_path)
