from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable

import httpx

from core.calls import Outcome
from core.http import Requester
from models.competition import CompetitionRecord

TOKEN = "test-token"

LISTING_HTML = """
<html><body>
<div id="upcoming-comps">
  <ul class="list-group">
    <li class="list-group-item">
      <span class="date">Apr 5 - 6, 2025</span>
      <div class="competition-info">
        <p class="competition-link">
          <span class="flag-icon flag-icon-pl"></span>
          <a href="/competitions/SpringOpen2025">Spring Open</a>
        </p>
        <div class="location">
          Warsaw, Poland
        </div>
      </div>
    </li>
    <li class="list-group-item">
      <span class="date">Oct 11, 2025</span>
      <div class="competition-info">
        <p class="competition-link">
          <span class="flag-icon flag-icon-de"></span>
          <a href="/competitions/AutumnOpen2025">Autumn Open</a>
        </p>
        <div class="location">Berlin, Germany</div>
      </div>
    </li>
  </ul>
</div>
</body></html>
"""


def run_with_requester(
    handler: Callable[[httpx.Request], httpx.Response],
    fn: Callable[[Requester], Awaitable[Any]],
    token: str | None = TOKEN,
) -> Any:
    """Run ``fn`` against a Requester whose client is served by ``handler``."""

    async def main() -> Any:
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            return await fn(Requester(client, token))

    return asyncio.run(main())


class FakeProvider:
    name = "Fake"

    def __init__(self, records: list[CompetitionRecord] | None = None, error: Exception | None = None) -> None:
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_listing(self) -> Outcome[list[CompetitionRecord]]:
        self.calls += 1
        if self.error is not None:
            return Outcome(None, self.error)
        return Outcome(list(self.records), None)


class RecordingNotifier:
    def __init__(self, error: Exception | None = None, on_notify: Callable[[str], None] | None = None) -> None:
        self.messages: list[str] = []
        self.error = error
        self.on_notify = on_notify

    async def notify(self, message: str) -> Outcome[int]:
        if self.on_notify is not None:
            self.on_notify(message)
        self.messages.append(message)
        if self.error is not None:
            return Outcome(None, self.error)
        return Outcome(1, None)


def read_events(path: Path) -> dict[str, bool]:
    return json.loads(path.read_text(encoding="utf-8"))
