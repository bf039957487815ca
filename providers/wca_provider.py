from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup
from bs4.element import Tag

from core.calls import Outcome
from core.http import RequestShape, Requester
from models.competition import CompetitionRecord
from providers.base import ListingProvider

_LISTING_SELECTOR = "#upcoming-comps > ul"

log = logging.getLogger(__name__)


def _child(tag: Tag, index: int) -> Tag:
    """The ``index``-th element child of ``tag``, ignoring text nodes."""
    return tag.find_all(recursive=False)[index]


def _parse_row(row: Tag) -> CompetitionRecord | None:
    # <li> -> [date, info -> [link -> [flag, <a>name</a>], location]]
    try:
        info = _child(row, 1)
        name = _child(_child(info, 0), 1).get_text()
        location = _child(info, 1).get_text()
    except IndexError:
        return None
    return CompetitionRecord(location=location, name=name)


def parse_listing(html: str) -> list[CompetitionRecord]:
    """Extract upcoming competitions from the WCA list view.

    Rows that do not have the expected structure are skipped silently;
    a page without the listing container yields an empty list.
    """
    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one(_LISTING_SELECTOR)
    if container is None:
        log.warning("No %s container on the listing page", _LISTING_SELECTOR)
        return []

    records: list[CompetitionRecord] = []
    skipped = 0
    for row in container.find_all(recursive=False):
        record = _parse_row(row)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        log.debug("Skipped %d malformed listing row(s)", skipped)
    return records


class WCAProvider(ListingProvider):
    """Provider for the World Cube Association competitions page."""

    def __init__(self, requester: Requester, url: str) -> None:
        super().__init__(requester)
        self._url = url

    @property
    def name(self) -> str:
        return "WCA"

    async def fetch_listing(self) -> Outcome[list[CompetitionRecord]]:
        return await self._requester.send_one(
            RequestShape(authorize=False),
            self._url,
            self._parse_response,
            label=f"[{self.name}] listing fetch",
        )

    @staticmethod
    def _parse_response(resp: httpx.Response) -> list[CompetitionRecord]:
        return parse_listing(resp.text)
