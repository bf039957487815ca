from __future__ import annotations

from abc import ABC, abstractmethod

from core.calls import Outcome
from core.http import Requester
from models.competition import CompetitionRecord


class ListingProvider(ABC):
    """Abstract base for competition-listing sources.

    Each concrete provider fetches its own page and normalises rows into
    CompetitionRecord objects.

    A shared ``Requester`` is injected at construction time so that all
    outbound HTTP goes through the same client and error boundary.
    """

    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source name (e.g. 'WCA')."""

    @abstractmethod
    async def fetch_listing(self) -> Outcome[list[CompetitionRecord]]:
        """Fetch the listing and return its records in page order.

        Implementations must not raise: a failed fetch is returned as the
        outcome's error.  Rows that cannot be parsed are skipped.
        """
