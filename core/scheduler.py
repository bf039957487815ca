from __future__ import annotations

import asyncio
import logging

from consumers.base import Notifier
from core.config import MonitorConfig
from core.detector import collect_new_events
from core.store import EventStore
from providers.base import ListingProvider

log = logging.getLogger(__name__)


class Scheduler:
    """Runs detection cycles on a fixed interval.

    One cycle is scrape -> diff against the event store -> (optional)
    notify.  The notification is awaited inside the cycle, and the next
    cycle starts only after the previous one has finished, so the store
    is never touched by two cycles at once.

    New keys are persisted before the notifier is called.  If the
    notification then fails the keys stay marked as seen and are not
    retried.
    """

    def __init__(
        self,
        config: MonitorConfig,
        provider: ListingProvider,
        store: EventStore,
        notifier: Notifier,
    ) -> None:
        self._config = config
        self._provider = provider
        self._store = store
        self._notifier = notifier

    async def run_cycle(self) -> list[str]:
        """Run one cycle and return the keys that were newly detected."""
        country = self._config.target_country
        log.info("Looking for competitions in %s...", country)

        records, error = await self._provider.fetch_listing()
        if error is not None:
            log.error("There was a problem with getting %s site! %s", self._provider.name, error)
            records = []

        new_keys = collect_new_events(records, self._store, country)

        if new_keys:
            message = "\n".join(new_keys)
            log.info("Sending message to discord:\n%s", message)
            await self._notifier.notify(message)

        return new_keys

    async def run(self) -> None:
        """Cycle forever, one cycle start every ``poll_interval``."""
        interval = self._config.poll_interval_seconds
        loop = asyncio.get_running_loop()
        log.info(
            "Scheduler started for %s (interval=%ds, %d known event(s))",
            self._provider.name,
            interval,
            len(self._store),
        )

        while True:
            started = loop.time()
            try:
                await self.run_cycle()
            except Exception:
                log.exception("Cycle for %s failed", self._provider.name)

            delay = max(0.0, interval - (loop.time() - started))
            log.info("Done looking at competitions! See you in %ds!", delay)
            await asyncio.sleep(delay)
