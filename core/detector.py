from __future__ import annotations

import logging
from typing import Iterable

from core.store import EventStore
from models.competition import CompetitionRecord

log = logging.getLogger(__name__)


def in_country(records: Iterable[CompetitionRecord], country: str) -> list[CompetitionRecord]:
    return [r for r in records if country in r.location]


def collect_new_events(
    records: Iterable[CompetitionRecord],
    store: EventStore,
    country: str,
) -> list[str]:
    """Return keys of records in ``country`` not yet in ``store``.

    Each new key is added to the store (and persisted) before the next
    record is looked at.  Order follows ``records``.  If a write fails the
    keys saved so far are returned and the rest wait for the next cycle.
    """
    new_keys: list[str] = []
    for record in in_country(records, country):
        try:
            key = record.event_key
        except ValueError:
            log.debug("Skipping record without region: %r", record)
            continue

        try:
            added = store.add(key)
        except OSError as exc:
            log.error("Could not save %r, deferring it to the next cycle: %s", key, exc)
            break

        if added:
            log.info("New event: %s", key)
            new_keys.append(key)

    return new_keys
