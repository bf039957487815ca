"""WCA competition notifier -- entry point.

Assembles the polling pipeline:

    Scheduler (one cycle every poll_interval, never overlapping)
        -> WCAProvider (scrape the public listing)
        -> EventStore diff (write-through to events.json)
        -> DiscordNotifier (guilds -> channels -> one post per channel)

A shared httpx.AsyncClient is wrapped in a Requester that injects the bot
token and turns every HTTP failure into an Outcome instead of an exception.
"""
from __future__ import annotations

import asyncio
import logging

import httpx

from consumers.discord import DiscordNotifier
from core.config import MonitorConfig, read_token
from core.http import Requester
from core.scheduler import Scheduler
from core.store import EventStore
from providers.wca_provider import WCAProvider


async def run(config: MonitorConfig | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    config = config or MonitorConfig()

    token = read_token(config.token_path)
    store = EventStore.load(config.events_path)

    async with httpx.AsyncClient(timeout=config.request_timeout) as client:
        requester = Requester(client, token)

        scheduler = Scheduler(
            config=config,
            provider=WCAProvider(requester, config.listing_url),
            store=store,
            notifier=DiscordNotifier(
                requester,
                api_url=config.discord_api_url,
                channel_marker=config.channel_marker,
                mention=config.mention,
            ),
        )

        await scheduler.run()


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("\nShutting down.")


if __name__ == "__main__":
    main()
