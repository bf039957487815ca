from __future__ import annotations

import logging

import httpx

from consumers.base import Notifier
from core.calls import Outcome
from core.http import RequestShape, Requester
from models.discord import Channel, Guild

log = logging.getLogger(__name__)

_GET = RequestShape()


def _guilds(resp: httpx.Response) -> list[Guild]:
    return [Guild.from_payload(g) for g in resp.json()]


def _channels(responses: list[httpx.Response]) -> list[Channel]:
    return [Channel.from_payload(c) for resp in responses for c in resp.json()]


class DiscordNotifier(Notifier):
    """Posts a message to every channel whose name contains a marker.

    Channels are resolved fresh on each call: one request for the bot's
    guilds, then one channel-list request per guild, then one message
    post per matching channel.  Each fan-out is all-or-nothing.
    """

    def __init__(
        self,
        requester: Requester,
        api_url: str,
        channel_marker: str,
        mention: str = "@here",
    ) -> None:
        self._requester = requester
        self._api_url = api_url.rstrip("/")
        self._channel_marker = channel_marker
        self._mention = mention

    async def fetch_guilds(self) -> Outcome[list[Guild]]:
        return await self._requester.send_one(
            _GET,
            f"{self._api_url}/users/@me/guilds",
            _guilds,
            label="guild list",
        )

    async def resolve_channels(self, guilds: list[Guild]) -> Outcome[list[Channel]]:
        channels, error = await self._requester.send_many(
            _GET,
            lambda guild: f"{self._api_url}/guilds/{guild.id}/channels",
            guilds,
            _channels,
            label="channel list",
        )
        if error is not None:
            return Outcome(None, error)
        return Outcome([c for c in channels if self._channel_marker in c.name], None)

    async def post(self, channels: list[Channel], message: str) -> Outcome[int]:
        shape = RequestShape(
            method="POST",
            headers={"Content-Type": "application/json"},
            json={"content": f"{self._mention}\n{message}"},
        )
        return await self._requester.send_many(
            shape,
            lambda channel: f"{self._api_url}/channels/{channel.id}/messages",
            channels,
            len,
            label="message post",
        )

    async def notify(self, message: str) -> Outcome[int]:
        guilds, error = await self.fetch_guilds()
        if error is not None:
            log.error("There was a problem with getting guilds! %s", error)
            return Outcome(None, error)

        channels, error = await self.resolve_channels(guilds)
        if error is not None:
            log.error("There was a problem with getting channels! %s", error)
            return Outcome(None, error)

        sent, error = await self.post(channels, message)
        if error is not None:
            log.error("There was a problem with sending messages! %s", error)
            return Outcome(None, error)

        log.info("Message sent to %d channel(s)!", sent)
        return Outcome(sent, None)
