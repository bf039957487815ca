from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, TypeVar

import httpx

from core.calls import Outcome, identity, settle_many, settle_one

log = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")


@dataclass(frozen=True)
class RequestShape:
    """Everything about a request except its target URL.

    ``authorize`` controls injection of the bot ``Authorization`` header;
    only requests to public, non-Discord pages should turn it off.
    """

    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    json: Any = None
    authorize: bool = True


class Requester:
    """Builds and fires HTTP calls through the settle layer.

    ``send_one`` issues a single request; ``send_many`` maps ``url_for``
    over a collection of items and issues one request per item.  Both
    return an :class:`~core.calls.Outcome` and never raise.

    A shared ``httpx.AsyncClient`` is injected so that every caller
    reuses one connection pool.
    """

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._token = token

    def _headers(self, shape: RequestShape) -> dict[str, str]:
        headers = dict(shape.headers)
        if shape.authorize:
            if not self._token:
                raise ValueError("Authorized request without a bot token")
            headers["Authorization"] = f"Bot {self._token}"
        return headers

    async def _call(self, shape: RequestShape, url: str) -> httpx.Response:
        log.debug("%s %s", shape.method, url)
        resp = await self._client.request(
            shape.method,
            url,
            headers=self._headers(shape),
            json=shape.json,
        )
        resp.raise_for_status()
        return resp

    async def send_one(
        self,
        shape: RequestShape,
        url: str,
        transform: Callable[[httpx.Response], T] = identity,
        *,
        label: str = "request",
    ) -> Outcome[T]:
        return await settle_one(self._call(shape, url), transform, label=label)

    async def send_many(
        self,
        shape: RequestShape,
        url_for: Callable[[I], str],
        items: Sequence[I],
        transform: Callable[[list[httpx.Response]], T] = identity,
        *,
        label: str = "requests",
    ) -> Outcome[T]:
        async def leg(item: I) -> httpx.Response:
            return await self._call(shape, url_for(item))

        return await settle_many([leg(item) for item in items], transform, label=label)
