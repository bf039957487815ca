from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Guild:
    id: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Guild:
        return cls(id=str(payload["id"]))


@dataclass(frozen=True)
class Channel:
    """A guild channel as returned by ``GET /guilds/{id}/channels``.

    Category channels may carry a null name; it is normalised to "".
    """

    id: str
    name: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Channel:
        return cls(id=str(payload["id"]), name=payload.get("name") or "")
