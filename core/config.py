from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

WCA_URL = (
    "https://www.worldcubeassociation.org/competitions"
    "?utf8=%E2%9C%93&region=_Europe&search=&state=present&year=all+years"
    "&from_date=&to_date=&delegate=&display=list"
)
DISCORD_API_URL = "https://discord.com/api"


@dataclass(frozen=True)
class MonitorConfig:
    """Immutable settings handed to the scheduler at construction.

    Fields:
        target_country:   Substring a competition's location must contain.
        channel_marker:   Substring a Discord channel name must contain to
                          receive notifications.
        poll_interval:    Time between the starts of consecutive cycles.
        listing_url:      Public WCA competitions page to scrape.
        discord_api_url:  Discord REST API base, without trailing slash.
        events_path:      JSON file holding already-announced event keys.
        token_path:       File holding the bot token.
        mention:          Line prefixed to every posted message.
        request_timeout:  Per-request timeout in seconds; None waits forever.
    """

    target_country: str = "Poland"
    channel_marker: str = "zawody"
    poll_interval: timedelta = timedelta(minutes=15)
    listing_url: str = WCA_URL
    discord_api_url: str = DISCORD_API_URL
    events_path: Path = Path("events.json")
    token_path: Path = Path("token.txt")
    mention: str = "@here"
    request_timeout: float | None = None

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval.total_seconds()


def read_token(path: Path) -> str:
    """Read the bot token, stripping surrounding whitespace."""
    token = Path(path).read_text(encoding="utf-8").strip()
    if not token:
        raise ValueError(f"{path} is empty; expected a Discord bot token")
    return token
