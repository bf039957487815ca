from __future__ import annotations

from dataclasses import dataclass

_REGION_SEPARATOR = ", "


@dataclass(frozen=True)
class CompetitionRecord:
    """One row of the upcoming-competitions listing.

    Fields:
        location:  Raw location text as it appears on the page
                   (e.g. "Warsaw, Poland").
        name:      Raw competition name text.
    """

    location: str
    name: str

    @property
    def region(self) -> str:
        """Second ``", "``-separated part of the location.

        Raises ``ValueError`` when the location has no region part.
        """
        parts = self.location.strip().split(_REGION_SEPARATOR)
        if len(parts) < 2:
            raise ValueError(f"No region in location {self.location!r}")
        return parts[1].strip()

    @property
    def event_key(self) -> str:
        """Deduplication key, ``"<region>: <name>"``."""
        return f"{self.region}: {self.name.strip()}"
