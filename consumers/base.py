from __future__ import annotations

from abc import ABC, abstractmethod

from core.calls import Outcome


class Notifier(ABC):
    """Destination for the combined message of one detection cycle.

    The scheduler awaits ``notify()`` before the cycle is considered
    finished, so a notifier never overlaps the next cycle.
    """

    @abstractmethod
    async def notify(self, message: str) -> Outcome[int]:
        """Deliver ``message`` and return how many destinations it went to.

        Implementations must not raise; failures are returned as the
        outcome's error.
        """
