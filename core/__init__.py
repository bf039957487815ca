from core.calls import Outcome, settle_many, settle_one
from core.config import MonitorConfig
from core.http import RequestShape, Requester
from core.store import EventStore

__all__ = [
    "EventStore",
    "MonitorConfig",
    "Outcome",
    "RequestShape",
    "Requester",
    "settle_many",
    "settle_one",
]
