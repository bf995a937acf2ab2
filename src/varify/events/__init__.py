"""Event system: bus and event types for processing runs."""

from varify.events.bus import EventBus
from varify.events.types import IndexBuilt, ProcessCompleted, ValueReplaced

__all__ = [
    "EventBus",
    "IndexBuilt",
    "ProcessCompleted",
    "ValueReplaced",
]
