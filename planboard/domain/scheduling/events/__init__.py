"""Domain events for the planning board."""

from .domain_events import (
    EventPublisher,
    PendingChangesCommitted,
    PendingChangesDiscarded,
    StageAssignmentChanged,
    UnitRegistered,
    UnitRemoved,
    UnitTimelineUpdated,
)

__all__ = [
    "EventPublisher",
    "PendingChangesCommitted",
    "PendingChangesDiscarded",
    "StageAssignmentChanged",
    "UnitRegistered",
    "UnitRemoved",
    "UnitTimelineUpdated",
]
