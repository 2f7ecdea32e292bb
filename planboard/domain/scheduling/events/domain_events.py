"""
Domain Events

Events published by the unit registry and the planning board session.
Subscribers (UI refresh, audit trails) receive them through the event bus.
"""

from typing import Protocol

from pydantic import Field

from ...shared.base import DomainEvent


class EventPublisher(Protocol):
    """Anything that can deliver a domain event to its subscribers."""

    def publish(self, event: DomainEvent) -> None: ...


class UnitRegistered(DomainEvent):
    """Raised when a unit is added to the registry."""

    unit_id: str


class UnitRemoved(DomainEvent):
    """Raised when a unit is deleted from the registry."""

    unit_id: str


class UnitTimelineUpdated(DomainEvent):
    """Raised when a unit's stage list is replaced."""

    unit_id: str
    stage_ids: tuple[str, ...] = Field(default_factory=tuple)


class StageAssignmentChanged(DomainEvent):
    """Raised when a stage's full worker assignment set is replaced."""

    unit_id: str
    stage_id: str
    old_workers: tuple[str, ...]
    new_workers: tuple[str, ...]


class PendingChangesCommitted(DomainEvent):
    """Raised after a planner commits staged edits."""

    committed: int = Field(ge=0)
    skipped: int = Field(ge=0)


class PendingChangesDiscarded(DomainEvent):
    """Raised after a planner discards staged edits."""

    discarded: int = Field(ge=0)
