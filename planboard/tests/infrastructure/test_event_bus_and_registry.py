"""
Tests for the in-memory event bus and unit registry.
"""

import logging

import pytest

from planboard.domain.scheduling.entities import StageEntry, Unit
from planboard.domain.scheduling.events import (
    UnitRegistered,
    UnitRemoved,
    UnitTimelineUpdated,
)
from planboard.domain.scheduling.value_objects import MaintenanceStage, NewBuildStage
from planboard.domain.shared.base import DomainEvent
from planboard.domain.shared.exceptions import (
    InvalidStageCodeError,
    UnitNotFoundError,
)
from planboard.infrastructure.events import InMemoryEventBus


class TestInMemoryEventBus:
    """Test synchronous publish/subscribe."""

    def test_handlers_receive_events_in_order(self, event_bus):
        received = []
        event_bus.subscribe(UnitRemoved, lambda e: received.append(("first", e.unit_id)))
        event_bus.subscribe(UnitRemoved, lambda e: received.append(("second", e.unit_id)))

        event_bus.publish(UnitRemoved(aggregate_id="u1", unit_id="u1"))

        assert received == [("first", "u1"), ("second", "u1")]

    def test_base_class_subscription_receives_all(self, event_bus):
        received = []
        event_bus.subscribe(DomainEvent, received.append)

        event_bus.publish(UnitRemoved(aggregate_id="u1", unit_id="u1"))
        event_bus.publish(UnitRegistered(aggregate_id="u2", unit_id="u2"))

        assert [type(e) for e in received] == [UnitRemoved, UnitRegistered]

    def test_failing_handler_does_not_stop_others(self, event_bus, caplog):
        received = []

        def broken(event):
            raise RuntimeError("boom")

        event_bus.subscribe(UnitRemoved, broken)
        event_bus.subscribe(UnitRemoved, received.append)

        with caplog.at_level(logging.ERROR):
            event_bus.publish(UnitRemoved(aggregate_id="u1", unit_id="u1"))

        assert len(received) == 1
        assert "Error handling event UnitRemoved" in caplog.text

    def test_unsubscribe(self, event_bus):
        received = []
        event_bus.subscribe(UnitRemoved, received.append)
        event_bus.unsubscribe(UnitRemoved, received.append)

        event_bus.publish(UnitRemoved(aggregate_id="u1", unit_id="u1"))
        assert received == []

    def test_history_is_bounded(self):
        bus = InMemoryEventBus(max_history_size=2)
        for idx in range(3):
            bus.publish(UnitRemoved(aggregate_id=str(idx), unit_id=str(idx)))

        assert [e.unit_id for e in bus.get_event_history()] == ["1", "2"]
        bus.clear_history()
        assert bus.get_event_history() == []


class TestInMemoryUnitRegistry:
    """Test registry reads, writes and notifications."""

    def test_reads_return_copies(self, registry):
        unit = registry.get_unit("u1")
        unit.name = "changed"

        assert registry.get_unit("u1").name == "Eagle 25TS #014"

    def test_get_unit_missing(self, registry):
        with pytest.raises(UnitNotFoundError):
            registry.get_unit("nope")

    def test_update_timeline_notifies_listeners(self, registry):
        received = []
        registry.subscribe(received.append)

        unit = registry.get_unit("u1")
        updated = registry.update_unit_timeline("u1", unit.stages[:1])

        assert [s.id for s in updated.stages] == ["s1"]
        assert isinstance(received[0], UnitTimelineUpdated)
        assert received[0].stage_ids == ("s1",)

        registry.unsubscribe(received.append)
        registry.update_unit_timeline("u1", [])
        assert len(received) == 1

    def test_update_timeline_rejects_foreign_code(self, registry):
        with pytest.raises(InvalidStageCodeError):
            registry.update_unit_timeline("u2", [StageEntry(stage=NewBuildStage.SEA_TRIAL)])
        assert len(registry.get_unit("u2").stages) == 2

    def test_update_timeline_missing_unit(self, registry):
        with pytest.raises(UnitNotFoundError):
            registry.update_unit_timeline("nope", [])

    def test_add_and_remove_unit(self, registry, event_bus):
        registry.add_unit(
            Unit(id="u3", model="Eagle 525T", stages=[]),
        )
        assert {u.id for u in registry.list_units()} == {"u1", "u2", "u3"}

        registry.remove_unit("u3")
        with pytest.raises(UnitNotFoundError):
            registry.remove_unit("u3")

        kinds = [type(e) for e in event_bus.get_event_history()]
        assert kinds == [UnitRegistered, UnitRemoved]

    def test_worker_lookup(self, registry):
        assert registry.get_worker_by_id("w3").has_skill(MaintenanceStage.REPAIR_WORK)
        assert registry.get_worker_by_id("ghost") is None
        assert len(registry.list_workers()) == 3
