"""
In-memory unit registry.

Explicit service object owning unit and worker records, with
subscribe/notify through the event bus. Used as the default registry for
the HTTP adapter and throughout the test suite.
"""

import logging
from collections.abc import Iterable, Sequence

from planboard.domain.scheduling.entities import StageEntry, Unit, Worker
from planboard.domain.scheduling.events import (
    UnitRegistered,
    UnitRemoved,
    UnitTimelineUpdated,
)
from planboard.domain.scheduling.repositories import RegistryListener, UnitRegistry
from planboard.domain.shared.base import DomainEvent
from planboard.domain.shared.exceptions import UnitNotFoundError

from ..events.event_bus import EventBusInterface, InMemoryEventBus

logger = logging.getLogger(__name__)


class InMemoryUnitRegistry(UnitRegistry):
    """Dictionary-backed registry. Every read and write goes through copies."""

    def __init__(
        self,
        units: Iterable[Unit] = (),
        workers: Iterable[Worker] = (),
        event_bus: EventBusInterface | None = None,
    ) -> None:
        self._units: dict[str, Unit] = {}
        self._workers: dict[str, Worker] = {}
        self._event_bus = event_bus or InMemoryEventBus()
        for unit in units:
            self._units[unit.id] = unit.model_copy(deep=True)
        for worker in workers:
            self._workers[worker.id] = worker.model_copy(deep=True)

    @property
    def event_bus(self) -> EventBusInterface:
        return self._event_bus

    def list_units(self) -> list[Unit]:
        return [unit.model_copy(deep=True) for unit in self._units.values()]

    def get_unit(self, unit_id: str) -> Unit:
        unit = self._units.get(unit_id)
        if unit is None:
            raise UnitNotFoundError(unit_id)
        return unit.model_copy(deep=True)

    def update_unit_timeline(
        self, unit_id: str, stage_entries: Sequence[StageEntry]
    ) -> Unit:
        current = self._units.get(unit_id)
        if current is None:
            raise UnitNotFoundError(unit_id)

        # Re-validate so a stage code foreign to the category is rejected
        updated = Unit.model_validate(
            {
                **current.model_dump(exclude={"stages"}),
                "stages": [entry.model_dump() for entry in stage_entries],
            }
        )
        self._units[unit_id] = updated
        logger.debug(f"Replaced timeline of unit {unit_id} ({len(updated.stages)} stages)")

        self._event_bus.publish(
            UnitTimelineUpdated(
                aggregate_id=unit_id,
                unit_id=unit_id,
                stage_ids=tuple(entry.id for entry in updated.stages),
            )
        )
        return updated.model_copy(deep=True)

    def list_workers(self) -> list[Worker]:
        return [worker.model_copy(deep=True) for worker in self._workers.values()]

    def get_worker_by_id(self, worker_id: str) -> Worker | None:
        worker = self._workers.get(worker_id)
        return worker.model_copy(deep=True) if worker is not None else None

    def add_unit(self, unit: Unit) -> Unit:
        self._units[unit.id] = unit.model_copy(deep=True)
        self._event_bus.publish(UnitRegistered(aggregate_id=unit.id, unit_id=unit.id))
        return unit.model_copy(deep=True)

    def remove_unit(self, unit_id: str) -> None:
        """
        Delete a unit.

        Raises:
            UnitNotFoundError: If the unit does not exist
        """
        if self._units.pop(unit_id, None) is None:
            raise UnitNotFoundError(unit_id)
        self._event_bus.publish(UnitRemoved(aggregate_id=unit_id, unit_id=unit_id))

    def add_worker(self, worker: Worker) -> Worker:
        self._workers[worker.id] = worker.model_copy(deep=True)
        return worker.model_copy(deep=True)

    def subscribe(self, listener: RegistryListener) -> None:
        self._event_bus.subscribe(DomainEvent, listener)

    def unsubscribe(self, listener: RegistryListener) -> None:
        self._event_bus.unsubscribe(DomainEvent, listener)
