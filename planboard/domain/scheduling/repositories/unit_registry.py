"""
Unit Registry Interface

Defines the contract the planning board uses to read units and workers and
to write stage lists back. The board depends on nothing else from the
surrounding application.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from ...shared.base import DomainEvent
from ..entities.stage_entry import StageEntry
from ..entities.unit import Unit
from ..entities.worker import Worker

RegistryListener = Callable[[DomainEvent], None]


class UnitRegistry(ABC):
    """
    Abstract registry of units and the worker roster.

    Implementations return copies: callers never hold live references into
    the registry's state.
    """

    @abstractmethod
    def list_units(self) -> list[Unit]:
        """
        Retrieve all units, each with its embedded stage list.

        Returns:
            List of all units
        """
        pass

    @abstractmethod
    def get_unit(self, unit_id: str) -> Unit:
        """
        Retrieve a unit by id.

        Args:
            unit_id: Registry identifier of the unit

        Returns:
            The unit

        Raises:
            UnitNotFoundError: If the unit does not exist
        """
        pass

    @abstractmethod
    def update_unit_timeline(
        self, unit_id: str, stage_entries: Sequence[StageEntry]
    ) -> Unit:
        """
        Replace a unit's stage list.

        Args:
            unit_id: Registry identifier of the unit
            stage_entries: Complete new stage list

        Returns:
            The updated unit

        Raises:
            UnitNotFoundError: If the unit does not exist
        """
        pass

    @abstractmethod
    def list_workers(self) -> list[Worker]:
        """
        Retrieve the worker roster.

        Returns:
            List of all workers
        """
        pass

    @abstractmethod
    def get_worker_by_id(self, worker_id: str) -> Worker | None:
        """
        Look up a worker by id.

        Args:
            worker_id: Roster identifier

        Returns:
            Worker or None if the id does not resolve
        """
        pass

    @abstractmethod
    def subscribe(self, listener: RegistryListener) -> None:
        """Register a listener for registry change events."""
        pass

    @abstractmethod
    def unsubscribe(self, listener: RegistryListener) -> None:
        """Remove a previously registered listener."""
        pass
