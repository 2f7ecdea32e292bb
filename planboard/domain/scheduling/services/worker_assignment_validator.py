"""
Worker Assignment Validator

Skill matching and workload computation for the worker roster, plus the
service that replaces a stage's assignment set through the registry.
Lacking a skill is a soft warning: assignment is always permitted.
"""

import logging
from collections.abc import Iterable, Sequence

from pydantic import Field, computed_field

from ...shared.base import ValueObject
from ..entities.stage_entry import StageEntry
from ..entities.unit import Unit
from ..entities.worker import Worker
from ..events.domain_events import EventPublisher, StageAssignmentChanged
from ..repositories.unit_registry import UnitRegistry
from ..value_objects.enums import AssignmentWarningKind, StageCode

logger = logging.getLogger(__name__)

DEFAULT_MAX_LOAD = 5


class SkillPartition(ValueObject):
    """Roster split by whether each worker holds a stage's skill."""

    qualified: tuple[Worker, ...] = ()
    unqualified: tuple[Worker, ...] = ()


class WorkloadAssignment(ValueObject):
    """One open stage a worker is assigned to."""

    unit_id: str
    unit_name: str
    stage_id: str
    stage: StageCode


class WorkerWorkload(ValueObject):
    """Open-stage workload of one worker."""

    worker_id: str
    assignments: tuple[WorkloadAssignment, ...] = ()
    max_load: int = Field(default=DEFAULT_MAX_LOAD, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.assignments)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def load_percent(self) -> float:
        """Share of the max load in use, capped at 100."""
        return min(self.total / self.max_load * 100, 100.0)

    @property
    def is_overloaded(self) -> bool:
        return self.total > self.max_load


class AssignmentWarning(ValueObject):
    """Non-blocking note attached to an assignment."""

    worker_id: str
    kind: AssignmentWarningKind
    message: str


class AssignmentCandidate(ValueObject):
    worker: Worker
    has_skill: bool
    is_assigned: bool
    is_available: bool


class AssignmentDialog(ValueObject):
    """Everything the assignment dialog shows for one stage."""

    unit_id: str
    stage_id: str
    stage: StageCode
    assigned_workers: tuple[str, ...]
    candidates: tuple[AssignmentCandidate, ...]


class WorkerAssignmentValidator:
    """Domain service for skill matching and workload computation."""

    @staticmethod
    def partition_by_skill(stage_code: StageCode, workers: Iterable[Worker]) -> SkillPartition:
        """
        Split workers into those holding the skill for a stage code and the rest.

        Args:
            stage_code: Stage to match
            workers: Roster to partition, order is preserved

        Returns:
            SkillPartition with qualified and unqualified workers
        """
        qualified: list[Worker] = []
        unqualified: list[Worker] = []
        for worker in workers:
            (qualified if worker.has_skill(stage_code) else unqualified).append(worker)
        return SkillPartition(qualified=tuple(qualified), unqualified=tuple(unqualified))

    @staticmethod
    def workload(
        worker_id: str, units: Iterable[Unit], max_load: int = DEFAULT_MAX_LOAD
    ) -> WorkerWorkload:
        """
        Count the stages a worker is assigned to that are not completed.

        Args:
            worker_id: Roster id
            units: Units to scan
            max_load: Stage count treated as a full load

        Returns:
            WorkerWorkload listing the open assignments
        """
        assignments = [
            WorkloadAssignment(
                unit_id=unit.id,
                unit_name=unit.display_name,
                stage_id=stage.id,
                stage=stage.stage,
            )
            for unit in units
            for stage in unit.stages
            if stage.has_worker(worker_id) and stage.status.is_open
        ]
        return WorkerWorkload(
            worker_id=worker_id, assignments=tuple(assignments), max_load=max_load
        )

    @staticmethod
    def workload_overview(
        workers: Iterable[Worker], units: Sequence[Unit], max_load: int = DEFAULT_MAX_LOAD
    ) -> list[WorkerWorkload]:
        return [
            WorkerAssignmentValidator.workload(worker.id, units, max_load)
            for worker in workers
        ]

    @staticmethod
    def assignment_warnings(
        stage_code: StageCode, worker_ids: Iterable[str], workers: Iterable[Worker]
    ) -> list[AssignmentWarning]:
        """
        Warnings for a proposed assignment set.

        Flags ids that do not resolve to a roster member and workers lacking
        the stage's skill.
        """
        roster = {worker.id: worker for worker in workers}
        warnings = []
        for worker_id in dict.fromkeys(worker_ids):
            worker = roster.get(worker_id)
            if worker is None:
                warnings.append(
                    AssignmentWarning(
                        worker_id=worker_id,
                        kind=AssignmentWarningKind.UNKNOWN_WORKER,
                        message=f"Worker {worker_id} is not on the roster",
                    )
                )
            elif not worker.has_skill(stage_code):
                warnings.append(
                    AssignmentWarning(
                        worker_id=worker_id,
                        kind=AssignmentWarningKind.MISSING_SKILL,
                        message=f"{worker.name} lacks the {stage_code.value} skill",
                    )
                )
        return warnings


class WorkerAssignmentService:
    """Reads and replaces stage assignments through the unit registry."""

    def __init__(
        self, registry: UnitRegistry, event_publisher: EventPublisher | None = None
    ) -> None:
        """
        Initialize the service.

        Args:
            registry: Unit and worker registry
            event_publisher: Optional bus receiving StageAssignmentChanged
        """
        self._registry = registry
        self._event_publisher = event_publisher

    def open_dialog(self, unit_id: str, stage_id: str) -> AssignmentDialog:
        """
        Current assignment of a stage with every roster member as a candidate.

        Raises:
            UnitNotFoundError: If the unit does not exist
            StageNotFoundError: If the unit has no such stage
        """
        stage = self._registry.get_unit(unit_id).get_stage(stage_id)
        candidates = tuple(
            AssignmentCandidate(
                worker=worker,
                has_skill=worker.has_skill(stage.stage),
                is_assigned=stage.has_worker(worker.id),
                is_available=worker.is_available_for_work,
            )
            for worker in self._registry.list_workers()
        )
        return AssignmentDialog(
            unit_id=unit_id,
            stage_id=stage_id,
            stage=stage.stage,
            assigned_workers=stage.assigned_workers,
            candidates=candidates,
        )

    def set_assigned_workers(
        self, unit_id: str, stage_id: str, worker_ids: Sequence[str]
    ) -> list[AssignmentWarning]:
        """
        Replace a stage's whole assignment set in one registry write.

        Duplicate ids are dropped, first occurrence wins.

        Returns:
            Warnings for unknown workers or missing skills

        Raises:
            UnitNotFoundError: If the unit does not exist
            StageNotFoundError: If the unit has no such stage
        """
        unit = self._registry.get_unit(unit_id)
        stage: StageEntry = unit.get_stage(stage_id)
        new_workers = tuple(dict.fromkeys(worker_ids))

        warnings = WorkerAssignmentValidator.assignment_warnings(
            stage.stage, new_workers, self._registry.list_workers()
        )
        for warning in warnings:
            logger.info(f"Assignment warning on stage {stage_id}: {warning.message}")

        self._registry.update_unit_timeline(
            unit_id, unit.replace_stage(stage.with_assigned_workers(new_workers))
        )

        if self._event_publisher is not None and new_workers != stage.assigned_workers:
            self._event_publisher.publish(
                StageAssignmentChanged(
                    aggregate_id=unit_id,
                    unit_id=unit_id,
                    stage_id=stage_id,
                    old_workers=stage.assigned_workers,
                    new_workers=new_workers,
                )
            )
        return warnings
