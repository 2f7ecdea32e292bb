"""
Planning Board session

Application service owning one planner's board session: the view anchor
and mode, the drag state machine and the pending change set. It depends
only on the unit registry contract and exposes the operations the UI
chrome binds to.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import date
from functools import partial

from planboard.application.dtos import BoardView, StageBar, UnitRow
from planboard.core.config import Settings
from planboard.core.config import settings as default_settings
from planboard.domain.scheduling.entities import Unit
from planboard.domain.scheduling.events import (
    PendingChangesCommitted,
    PendingChangesDiscarded,
)
from planboard.domain.scheduling.repositories import UnitRegistry
from planboard.domain.scheduling.services import (
    AssignmentDialog,
    AssignmentWarning,
    BoardFilter,
    CategoryStats,
    CommitReport,
    DragInteractionController,
    DragSession,
    PendingChangeSet,
    ProgressAggregator,
    StagePositionMapper,
    TimelineRangeCalculator,
    WorkerAssignmentService,
    WorkerAssignmentValidator,
    WorkerWorkload,
    category_stats,
    filter_units,
    write_planned_interval,
)
from planboard.domain.scheduling.value_objects import (
    DragKind,
    MonthHeader,
    NavigationDirection,
    PendingEdit,
    TimelineColumn,
    ViewMode,
    ViewWindow,
    stage_name,
)
from planboard.domain.shared.exceptions import (
    EditPermissionError,
    ValidationError,
    WorkerNotFoundError,
)
from planboard.infrastructure.events.event_bus import EventBusInterface, InMemoryEventBus

logger = logging.getLogger(__name__)


class PlanningBoard:
    """Per-planner facade over the planning domain services."""

    def __init__(
        self,
        registry: UnitRegistry,
        settings: Settings | None = None,
        event_bus: EventBusInterface | None = None,
        today: Callable[[], date] = date.today,
        can_edit: Callable[[], bool] | None = None,
        anchor: date | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            registry: Source of units and workers, the only write target
            settings: Board defaults, the module settings when omitted
            event_bus: Bus for session events; the registry's bus is reused
                when it exposes one
            today: Clock for the "today" column and navigation
            can_edit: Edit-permission check, PLANNER_CAN_EDIT when omitted
            anchor: Initial anchor date, today when omitted
        """
        self._registry = registry
        self._settings = settings or default_settings
        self._event_bus = (
            event_bus or getattr(registry, "event_bus", None) or InMemoryEventBus()
        )
        self._today = today
        self._can_edit = can_edit or (lambda: self._settings.PLANNER_CAN_EDIT)

        self._anchor = anchor or today()
        self._mode = ViewMode(self._settings.DEFAULT_VIEW_MODE)
        self._track_width = self._settings.TRACK_WIDTH_PIXELS

        self._calculator = TimelineRangeCalculator(today=today)
        self._mapper = StagePositionMapper(
            min_width_percent=self._settings.MIN_BAR_WIDTH_PERCENT,
            fallback_duration_days=self._settings.DEFAULT_STAGE_DURATION_DAYS,
        )
        self._pending = PendingChangeSet()
        self._drag = DragInteractionController(self._pending, self._mapper, self._can_edit)
        self._assignments = WorkerAssignmentService(registry, self._event_bus)

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def can_edit(self) -> bool:
        return self._can_edit()

    @property
    def track_width(self) -> float:
        return self._track_width

    @property
    def pending_changes(self) -> PendingChangeSet:
        return self._pending

    @property
    def drag(self) -> DragInteractionController:
        return self._drag

    # View

    def set_view_mode(self, mode: ViewMode) -> ViewWindow:
        self._mode = ViewMode(mode)
        return self.view_window()

    def navigate(self, direction: NavigationDirection) -> ViewWindow:
        self._anchor = self._calculator.navigate(self._anchor, self._mode, direction)
        return self.view_window()

    def view_window(self) -> ViewWindow:
        return self._calculator.window(self._anchor, self._mode)

    def columns(self) -> list[TimelineColumn]:
        return self._calculator.columns(self.view_window())

    def month_headers(self) -> list[MonthHeader]:
        return self._calculator.month_headers(self.columns())

    def board_view(self) -> BoardView:
        window = self.view_window()
        columns = self._calculator.columns(window)
        return BoardView(
            mode=self._mode,
            anchor=self._anchor,
            start=window.start,
            end=window.end,
            total_days=window.total_days,
            columns=columns,
            month_headers=self._calculator.month_headers(columns),
            today_column=self._calculator.today_column_index(columns),
        )

    def resize_track(self, width_pixels: float) -> None:
        """Record the rendered track width. Applies to the next drag gesture."""
        if width_pixels <= 0:
            raise ValidationError("track_width_pixels", width_pixels, "must be positive")
        self._track_width = width_pixels

    def rows(self, board_filter: BoardFilter | None = None) -> list[UnitRow]:
        """
        Board rows for the current window.

        Pending edits override stored dates, so staged but uncommitted drags
        render where the planner left them.
        """
        window = self.view_window()
        return [
            self._unit_row(unit, window)
            for unit in filter_units(self._registry.list_units(), board_filter)
        ]

    def category_stats(self) -> list[CategoryStats]:
        return category_stats(self._registry.list_units())

    def _unit_row(self, unit: Unit, window: ViewWindow) -> UnitRow:
        progress = ProgressAggregator.progress(unit)
        current = ProgressAggregator.current_stage(unit)
        bars = []
        for stage in unit.stages:
            pending = self._pending.get(unit.id, stage.id)
            bars.append(
                StageBar(
                    stage_id=stage.id,
                    stage=stage.stage.value,
                    stage_name=stage_name(stage.stage),
                    status=stage.status.value,
                    assigned_workers=list(stage.assigned_workers),
                    has_pending_edit=pending is not None,
                    position=self._mapper.position(stage, window, pending),
                )
            )
        return UnitRow(
            unit_id=unit.id,
            display_name=unit.display_name,
            model=unit.model,
            category=unit.category,
            status=unit.status,
            completed_stages=progress.completed,
            total_stages=progress.total,
            percent_complete=progress.percent,
            current_stage=current.stage.value if current else None,
            stages=bars,
        )

    # Drag

    def begin_drag(
        self, kind: DragKind, unit_id: str, stage_id: str, pointer_x: float
    ) -> DragSession:
        """
        Start dragging a stage bar.

        Raises:
            UnitNotFoundError: If the unit does not exist
            StageNotFoundError: If the unit has no such stage
        """
        stage = self._registry.get_unit(unit_id).get_stage(stage_id)
        return self._drag.begin(
            DragKind(kind), unit_id, stage, pointer_x, self.view_window(), self._track_width
        )

    def pointer_move(self, pointer_x: float) -> PendingEdit | None:
        return self._drag.update(pointer_x)

    def pointer_up(self) -> PendingEdit | None:
        return self._drag.end()

    def pointer_leave(self) -> PendingEdit | None:
        return self._drag.pointer_leave()

    def cancel_drag(self) -> None:
        self._drag.cancel()

    # Pending changes

    def unsaved_changes(self) -> list[PendingEdit]:
        return list(self._pending)

    def unsaved_label(self) -> str:
        return self._pending.unsaved_label()

    def commit(self) -> CommitReport:
        """Write every staged edit to the registry and report per-entry outcomes."""
        report = self._pending.commit_all(partial(write_planned_interval, self._registry))
        self._event_bus.publish(
            PendingChangesCommitted(
                aggregate_id="planning-board",
                committed=len(report.committed),
                skipped=len(report.skipped),
            )
        )
        return report

    def discard(self) -> int:
        discarded = self._pending.discard_all()
        self._event_bus.publish(
            PendingChangesDiscarded(aggregate_id="planning-board", discarded=discarded)
        )
        return discarded

    # Workers

    def open_assignment_dialog(self, unit_id: str, stage_id: str) -> AssignmentDialog:
        return self._assignments.open_dialog(unit_id, stage_id)

    def assign_workers(
        self, unit_id: str, stage_id: str, worker_ids: Sequence[str]
    ) -> list[AssignmentWarning]:
        """
        Replace a stage's worker set.

        Raises:
            EditPermissionError: If the planner may not edit
        """
        if not self._can_edit():
            raise EditPermissionError("assign workers")
        return self._assignments.set_assigned_workers(unit_id, stage_id, worker_ids)

    def worker_workloads(self) -> list[WorkerWorkload]:
        return WorkerAssignmentValidator.workload_overview(
            self._registry.list_workers(),
            self._registry.list_units(),
            self._settings.WORKER_MAX_LOAD,
        )

    def worker_workload(self, worker_id: str) -> WorkerWorkload:
        """
        Open-stage workload of one roster member.

        Raises:
            WorkerNotFoundError: If the id does not resolve
        """
        if self._registry.get_worker_by_id(worker_id) is None:
            raise WorkerNotFoundError(worker_id)
        return WorkerAssignmentValidator.workload(
            worker_id, self._registry.list_units(), self._settings.WORKER_MAX_LOAD
        )
