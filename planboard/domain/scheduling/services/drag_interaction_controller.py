"""
Drag Interaction Controller

Finite-state machine for a drag gesture on a stage bar:

    IDLE --begin--> DRAGGING --update*--> DRAGGING --end/pointer_leave/cancel--> IDLE

Pointer movement is converted to whole-day deltas and applied to the
interval captured at ``begin``. Every delta change is written to the
pending change set; ending the gesture leaves that edit staged until the
planner commits or discards it.
"""

import logging
import math
from collections.abc import Callable

from ...shared.base import ValueObject
from ...shared.exceptions import (
    DragStateError,
    EditPermissionError,
    InvalidDateError,
    UnschedulableStageError,
    ValidationError,
)
from ..entities.stage_entry import StageEntry
from ..value_objects.date_interval import DateInterval, PendingEdit
from ..value_objects.enums import DragKind, DragPhase
from ..value_objects.time_units import add_days
from ..value_objects.view_window import ViewWindow
from .pending_change_set import PendingChangeSet
from .stage_position_mapper import StagePositionMapper

logger = logging.getLogger(__name__)


class DragSession(ValueObject):
    """State captured for the gesture in flight."""

    kind: DragKind
    unit_id: str
    stage_id: str
    original: DateInterval
    pointer_origin: float
    pixels_per_day: float
    last_delta: int = 0
    # Edit staged before this gesture, restored on cancel
    previous_edit: PendingEdit | None = None


def day_delta(pointer_x: float, pointer_origin: float, pixels_per_day: float) -> int:
    """Whole days moved, rounding half-up."""
    return math.floor((pointer_x - pointer_origin) / pixels_per_day + 0.5)


def apply_delta(kind: DragKind, original: DateInterval, delta: int) -> DateInterval:
    """
    Shift an interval according to the drag kind.

    Resizing never lets the moving edge reach or cross the fixed edge: the
    result keeps at least one day between start and end.
    """
    if kind == DragKind.MOVE:
        return original.shifted(delta)
    start, end = original.start, original.end
    if kind == DragKind.RESIZE_START:
        start = add_days(start, delta)
        if start >= end:
            start = add_days(end, -1)
    else:
        end = add_days(end, delta)
        if end <= start:
            end = add_days(start, 1)
    return DateInterval(start=start, end=end)


def _require_finite(pointer_x: float) -> None:
    if not math.isfinite(pointer_x):
        raise ValidationError("pointer_x", pointer_x, "must be a finite coordinate")


class DragInteractionController:
    """Owns at most one in-flight drag gesture for a planner session."""

    def __init__(
        self,
        pending_changes: PendingChangeSet,
        position_mapper: StagePositionMapper | None = None,
        can_edit: Callable[[], bool] = lambda: True,
    ) -> None:
        """
        Initialize the controller.

        Args:
            pending_changes: Change set receiving tentative edits
            position_mapper: Resolves a stage's effective interval
            can_edit: Edit-permission check for the current planner
        """
        self._pending = pending_changes
        self._mapper = position_mapper or StagePositionMapper()
        self._can_edit = can_edit
        self._session: DragSession | None = None

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self._session is None else DragPhase.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> DragSession | None:
        return self._session

    def begin(
        self,
        kind: DragKind,
        unit_id: str,
        stage: StageEntry,
        pointer_x: float,
        window: ViewWindow,
        track_width_pixels: float,
    ) -> DragSession:
        """
        Start a drag gesture on a stage bar.

        The captured interval is what the planner currently sees: the staged
        edit for the stage if there is one, else its effective stored
        interval.

        Args:
            kind: Which handle was grabbed
            unit_id: Unit owning the stage
            stage: Stage being dragged
            pointer_x: Pointer X coordinate at press time
            window: Visible window, fixes the pixels-per-day scale
            track_width_pixels: Rendered width of the day track

        Returns:
            The new drag session

        Raises:
            EditPermissionError: If the planner may not edit
            DragStateError: If a drag is already in flight
            ValidationError: If the pointer or track width is not a finite number
            UnschedulableStageError: If the stage has no usable interval
        """
        if not self._can_edit():
            raise EditPermissionError("reschedule stages")
        if self._session is not None:
            raise DragStateError(
                f"Drag already in progress on stage {self._session.stage_id}",
                self.phase.value,
            )
        _require_finite(pointer_x)
        if not math.isfinite(track_width_pixels) or track_width_pixels <= 0:
            raise ValidationError(
                "track_width_pixels", track_width_pixels, "must be positive and finite"
            )

        previous = self._pending.get(unit_id, stage.id)
        try:
            interval = self._mapper.effective_interval(stage, previous)
        except InvalidDateError as e:
            raise UnschedulableStageError(unit_id, stage.id) from e
        if interval is None:
            raise UnschedulableStageError(unit_id, stage.id)

        if interval.is_inverted:
            logger.warning(f"Stage {stage.id} has an inverted interval {interval}; normalizing")
            interval = DateInterval(start=interval.start, end=add_days(interval.start, 1))

        self._session = DragSession(
            kind=kind,
            unit_id=unit_id,
            stage_id=stage.id,
            original=interval,
            pointer_origin=pointer_x,
            pixels_per_day=track_width_pixels / window.total_days,
            previous_edit=previous,
        )
        logger.debug(f"Drag {kind.value} started on stage {stage.id} of unit {unit_id}")
        return self._session

    def update(self, pointer_x: float) -> PendingEdit | None:
        """
        Apply pointer movement.

        Returns:
            The staged edit when the day delta changed, None otherwise

        Raises:
            DragStateError: If no drag is in flight
            ValidationError: If the pointer coordinate is not finite
        """
        session = self._require_session("update")
        _require_finite(pointer_x)
        delta = day_delta(pointer_x, session.pointer_origin, session.pixels_per_day)
        if delta == session.last_delta:
            return None

        interval = apply_delta(session.kind, session.original, delta)
        edit = self._pending.stage(
            session.unit_id, session.stage_id, interval.start, interval.end
        )
        self._session = session.model_copy(update={"last_delta": delta})
        return edit

    def end(self) -> PendingEdit | None:
        """
        Finish the gesture. The staged edit, if any, is kept.

        Returns:
            The edit staged for the dragged stage, if any

        Raises:
            DragStateError: If no drag is in flight
        """
        session = self._require_session("end")
        self._session = None
        return self._pending.get(session.unit_id, session.stage_id)

    def pointer_leave(self) -> PendingEdit | None:
        """Soft cancel: the pointer left the board without a release."""
        return self.end()

    def cancel(self) -> None:
        """
        Hard cancel: revert the dragged stage to its state before the gesture.

        Raises:
            DragStateError: If no drag is in flight
        """
        session = self._require_session("cancel")
        self._session = None
        if session.previous_edit is not None:
            self._pending.restore(session.previous_edit)
        else:
            self._pending.discard(session.unit_id, session.stage_id)
        logger.debug(f"Drag cancelled on stage {session.stage_id}")

    def _require_session(self, action: str) -> DragSession:
        if self._session is None:
            raise DragStateError(f"Cannot {action}: no drag in progress", self.phase.value)
        return self._session
