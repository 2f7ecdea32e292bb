"""
Tests for the PlanningBoard session facade.
"""

from datetime import date

import pytest

from planboard.application import PlanningBoard
from planboard.domain.scheduling.events import (
    PendingChangesCommitted,
    PendingChangesDiscarded,
)
from planboard.domain.scheduling.services import BoardFilter
from planboard.domain.scheduling.value_objects import (
    DragKind,
    DragPhase,
    NavigationDirection,
    SkipReason,
    ViewMode,
)
from planboard.domain.shared.exceptions import (
    EditPermissionError,
    ValidationError,
    WorkerNotFoundError,
)


class TestView:
    """Test view mode and navigation."""

    def test_initial_window(self, board):
        window = board.view_window()

        assert board.mode == ViewMode.QUARTER
        assert (window.start, window.end) == (date(2024, 1, 1), date(2024, 3, 31))
        assert len(board.columns()) == 91
        assert [h.label for h in board.month_headers()] == ["Jan", "Feb", "Mar"]

    def test_navigate_and_mode(self, board):
        window = board.navigate(NavigationDirection.NEXT)
        assert window.start == date(2024, 4, 1)

        window = board.set_view_mode(ViewMode.MONTH)
        assert (window.start, window.end) == (date(2024, 4, 1), date(2024, 4, 30))

        window = board.navigate(NavigationDirection.TODAY)
        assert window.start == date(2024, 1, 1)

    def test_board_view(self, board):
        view = board.board_view()

        assert view.total_days == 91
        assert view.today_column == 14

    def test_resize_track_validates(self, board):
        board.resize_track(455.0)
        assert board.track_width == 455.0
        with pytest.raises(ValidationError):
            board.resize_track(0)


class TestRows:
    """Test row assembly."""

    def test_rows(self, board):
        rows = board.rows()

        assert [r.unit_id for r in rows] == ["u1", "u2"]
        hull = rows[0]
        assert hull.percent_complete == 10
        assert hull.current_stage == "hull_construction"
        bars = {b.stage_id: b for b in hull.stages}
        assert bars["s2"].position.left_percent == pytest.approx(40 / 91 * 100)
        assert bars["s1"].position.clipped_left
        assert bars["s3"].position is None
        assert bars["s2"].stage_name == "Hull Construction"

    def test_rows_apply_filter(self, board):
        rows = board.rows(BoardFilter(show_completed=False))
        assert [r.unit_id for r in rows] == ["u1"]

    def test_rows_show_pending_edit(self, board):
        board.begin_drag(DragKind.MOVE, "u1", "s2", 500.0)
        board.pointer_move(600.0)

        bar = next(b for b in board.rows()[0].stages if b.stage_id == "s2")
        assert bar.has_pending_edit
        assert bar.position.start == date(2024, 2, 20)


class TestDragAndCommit:
    """Test the drag, review and commit flow end to end."""

    def test_drag_commit_flow(self, board, registry, event_bus):
        board.begin_drag(DragKind.MOVE, "u1", "s2", 500.0)
        board.pointer_move(550.0)
        board.pointer_up()

        assert board.drag.phase == DragPhase.IDLE
        assert board.unsaved_label() == "1 unsaved change"
        # Nothing is written before commit
        assert registry.get_unit("u1").get_stage("s2").planned_start == "2024-02-10"

        report = board.commit()

        assert len(report.committed) == 1
        assert registry.get_unit("u1").get_stage("s2").planned_start == "2024-02-15"
        assert board.unsaved_changes() == []
        event = event_bus.get_event_history(PendingChangesCommitted)[-1]
        assert (event.committed, event.skipped) == (1, 0)

    def test_commit_skips_removed_unit(self, board, registry):
        board.begin_drag(DragKind.RESIZE_END, "u1", "s2", 500.0)
        board.pointer_move(520.0)
        board.pointer_leave()
        registry.remove_unit("u1")

        report = board.commit()

        assert [o.reason for o in report.skipped] == [SkipReason.UNIT_NOT_FOUND]

    def test_discard(self, board, registry, event_bus):
        board.begin_drag(DragKind.MOVE, "u1", "s2", 500.0)
        board.pointer_move(550.0)
        board.pointer_up()

        assert board.discard() == 1
        assert registry.get_unit("u1").get_stage("s2").planned_start == "2024-02-10"
        assert event_bus.get_event_history(PendingChangesDiscarded)[-1].discarded == 1

    def test_cancel_drag(self, board):
        board.begin_drag(DragKind.MOVE, "u1", "s2", 500.0)
        board.pointer_move(550.0)
        board.cancel_drag()

        assert board.unsaved_changes() == []

    def test_track_width_changes_scale(self, board):
        board.resize_track(91.0)
        board.begin_drag(DragKind.MOVE, "u1", "s2", 50.0)
        edit = board.pointer_move(52.0)

        assert edit.new_start == date(2024, 2, 12)

    def test_read_only_planner(self, registry, test_settings):
        board = PlanningBoard(
            registry,
            settings=test_settings,
            can_edit=lambda: False,
            anchor=date(2024, 1, 1),
        )

        assert not board.can_edit
        with pytest.raises(EditPermissionError):
            board.begin_drag(DragKind.MOVE, "u1", "s2", 0.0)
        with pytest.raises(EditPermissionError):
            board.assign_workers("u1", "s2", ["w1"])


class TestWorkers:
    """Test assignment and workload operations."""

    def test_assignment_dialog_and_replace(self, board, registry):
        dialog = board.open_assignment_dialog("u1", "s2")
        assert dialog.assigned_workers == ("w1", "w2")

        warnings = board.assign_workers("u1", "s2", ["w2"])

        assert [w.worker_id for w in warnings] == ["w2"]
        assert registry.get_unit("u1").get_stage("s2").assigned_workers == ("w2",)

    def test_worker_workloads(self, board):
        workloads = {w.worker_id: w for w in board.worker_workloads()}

        assert workloads["w1"].total == 2
        assert workloads["w1"].max_load == 5
        assert workloads["w3"].total == 0

    def test_unknown_worker_workload(self, board):
        with pytest.raises(WorkerNotFoundError):
            board.worker_workload("ghost")

    def test_category_stats(self, board):
        assert sum(s.total for s in board.category_stats()) == 2
