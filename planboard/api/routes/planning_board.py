"""
Planning Board API Routes

HTTP surface for the planner session: view navigation, board rows, drag
gestures, pending change review and worker assignment.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from planboard.api.deps import BoardDep
from planboard.application.dtos import BoardView, UnitRow
from planboard.domain.scheduling.services import (
    AssignmentDialog,
    AssignmentWarning,
    BoardFilter,
    CategoryStats,
    CommitReport,
    DragSession,
    WorkerWorkload,
)
from planboard.domain.scheduling.value_objects import (
    DragKind,
    NavigationDirection,
    PendingEdit,
    UnitCategory,
    UnitStatus,
    ViewMode,
)
from planboard.domain.shared.exceptions import DomainError, ErrorType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/board", tags=["planning-board"])

_STATUS_BY_ERROR_TYPE = {
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.PERMISSION: status.HTTP_403_FORBIDDEN,
    ErrorType.STATE: status.HTTP_409_CONFLICT,
    ErrorType.BUSINESS_RULE: status.HTTP_409_CONFLICT,
    ErrorType.VALIDATION: 422,
}


def _http_error(error: DomainError) -> HTTPException:
    status_code = _STATUS_BY_ERROR_TYPE.get(
        error.error_type, status.HTTP_400_BAD_REQUEST
    )
    logger.info(f"Domain error mapped to {status_code}: {error.message}")
    return HTTPException(status_code=status_code, detail=error.to_dict())


# Request/Response Models
class ViewModeRequest(BaseModel):
    mode: ViewMode


class NavigateRequest(BaseModel):
    direction: NavigationDirection


class DragBeginRequest(BaseModel):
    """Pointer press on a stage bar or one of its resize handles."""

    kind: DragKind
    unit_id: str
    stage_id: str
    pointer_x: float = Field(allow_inf_nan=False)
    track_width_pixels: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class DragMoveRequest(BaseModel):
    pointer_x: float = Field(allow_inf_nan=False)


class DragResponse(BaseModel):
    phase: str
    edit: PendingEdit | None = None


class PendingResponse(BaseModel):
    label: str
    edits: list[PendingEdit]


class DiscardResponse(BaseModel):
    discarded: int


class AssignmentRequest(BaseModel):
    worker_ids: list[str]


class AssignmentResponse(BaseModel):
    warnings: list[AssignmentWarning]


# View


@router.get("/view", summary="Get the visible window and column grid")
async def get_view(board: BoardDep) -> BoardView:
    return board.board_view()


@router.put("/view/mode", summary="Switch view mode")
async def set_view_mode(request: ViewModeRequest, board: BoardDep) -> BoardView:
    board.set_view_mode(request.mode)
    return board.board_view()


@router.post("/view/navigate", summary="Navigate to the previous, next or current period")
async def navigate(request: NavigateRequest, board: BoardDep) -> BoardView:
    board.navigate(request.direction)
    return board.board_view()


@router.get("/rows", summary="Get board rows")
async def get_rows(
    board: BoardDep,
    unit_status: UnitStatus | None = Query(None, alias="status", description="Filter by unit status"),
    category: UnitCategory | None = Query(None, description="Filter by unit category"),
    search: str = Query("", description="Case-insensitive match on name or model"),
    show_completed: bool = Query(True, description="Include delivered units"),
) -> list[UnitRow]:
    """
    Get one row per matching unit with progress and stage bars.

    Staged, uncommitted edits are applied to the bars.
    """
    board_filter = BoardFilter(
        status=unit_status,
        category=category,
        search=search,
        show_completed=show_completed,
    )
    return board.rows(board_filter)


@router.get("/stats", summary="Get unit counts per category")
async def get_category_stats(board: BoardDep) -> list[CategoryStats]:
    return board.category_stats()


# Drag


@router.post("/drag/begin", summary="Start a drag gesture")
async def begin_drag(request: DragBeginRequest, board: BoardDep) -> DragSession:
    try:
        if request.track_width_pixels is not None:
            board.resize_track(request.track_width_pixels)
        return board.begin_drag(
            request.kind, request.unit_id, request.stage_id, request.pointer_x
        )
    except DomainError as e:
        raise _http_error(e) from e


@router.post("/drag/move", summary="Report pointer movement")
async def move_drag(request: DragMoveRequest, board: BoardDep) -> DragResponse:
    try:
        edit = board.pointer_move(request.pointer_x)
    except DomainError as e:
        raise _http_error(e) from e
    return DragResponse(phase=board.drag.phase.value, edit=edit)


@router.post("/drag/end", summary="Release the pointer")
async def end_drag(board: BoardDep) -> DragResponse:
    try:
        edit = board.pointer_up()
    except DomainError as e:
        raise _http_error(e) from e
    return DragResponse(phase=board.drag.phase.value, edit=edit)


@router.post("/drag/leave", summary="Pointer left the board")
async def leave_drag(board: BoardDep) -> DragResponse:
    try:
        edit = board.pointer_leave()
    except DomainError as e:
        raise _http_error(e) from e
    return DragResponse(phase=board.drag.phase.value, edit=edit)


@router.post("/drag/cancel", summary="Cancel the drag and revert the stage")
async def cancel_drag(board: BoardDep) -> DragResponse:
    try:
        board.cancel_drag()
    except DomainError as e:
        raise _http_error(e) from e
    return DragResponse(phase=board.drag.phase.value)


# Pending changes


@router.get("/pending", summary="List unsaved changes")
async def get_pending(board: BoardDep) -> PendingResponse:
    return PendingResponse(label=board.unsaved_label(), edits=board.unsaved_changes())


@router.post("/pending/commit", summary="Write unsaved changes to the registry")
async def commit_pending(board: BoardDep) -> CommitReport:
    """
    Commit every staged edit.

    Edits whose unit or stage no longer exists are reported as skipped.
    """
    return board.commit()


@router.post("/pending/discard", summary="Drop unsaved changes")
async def discard_pending(board: BoardDep) -> DiscardResponse:
    return DiscardResponse(discarded=board.discard())


# Workers


@router.get(
    "/units/{unit_id}/stages/{stage_id}/assignment",
    summary="Get a stage's assignment dialog",
)
async def get_assignment(unit_id: str, stage_id: str, board: BoardDep) -> AssignmentDialog:
    try:
        return board.open_assignment_dialog(unit_id, stage_id)
    except DomainError as e:
        raise _http_error(e) from e


@router.put(
    "/units/{unit_id}/stages/{stage_id}/assignment",
    summary="Replace a stage's assigned workers",
)
async def set_assignment(
    unit_id: str, stage_id: str, request: AssignmentRequest, board: BoardDep
) -> AssignmentResponse:
    """
    Replace the full worker set of a stage.

    Unknown workers and missing skills come back as warnings; the
    assignment is stored regardless.
    """
    try:
        warnings = board.assign_workers(unit_id, stage_id, request.worker_ids)
    except DomainError as e:
        raise _http_error(e) from e
    return AssignmentResponse(warnings=warnings)


@router.get("/workers/workload", summary="Get every worker's open-stage workload")
async def get_workloads(board: BoardDep) -> list[WorkerWorkload]:
    return board.worker_workloads()


@router.get("/workers/{worker_id}/workload", summary="Get one worker's open-stage workload")
async def get_worker_workload(worker_id: str, board: BoardDep) -> WorkerWorkload:
    try:
        return board.worker_workload(worker_id)
    except DomainError as e:
        raise _http_error(e) from e
