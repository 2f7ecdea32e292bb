"""
Board read DTOs.

Flattened, render-ready views of units and stages handed to the UI layer.
"""

from datetime import date

from pydantic import BaseModel, Field

from planboard.domain.scheduling.value_objects import (
    MonthHeader,
    StagePosition,
    TimelineColumn,
    UnitCategory,
    UnitStatus,
    ViewMode,
)


class StageBar(BaseModel):
    """One stage of a row, with bar geometry when it is visible."""

    stage_id: str
    stage: str
    stage_name: str
    status: str
    assigned_workers: list[str] = Field(default_factory=list)
    has_pending_edit: bool = False
    position: StagePosition | None = None


class UnitRow(BaseModel):
    """One unit row of the board."""

    unit_id: str
    display_name: str
    model: str
    category: UnitCategory
    status: UnitStatus
    completed_stages: int
    total_stages: int
    percent_complete: int = Field(ge=0, le=100)
    current_stage: str | None = None
    stages: list[StageBar] = Field(default_factory=list)


class BoardView(BaseModel):
    """Window, column grid and month bands of the current view."""

    mode: ViewMode
    anchor: date
    start: date
    end: date
    total_days: int
    columns: list[TimelineColumn]
    month_headers: list[MonthHeader]
    today_column: int | None = None
