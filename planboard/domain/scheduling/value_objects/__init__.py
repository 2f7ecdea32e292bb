"""Value objects for the planning board domain."""

from .date_interval import DateInterval, PendingEdit
from .enums import (
    AssignmentWarningKind,
    CommitStatus,
    DragKind,
    DragPhase,
    MaintenanceStage,
    NavigationDirection,
    NewBuildStage,
    SkipReason,
    StageCode,
    StageStatus,
    UnitCategory,
    UnitStatus,
    ViewMode,
    WorkerAvailability,
)
from .stage_codes import (
    MAINTENANCE_STAGES,
    NEW_BUILD_STAGES,
    default_duration,
    parse_stage_code,
    stage_name,
    stage_vocabulary,
)
from .time_units import add_days, add_months, days_between, parse_iso_date, to_iso_date
from .view_window import MonthHeader, StagePosition, TimelineColumn, ViewWindow

__all__ = [
    "AssignmentWarningKind",
    "CommitStatus",
    "DateInterval",
    "DragKind",
    "DragPhase",
    "MAINTENANCE_STAGES",
    "MaintenanceStage",
    "MonthHeader",
    "NEW_BUILD_STAGES",
    "NavigationDirection",
    "NewBuildStage",
    "PendingEdit",
    "SkipReason",
    "StageCode",
    "StagePosition",
    "StageStatus",
    "TimelineColumn",
    "UnitCategory",
    "UnitStatus",
    "ViewMode",
    "ViewWindow",
    "WorkerAvailability",
    "add_days",
    "add_months",
    "days_between",
    "default_duration",
    "parse_iso_date",
    "parse_stage_code",
    "stage_name",
    "stage_vocabulary",
    "to_iso_date",
]
