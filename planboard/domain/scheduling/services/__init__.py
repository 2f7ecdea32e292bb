"""Domain services for the production planning board."""

from .board_filter import BoardFilter, CategoryStats, category_stats, filter_units
from .drag_interaction_controller import (
    DragInteractionController,
    DragSession,
    apply_delta,
    day_delta,
)
from .pending_change_set import (
    CommitOutcome,
    CommitReport,
    PendingChangeSet,
    write_planned_interval,
)
from .progress_aggregator import ProgressAggregator, UnitProgress
from .stage_position_mapper import MIN_BAR_WIDTH_PERCENT, StagePositionMapper
from .timeline_range_calculator import TimelineRangeCalculator
from .worker_assignment_validator import (
    AssignmentCandidate,
    AssignmentDialog,
    AssignmentWarning,
    SkillPartition,
    WorkerAssignmentService,
    WorkerAssignmentValidator,
    WorkerWorkload,
    WorkloadAssignment,
)

__all__ = [
    "AssignmentCandidate",
    "AssignmentDialog",
    "AssignmentWarning",
    "BoardFilter",
    "CategoryStats",
    "CommitOutcome",
    "CommitReport",
    "DragInteractionController",
    "DragSession",
    "MIN_BAR_WIDTH_PERCENT",
    "PendingChangeSet",
    "ProgressAggregator",
    "SkillPartition",
    "StagePositionMapper",
    "TimelineRangeCalculator",
    "UnitProgress",
    "WorkerAssignmentService",
    "WorkerAssignmentValidator",
    "WorkerWorkload",
    "WorkloadAssignment",
    "apply_delta",
    "category_stats",
    "day_delta",
    "filter_units",
    "write_planned_interval",
]
