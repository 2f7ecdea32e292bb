"""Domain enums for production planning."""

from enum import Enum


class UnitCategory(str, Enum):
    """Kind of work a unit is scheduled for."""

    NEW_BUILD = "new_build"
    MAINTENANCE = "maintenance"
    REFIT = "refit"

    @property
    def label(self) -> str:
        return {
            UnitCategory.NEW_BUILD: "New Build",
            UnitCategory.MAINTENANCE: "Maintenance",
            UnitCategory.REFIT: "Refit",
        }[self]


class UnitStatus(str, Enum):
    """Lifecycle status of a unit."""

    ORDERED = "ordered"
    IN_PRODUCTION = "in_production"
    DELIVERED = "delivered"
    WARRANTY = "warranty"

    @property
    def is_delivered(self) -> bool:
        return self == UnitStatus.DELIVERED


class NewBuildStage(str, Enum):
    """Stage vocabulary for new builds and refits, in workflow order."""

    ORDER_CONFIRMED = "order_confirmed"
    HULL_CONSTRUCTION = "hull_construction"
    STRUCTURAL_WORK = "structural_work"
    PROPULSION_INSTALLATION = "propulsion_installation"
    ELECTRICAL_SYSTEMS = "electrical_systems"
    INTERIOR_FINISHING = "interior_finishing"
    DECK_EQUIPMENT = "deck_equipment"
    QUALITY_INSPECTION = "quality_inspection"
    SEA_TRIAL = "sea_trial"
    FINAL_DELIVERY = "final_delivery"


class MaintenanceStage(str, Enum):
    """Stage vocabulary for maintenance jobs, in workflow order."""

    INTAKE = "intake"
    DIAGNOSIS = "diagnosis"
    PARTS_ORDERING = "parts_ordering"
    REPAIR_WORK = "repair_work"
    TESTING = "testing"
    DELIVERY = "delivery"


StageCode = NewBuildStage | MaintenanceStage


class StageStatus(str, Enum):
    """Progress status of a single stage."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DELAYED = "delayed"

    @property
    def is_open(self) -> bool:
        """Stages that still count towards a worker's workload."""
        return self != StageStatus.COMPLETED


class WorkerAvailability(str, Enum):
    """Availability of a worker."""

    AVAILABLE = "available"
    BUSY = "busy"
    UNAVAILABLE = "unavailable"

    @property
    def is_available_for_work(self) -> bool:
        return self == WorkerAvailability.AVAILABLE


class ViewMode(str, Enum):
    """Timeline granularity."""

    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def months(self) -> int:
        """Number of calendar months one navigation step covers."""
        return {ViewMode.MONTH: 1, ViewMode.QUARTER: 3, ViewMode.YEAR: 12}[self]


class NavigationDirection(str, Enum):
    """Timeline navigation actions."""

    PREV = "prev"
    NEXT = "next"
    TODAY = "today"


class DragKind(str, Enum):
    """Which part of a stage bar is being dragged."""

    MOVE = "move"
    RESIZE_START = "resize-start"
    RESIZE_END = "resize-end"


class DragPhase(str, Enum):
    """States of the drag interaction state machine."""

    IDLE = "idle"
    DRAGGING = "dragging"


class CommitStatus(str, Enum):
    """Per-entry outcome of committing a pending edit."""

    COMMITTED = "committed"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    """Why a pending edit could not be written."""

    UNIT_NOT_FOUND = "unit-not-found"
    STAGE_NOT_FOUND = "stage-not-found"


class AssignmentWarningKind(str, Enum):
    """Soft warnings raised by the assignment dialog."""

    MISSING_SKILL = "missing_skill"
    UNKNOWN_WORKER = "unknown_worker"
