"""Per-unit completion progress derived from stage statuses."""

import math

from ...shared.base import ValueObject
from ..entities.stage_entry import StageEntry
from ..entities.unit import Unit
from ..value_objects.enums import StageStatus
from ..value_objects.stage_codes import stage_vocabulary


class UnitProgress(ValueObject):
    completed: int
    total: int
    percent: int


class ProgressAggregator:
    """
    Domain service for unit progress.

    The denominator is the length of the category's stage vocabulary, not
    the number of stages present on the unit.
    """

    @staticmethod
    def progress(unit: Unit) -> UnitProgress:
        completed = sum(1 for stage in unit.stages if stage.is_completed)
        total = len(stage_vocabulary(unit.category))
        percent = math.floor(100 * completed / max(total, 1) + 0.5)
        return UnitProgress(completed=completed, total=total, percent=percent)

    @staticmethod
    def percent_complete(unit: Unit) -> int:
        return ProgressAggregator.progress(unit).percent

    @staticmethod
    def current_stage(unit: Unit) -> StageEntry | None:
        """First in-progress stage, else first pending stage, else the last stage."""
        for wanted in (StageStatus.IN_PROGRESS, StageStatus.PENDING):
            for stage in unit.stages:
                if stage.status == wanted:
                    return stage
        return unit.stages[-1] if unit.stages else None
