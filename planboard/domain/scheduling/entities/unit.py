"""Unit entity: a vessel under production, maintenance or refit."""

from datetime import datetime

from pydantic import Field, model_validator

from ...shared.base import Entity, utcnow
from ...shared.exceptions import InvalidStageCodeError, StageNotFoundError
from ..value_objects.enums import UnitCategory, UnitStatus
from ..value_objects.stage_codes import belongs_to
from .stage_entry import StageEntry


class Unit(Entity):
    """
    Unit entity owned by the external registry.

    The planning engine only reads units and asks the registry to replace
    a unit's stage list; it never creates stages.
    """

    name: str | None = None
    model: str = ""
    category: UnitCategory = UnitCategory.NEW_BUILD
    status: UnitStatus = UnitStatus.ORDERED
    stages: list[StageEntry] = Field(default_factory=list)
    production_start_date: str | None = None
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def _stages_match_category(self) -> "Unit":
        for entry in self.stages:
            if not belongs_to(self.category, entry.stage):
                raise InvalidStageCodeError(entry.stage.value, self.category.value)
        return self

    @property
    def display_name(self) -> str:
        return self.name or self.model or self.id

    def find_stage(self, stage_id: str) -> StageEntry | None:
        for entry in self.stages:
            if entry.id == stage_id:
                return entry
        return None

    def get_stage(self, stage_id: str) -> StageEntry:
        """
        Get a stage by id.

        Raises:
            StageNotFoundError: If the unit has no such stage
        """
        entry = self.find_stage(stage_id)
        if entry is None:
            raise StageNotFoundError(self.id, stage_id)
        return entry

    def replace_stage(self, updated: StageEntry) -> list[StageEntry]:
        """Stage list with one entry swapped out, ready for a timeline update."""
        self.get_stage(updated.id)
        return [updated if entry.id == updated.id else entry for entry in self.stages]
