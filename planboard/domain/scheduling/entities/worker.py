"""Worker entity for the production roster."""

from pydantic import Field, computed_field, field_validator

from ...shared.base import Entity
from ..value_objects.enums import StageCode, WorkerAvailability


class Worker(Entity):
    """
    A roster member who can be assigned to stages.

    Skills are the stage codes the worker is qualified for. Workers are
    read-only from the board's point of view.
    """

    name: str = Field(min_length=1, max_length=100)
    role: str = ""
    skills: frozenset[StageCode] = Field(default_factory=frozenset)
    availability: WorkerAvailability = WorkerAvailability.AVAILABLE

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Worker name cannot be blank")
        return stripped

    @computed_field  # type: ignore[prop-decorator]
    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part)

    @property
    def is_available_for_work(self) -> bool:
        return self.availability.is_available_for_work

    def has_skill(self, stage_code: StageCode) -> bool:
        return stage_code in self.skills
