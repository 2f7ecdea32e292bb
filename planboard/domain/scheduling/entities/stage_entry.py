"""StageEntry entity: one phase of a unit's workflow."""

from datetime import date

from pydantic import Field, field_validator, model_validator

from ...shared.base import Entity
from ...shared.exceptions import InvalidDateError
from ..value_objects.enums import StageCode, StageStatus
from ..value_objects.time_units import parse_iso_date, to_iso_date


class StageEntry(Entity):
    """
    A scheduled stage on a unit's timeline.

    Dates are kept as the ISO strings the registry supplies. A malformed
    value is preserved rather than rejected so one bad record cannot block
    loading the board; readers parse on demand and decide how to degrade.
    """

    stage: StageCode
    status: StageStatus = StageStatus.PENDING
    planned_start: str | None = None
    planned_end: str | None = None
    actual_start: str | None = None
    actual_end: str | None = None
    assigned_workers: tuple[str, ...] = Field(default_factory=tuple)
    notes: str | None = None

    @field_validator(
        "planned_start", "planned_end", "actual_start", "actual_end", mode="before"
    )
    @classmethod
    def _date_to_iso(cls, v: object) -> object:
        if isinstance(v, date):
            return to_iso_date(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("assigned_workers", mode="before")
    @classmethod
    def _dedupe_workers(cls, v: object) -> object:
        if v is None:
            return ()
        if isinstance(v, list | tuple | set | frozenset):
            return tuple(dict.fromkeys(v))
        return v

    @model_validator(mode="after")
    def _start_not_after_end(self) -> "StageEntry":
        for label, start, end in (
            ("planned", self.planned_start, self.planned_end),
            ("actual", self.actual_start, self.actual_end),
        ):
            if start is None or end is None:
                continue
            try:
                if parse_iso_date(start) > parse_iso_date(end):
                    raise ValueError(f"{label} start {start} is after {label} end {end}")
            except InvalidDateError:
                continue
        return self

    def effective_start_raw(self) -> str | None:
        """Actual start when recorded, else planned start."""
        return self.actual_start or self.planned_start

    def effective_end_raw(self) -> str | None:
        """Actual end when recorded, else planned end."""
        return self.actual_end or self.planned_end

    @property
    def is_completed(self) -> bool:
        return self.status == StageStatus.COMPLETED

    def has_worker(self, worker_id: str) -> bool:
        return worker_id in self.assigned_workers

    def with_planned_interval(self, start: date, end: date) -> "StageEntry":
        """Copy with new planned dates. Actual dates are never touched."""
        return self.model_copy(
            update={"planned_start": to_iso_date(start), "planned_end": to_iso_date(end)}
        )

    def with_assigned_workers(self, worker_ids: tuple[str, ...]) -> "StageEntry":
        return self.model_copy(update={"assigned_workers": tuple(dict.fromkeys(worker_ids))})
