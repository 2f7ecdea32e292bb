"""
Pending Change Set

Staging area for tentative interval edits produced by dragging. Edits are
keyed by (unit id, stage id): dragging the same stage again overwrites the
earlier edit. Nothing reaches the registry until ``commit_all``.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import date

from pydantic import Field

from ...shared.base import ValueObject
from ...shared.exceptions import StageNotFoundError, UnitNotFoundError
from ..repositories.unit_registry import UnitRegistry
from ..value_objects.date_interval import PendingEdit
from ..value_objects.enums import CommitStatus, SkipReason

logger = logging.getLogger(__name__)

EditKey = tuple[str, str]
WriteFn = Callable[[str, str, date, date], object]


class CommitOutcome(ValueObject):
    """Result of writing one pending edit."""

    edit: PendingEdit
    status: CommitStatus
    reason: SkipReason | None = None


class CommitReport(ValueObject):
    """Per-entry outcomes of one ``commit_all`` call, in commit order."""

    outcomes: tuple[CommitOutcome, ...] = Field(default_factory=tuple)

    @property
    def committed(self) -> list[CommitOutcome]:
        return [o for o in self.outcomes if o.status == CommitStatus.COMMITTED]

    @property
    def skipped(self) -> list[CommitOutcome]:
        return [o for o in self.outcomes if o.status == CommitStatus.SKIPPED]

    def __len__(self) -> int:
        return len(self.outcomes)


class PendingChangeSet:
    """Per-session collection of uncommitted stage interval edits."""

    def __init__(self) -> None:
        self._edits: dict[EditKey, PendingEdit] = {}

    def stage(self, unit_id: str, stage_id: str, new_start: date, new_end: date) -> PendingEdit:
        """Insert or overwrite the tentative edit for a stage."""
        edit = PendingEdit(
            unit_id=unit_id, stage_id=stage_id, new_start=new_start, new_end=new_end
        )
        self._edits[edit.key] = edit
        return edit

    def restore(self, edit: PendingEdit) -> None:
        self._edits[edit.key] = edit

    def get(self, unit_id: str, stage_id: str) -> PendingEdit | None:
        return self._edits.get((unit_id, stage_id))

    def discard(self, unit_id: str, stage_id: str) -> PendingEdit | None:
        """Drop one staged edit; returns it if there was one."""
        return self._edits.pop((unit_id, stage_id), None)

    def discard_all(self) -> int:
        """Drop every staged edit. The registry is not touched."""
        count = len(self._edits)
        self._edits.clear()
        if count:
            logger.info(f"Discarded {count} pending edit(s)")
        return count

    def commit_all(self, write_fn: WriteFn) -> CommitReport:
        """
        Write every staged edit through ``write_fn`` and empty the set.

        ``write_fn(unit_id, stage_id, new_start, new_end)`` persists one edit.
        A missing unit or stage is recorded as a skipped outcome and the
        remaining edits still apply. Any other error propagates; edits
        already written stay removed from the set.

        Args:
            write_fn: Per-entry writer, see ``write_planned_interval``

        Returns:
            Report listing one outcome per staged edit
        """
        outcomes: list[CommitOutcome] = []
        for key, edit in list(self._edits.items()):
            try:
                write_fn(edit.unit_id, edit.stage_id, edit.new_start, edit.new_end)
            except UnitNotFoundError:
                logger.warning(f"Skipped edit for stage {edit.stage_id}: unit {edit.unit_id} not found")
                outcomes.append(
                    CommitOutcome(
                        edit=edit,
                        status=CommitStatus.SKIPPED,
                        reason=SkipReason.UNIT_NOT_FOUND,
                    )
                )
            except StageNotFoundError:
                logger.warning(f"Skipped edit: stage {edit.stage_id} not found on unit {edit.unit_id}")
                outcomes.append(
                    CommitOutcome(
                        edit=edit,
                        status=CommitStatus.SKIPPED,
                        reason=SkipReason.STAGE_NOT_FOUND,
                    )
                )
            else:
                outcomes.append(CommitOutcome(edit=edit, status=CommitStatus.COMMITTED))
            del self._edits[key]

        report = CommitReport(outcomes=tuple(outcomes))
        logger.info(
            f"Committed {len(report.committed)} edit(s), skipped {len(report.skipped)}"
        )
        return report

    def unsaved_label(self) -> str:
        count = len(self._edits)
        return f"{count} unsaved change{'' if count == 1 else 's'}"

    @property
    def is_empty(self) -> bool:
        return not self._edits

    def __len__(self) -> int:
        return len(self._edits)

    def __contains__(self, key: object) -> bool:
        return key in self._edits

    def __iter__(self) -> Iterator[PendingEdit]:
        return iter(list(self._edits.values()))


def write_planned_interval(
    registry: UnitRegistry, unit_id: str, stage_id: str, new_start: date, new_end: date
) -> None:
    """
    Persist one edit: replace the stage's planned dates in the unit's stage list.

    Actual dates are left untouched.

    Raises:
        UnitNotFoundError: If the unit no longer exists
        StageNotFoundError: If the unit no longer has the stage
    """
    unit = registry.get_unit(unit_id)
    stage = unit.get_stage(stage_id)
    registry.update_unit_timeline(
        unit_id, unit.replace_stage(stage.with_planned_interval(new_start, new_end))
    )
