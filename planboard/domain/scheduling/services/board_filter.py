"""
Board Filter

Selects and orders the units shown as board rows, and counts units per
category for the summary cards.
"""

from collections.abc import Iterable

from pydantic import computed_field

from ...shared.base import ValueObject
from ..entities.unit import Unit
from ..value_objects.enums import UnitCategory, UnitStatus


class BoardFilter(ValueObject):
    """Row selection criteria. None means "any"."""

    status: UnitStatus | None = None
    category: UnitCategory | None = None
    search: str = ""
    show_completed: bool = True

    def matches(self, unit: Unit) -> bool:
        if self.status is not None and unit.status != self.status:
            return False
        if self.category is not None and unit.category != self.category:
            return False
        if not self.show_completed and unit.status.is_delivered:
            return False
        term = self.search.strip().lower()
        if term:
            haystack = f"{unit.name or ''} {unit.model}".lower()
            if term not in haystack:
                return False
        return True


class CategoryStats(ValueObject):
    category: UnitCategory
    total: int = 0
    in_production: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        return self.category.label


def _sort_key(unit: Unit) -> str:
    # ISO dates and datetimes order lexically
    return unit.production_start_date or unit.created_at.isoformat()


def filter_units(units: Iterable[Unit], board_filter: BoardFilter | None = None) -> list[Unit]:
    """Units matching the filter, ordered by production start then creation time."""
    board_filter = board_filter or BoardFilter()
    return sorted((u for u in units if board_filter.matches(u)), key=_sort_key)


def category_stats(units: Iterable[Unit]) -> list[CategoryStats]:
    """Total and in-production counts for every category, in enum order."""
    counts = {category: [0, 0] for category in UnitCategory}
    for unit in units:
        counts[unit.category][0] += 1
        if unit.status == UnitStatus.IN_PRODUCTION:
            counts[unit.category][1] += 1
    return [
        CategoryStats(category=category, total=total, in_production=active)
        for category, (total, active) in counts.items()
    ]
