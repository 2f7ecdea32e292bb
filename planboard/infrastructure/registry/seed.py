"""Demo roster and units loaded by the HTTP adapter when no registry is supplied."""

from datetime import date

from planboard.domain.scheduling.entities import StageEntry, Unit, Worker
from planboard.domain.scheduling.value_objects import (
    MaintenanceStage,
    NewBuildStage,
    StageStatus,
    UnitCategory,
    UnitStatus,
    WorkerAvailability,
    add_days,
    default_duration,
)


def sample_workers() -> list[Worker]:
    return [
        Worker(
            id="w1",
            name="Jan de Vries",
            role="Hull Specialist",
            skills=frozenset({NewBuildStage.HULL_CONSTRUCTION, NewBuildStage.STRUCTURAL_WORK}),
        ),
        Worker(
            id="w2",
            name="Pieter Bakker",
            role="Electrician",
            skills=frozenset(
                {NewBuildStage.ELECTRICAL_SYSTEMS, NewBuildStage.PROPULSION_INSTALLATION}
            ),
        ),
        Worker(
            id="w3",
            name="Kees Jansen",
            role="Interior",
            skills=frozenset({NewBuildStage.INTERIOR_FINISHING, NewBuildStage.DECK_EQUIPMENT}),
            availability=WorkerAvailability.BUSY,
        ),
        Worker(
            id="w4",
            name="Willem van Dijk",
            role="QA",
            skills=frozenset(
                {
                    NewBuildStage.QUALITY_INSPECTION,
                    NewBuildStage.SEA_TRIAL,
                    NewBuildStage.FINAL_DELIVERY,
                }
            ),
        ),
        Worker(
            id="w5",
            name="Hendrik Smit",
            role="Technician",
            skills=frozenset(
                {
                    NewBuildStage.HULL_CONSTRUCTION,
                    NewBuildStage.STRUCTURAL_WORK,
                    NewBuildStage.DECK_EQUIPMENT,
                }
            ),
        ),
    ]


def _chain(codes, start: date, completed: int) -> list[StageEntry]:
    """Back-to-back stages using default durations; the first ``completed`` are done."""
    entries = []
    cursor = start
    for idx, code in enumerate(codes):
        end = add_days(cursor, default_duration(code) - 1)
        if idx < completed:
            status = StageStatus.COMPLETED
        elif idx == completed:
            status = StageStatus.IN_PROGRESS
        else:
            status = StageStatus.PENDING
        entries.append(
            StageEntry(stage=code, status=status, planned_start=cursor, planned_end=end)
        )
        cursor = add_days(end, 1)
    return entries


def sample_units(today: date) -> list[Unit]:
    hull_start = add_days(today, -45)
    hull = _chain(list(NewBuildStage), hull_start, completed=2)
    hull[1] = hull[1].with_assigned_workers(("w1", "w5"))
    hull[3] = hull[3].with_assigned_workers(("w2",))

    service_start = add_days(today, -10)
    service = _chain(list(MaintenanceStage), service_start, completed=1)

    return [
        Unit(
            id="u1",
            name="Eagle 25TS #014",
            model="Eagle 25TS",
            category=UnitCategory.NEW_BUILD,
            status=UnitStatus.IN_PRODUCTION,
            stages=hull,
            production_start_date=hull_start.isoformat(),
        ),
        Unit(
            id="u2",
            name="Eagle 525T service",
            model="Eagle 525T",
            category=UnitCategory.MAINTENANCE,
            status=UnitStatus.IN_PRODUCTION,
            stages=service,
            production_start_date=service_start.isoformat(),
        ),
        Unit(
            id="u3",
            model="Eagle 25TS",
            category=UnitCategory.NEW_BUILD,
            status=UnitStatus.ORDERED,
        ),
    ]
