from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from planboard.application import PlanningBoard
from planboard.core.config import Settings
from planboard.domain.scheduling.entities import StageEntry, Unit, Worker
from planboard.domain.scheduling.value_objects import (
    MaintenanceStage,
    NewBuildStage,
    StageStatus,
    UnitCategory,
    UnitStatus,
)
from planboard.infrastructure.events import InMemoryEventBus
from planboard.infrastructure.registry import InMemoryUnitRegistry
from planboard.main import create_app

TODAY = date(2024, 1, 15)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        DEFAULT_VIEW_MODE="quarter",
        TRACK_WIDTH_PIXELS=910.0,
        PLANNER_CAN_EDIT=True,
        LOG_FORMAT="console",
    )


@pytest.fixture
def workers() -> list[Worker]:
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
            skills=frozenset({NewBuildStage.ELECTRICAL_SYSTEMS}),
        ),
        Worker(
            id="w3",
            name="Kees Jansen",
            role="Mechanic",
            skills=frozenset({MaintenanceStage.REPAIR_WORK}),
        ),
    ]


@pytest.fixture
def hull_unit() -> Unit:
    """New build with a stage inside, one straddling and one without dates."""
    return Unit(
        id="u1",
        name="Eagle 25TS #014",
        model="Eagle 25TS",
        category=UnitCategory.NEW_BUILD,
        status=UnitStatus.IN_PRODUCTION,
        production_start_date="2023-12-01",
        stages=[
            StageEntry(
                id="s1",
                stage=NewBuildStage.ORDER_CONFIRMED,
                status=StageStatus.COMPLETED,
                planned_start="2023-12-20",
                planned_end="2024-01-05",
                assigned_workers=("w1",),
            ),
            StageEntry(
                id="s2",
                stage=NewBuildStage.HULL_CONSTRUCTION,
                status=StageStatus.IN_PROGRESS,
                planned_start="2024-02-10",
                planned_end="2024-02-20",
                assigned_workers=("w1", "w2"),
            ),
            StageEntry(
                id="s3",
                stage=NewBuildStage.STRUCTURAL_WORK,
                status=StageStatus.PENDING,
            ),
        ],
    )


@pytest.fixture
def service_unit() -> Unit:
    return Unit(
        id="u2",
        name="Saloon refit",
        model="Eagle 525T",
        category=UnitCategory.MAINTENANCE,
        status=UnitStatus.DELIVERED,
        production_start_date="2024-01-02",
        stages=[
            StageEntry(
                id="m1",
                stage=MaintenanceStage.INTAKE,
                status=StageStatus.COMPLETED,
                planned_start="2024-01-02",
                planned_end="2024-01-03",
            ),
            StageEntry(
                id="m2",
                stage=MaintenanceStage.REPAIR_WORK,
                status=StageStatus.PENDING,
                planned_start="2024-01-04",
                assigned_workers=("w1",),
            ),
        ],
    )


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def registry(
    hull_unit: Unit, service_unit: Unit, workers: list[Worker], event_bus: InMemoryEventBus
) -> InMemoryUnitRegistry:
    return InMemoryUnitRegistry(
        units=[hull_unit, service_unit], workers=workers, event_bus=event_bus
    )


@pytest.fixture
def board(registry: InMemoryUnitRegistry, test_settings: Settings) -> PlanningBoard:
    return PlanningBoard(
        registry,
        settings=test_settings,
        today=lambda: TODAY,
        anchor=date(2024, 1, 1),
    )


@pytest.fixture
def client(
    registry: InMemoryUnitRegistry, test_settings: Settings, board: PlanningBoard
) -> Generator[TestClient, None, None]:
    app = create_app(registry=registry, app_settings=test_settings, board=board)
    with TestClient(app) as c:
        yield c
