"""
Stage vocabularies

New builds and refits share the production vocabulary, maintenance jobs use
their own. The two vocabularies are disjoint, so a stage code alone tells
which one it came from.
"""

from ...shared.exceptions import InvalidStageCodeError
from .enums import MaintenanceStage, NewBuildStage, StageCode, UnitCategory

NEW_BUILD_STAGES: tuple[NewBuildStage, ...] = tuple(NewBuildStage)
MAINTENANCE_STAGES: tuple[MaintenanceStage, ...] = tuple(MaintenanceStage)

STAGE_NAMES: dict[StageCode, str] = {
    NewBuildStage.ORDER_CONFIRMED: "Order Confirmed",
    NewBuildStage.HULL_CONSTRUCTION: "Hull Construction",
    NewBuildStage.STRUCTURAL_WORK: "Structural Work",
    NewBuildStage.PROPULSION_INSTALLATION: "Propulsion Installation",
    NewBuildStage.ELECTRICAL_SYSTEMS: "Electrical Systems",
    NewBuildStage.INTERIOR_FINISHING: "Interior Finishing",
    NewBuildStage.DECK_EQUIPMENT: "Deck Equipment",
    NewBuildStage.QUALITY_INSPECTION: "Quality Inspection",
    NewBuildStage.SEA_TRIAL: "Sea Trial",
    NewBuildStage.FINAL_DELIVERY: "Final Delivery",
    MaintenanceStage.INTAKE: "Intake",
    MaintenanceStage.DIAGNOSIS: "Diagnosis",
    MaintenanceStage.PARTS_ORDERING: "Parts Ordering",
    MaintenanceStage.REPAIR_WORK: "Repair Work",
    MaintenanceStage.TESTING: "Testing",
    MaintenanceStage.DELIVERY: "Delivery",
}

# Days used to synthesize a missing end date
DEFAULT_STAGE_DURATIONS: dict[StageCode, int] = {
    NewBuildStage.ORDER_CONFIRMED: 7,
    NewBuildStage.HULL_CONSTRUCTION: 30,
    NewBuildStage.STRUCTURAL_WORK: 21,
    NewBuildStage.PROPULSION_INSTALLATION: 14,
    NewBuildStage.ELECTRICAL_SYSTEMS: 14,
    NewBuildStage.INTERIOR_FINISHING: 21,
    NewBuildStage.DECK_EQUIPMENT: 14,
    NewBuildStage.QUALITY_INSPECTION: 7,
    NewBuildStage.SEA_TRIAL: 3,
    NewBuildStage.FINAL_DELIVERY: 2,
}

FALLBACK_STAGE_DURATION = 14


def stage_vocabulary(
    category: UnitCategory,
) -> tuple[NewBuildStage, ...] | tuple[MaintenanceStage, ...]:
    """Ordered stage codes for a unit category."""
    if category == UnitCategory.MAINTENANCE:
        return MAINTENANCE_STAGES
    return NEW_BUILD_STAGES


def belongs_to(category: UnitCategory, code: StageCode) -> bool:
    return code in stage_vocabulary(category)


def parse_stage_code(category: UnitCategory, raw: str | StageCode) -> StageCode:
    """
    Resolve a raw stage code against a category's vocabulary.

    Raises:
        InvalidStageCodeError: If the code is not part of the vocabulary
    """
    value = raw.value if isinstance(raw, NewBuildStage | MaintenanceStage) else raw
    for code in stage_vocabulary(category):
        if code.value == value:
            return code
    raise InvalidStageCodeError(str(value), category.value)


def stage_name(code: StageCode) -> str:
    return STAGE_NAMES[code]


def default_duration(code: StageCode, fallback: int = FALLBACK_STAGE_DURATION) -> int:
    """Default length in days for a stage without an end date."""
    return DEFAULT_STAGE_DURATIONS.get(code, fallback)
